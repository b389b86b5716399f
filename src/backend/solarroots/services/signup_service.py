"""Interest signup service."""

from sqlalchemy.ext.asyncio import AsyncSession

from solarroots.db.models import InterestSignup


class InterestSignupService:
    """Service for recording early interest."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(
        self,
        email: str,
        name: str | None = None,
        organization: str | None = None,
        message: str | None = None,
    ) -> InterestSignup:
        """Record a signup. Repeat signups from one email are kept."""
        signup = InterestSignup(
            email=email,
            name=name or None,
            organization=organization or None,
            message=message or None,
        )
        self.db.add(signup)
        await self.db.flush()
        return signup
