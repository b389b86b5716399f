"""Site service - business logic for directory entries."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from solarroots.db.models import Site, SiteTag, Tag
from solarroots.models.directory import DirectoryEntry


def _normalize_tags(tags: list[str] | None) -> list[str]:
    """Strip labels and drop blanks and repeats, keeping first occurrences."""
    labels: list[str] = []
    for tag in tags or []:
        label = tag.strip()
        if label and label not in labels:
            labels.append(label)
    return labels


def to_entry(site: Site) -> DirectoryEntry:
    """Convert a loaded Site row into an immutable DirectoryEntry."""
    return DirectoryEntry(
        id=site.id,
        name=site.name,
        description=site.description,
        website=site.website,
        tags=tuple(site.tag_labels),
    )


class SiteService:
    """Service for directory site operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _get_or_create_tags(self, labels: list[str]) -> list[Tag]:
        if not labels:
            return []

        result = await self.db.execute(select(Tag).where(Tag.label.in_(labels)))
        existing = {tag.label: tag for tag in result.scalars().all()}

        tags = []
        for label in labels:
            tag = existing.get(label)
            if tag is None:
                tag = Tag(label=label)
                self.db.add(tag)
                existing[label] = tag
            tags.append(tag)

        await self.db.flush()
        return tags

    async def create(
        self,
        name: str,
        description: str | None = None,
        website: str | None = None,
        tags: list[str] | None = None,
    ) -> DirectoryEntry:
        """Create a new site with its tags."""
        site = Site(name=name, description=description or None, website=website or None)
        for position, tag in enumerate(await self._get_or_create_tags(_normalize_tags(tags))):
            site.tag_links.append(SiteTag(tag=tag, position=position))

        self.db.add(site)
        await self.db.flush()
        return to_entry(site)

    async def get(self, site_id: int) -> DirectoryEntry | None:
        """Get a directory entry by ID."""
        result = await self.db.execute(
            select(Site)
            .where(Site.id == site_id)
            .options(selectinload(Site.tag_links).selectinload(SiteTag.tag))
        )
        site = result.scalar_one_or_none()
        return to_entry(site) if site else None

    async def list_entries(self) -> list[DirectoryEntry]:
        """List all entries, newest first."""
        result = await self.db.execute(
            select(Site)
            .options(selectinload(Site.tag_links).selectinload(SiteTag.tag))
            .order_by(Site.created_at.desc(), Site.id.desc())
        )
        return [to_entry(site) for site in result.scalars().all()]
