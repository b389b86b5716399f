"""SQLAlchemy ORM models."""

from datetime import UTC, datetime

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


def _utcnow() -> datetime:
    return datetime.now(UTC)


class Base(DeclarativeBase):
    """Base class for all models."""
    pass


class Site(Base):
    """Site - one organization listed in the directory."""

    __tablename__ = "sites"
    __table_args__ = (Index("ix_sites_created_at", "created_at"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    website: Mapped[str | None] = mapped_column(String(500))

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)

    # Relationships
    tag_links: Mapped[list["SiteTag"]] = relationship(
        back_populates="site",
        cascade="all, delete-orphan",
        order_by="SiteTag.position",
    )

    @property
    def tag_labels(self) -> list[str]:
        """Tag labels in the order they were attached."""
        return [link.tag.label for link in self.tag_links]


class Tag(Base):
    """Tag - a unique label shared across sites."""

    __tablename__ = "tags"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    label: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)


class SiteTag(Base):
    """Association between a site and a tag, ordered per site."""

    __tablename__ = "site_tags"

    site_id: Mapped[int] = mapped_column(
        ForeignKey("sites.id", ondelete="CASCADE"), primary_key=True
    )
    tag_id: Mapped[int] = mapped_column(
        ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    site: Mapped["Site"] = relationship(back_populates="tag_links")
    tag: Mapped["Tag"] = relationship(lazy="joined")


class InterestSignup(Base):
    """Interest Signup - an early supporter who asked to hear more."""

    __tablename__ = "interest_signups"
    __table_args__ = (Index("ix_interest_signups_email", "email"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str | None] = mapped_column(String(200))
    email: Mapped[str] = mapped_column(String(320), nullable=False)
    organization: Mapped[str | None] = mapped_column(String(200))
    message: Mapped[str | None] = mapped_column(Text)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)
