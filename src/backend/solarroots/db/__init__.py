"""Database module."""

from solarroots.db.models import Base, InterestSignup, Site, SiteTag, Tag
from solarroots.db.session import async_session_maker, engine, get_db

__all__ = [
    "Base",
    "Site",
    "Tag",
    "SiteTag",
    "InterestSignup",
    "get_db",
    "engine",
    "async_session_maker",
]
