"""Sites API router."""

import logging

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field, field_validator
from sqlalchemy.ext.asyncio import AsyncSession

from solarroots.db import get_db
from solarroots.models.directory import DirectoryEntry
from solarroots.security import InputSanitizer
from solarroots.services.site_service import SiteService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sites", tags=["sites"])


# Request models
class SiteCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=InputSanitizer.MAX_NAME_LENGTH)
    description: str | None = Field(None, max_length=InputSanitizer.MAX_DESCRIPTION_LENGTH)
    website: str | None = Field(None, max_length=InputSanitizer.MAX_URL_LENGTH)
    tags: list[str] = Field(default_factory=list, max_length=InputSanitizer.MAX_ARRAY_ITEMS)

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        name = InputSanitizer.sanitize_name(value)
        if not name:
            raise ValueError("Name is required")
        return name

    @field_validator("description")
    @classmethod
    def clean_description(cls, value: str | None) -> str | None:
        return InputSanitizer.sanitize_description(value) or None

    @field_validator("website")
    @classmethod
    def validate_website(cls, value: str | None) -> str | None:
        website = (value or "").strip()
        if not website:
            return None
        if not InputSanitizer.is_safe_url(website):
            raise ValueError("Website must be an http(s) URL")
        return website

    @field_validator("tags")
    @classmethod
    def clean_tags(cls, value: list[str]) -> list[str]:
        return InputSanitizer.sanitize_array(value)


# Endpoints
@router.get("", response_model=list[DirectoryEntry])
async def list_sites(db: AsyncSession = Depends(get_db)):
    """List every directory entry, newest first."""
    return await SiteService(db).list_entries()


@router.post("", response_model=DirectoryEntry, status_code=201)
async def create_site(
    data: SiteCreate,
    db: AsyncSession = Depends(get_db),
):
    """Add a site to the directory."""
    logger.info(f"Creating site: name={data.name}, tags={data.tags}")
    entry = await SiteService(db).create(
        name=data.name,
        description=data.description,
        website=data.website,
        tags=data.tags,
    )
    logger.info(f"Created site: id={entry.id}")
    return entry


@router.get("/{site_id}", response_model=DirectoryEntry)
async def get_site(
    site_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Get a directory entry by ID."""
    entry = await SiteService(db).get(site_id)
    if not entry:
        raise HTTPException(status_code=404, detail="Site not found")
    return entry
