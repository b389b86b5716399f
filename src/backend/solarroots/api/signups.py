"""Interest signup API router."""

import logging
import re
from datetime import datetime

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field, field_validator
from sqlalchemy.ext.asyncio import AsyncSession

from solarroots.db import get_db
from solarroots.models.directory import CamelModel
from solarroots.security import InputSanitizer
from solarroots.services.signup_service import InterestSignupService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/interest", tags=["interest"])

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class InterestSignupCreate(BaseModel):
    """Request body for POST /api/interest."""

    email: str = Field(..., max_length=320)
    name: str | None = Field(None, max_length=InputSanitizer.MAX_NAME_LENGTH)
    organization: str | None = Field(None, max_length=InputSanitizer.MAX_NAME_LENGTH)
    message: str | None = Field(None, max_length=InputSanitizer.MAX_MESSAGE_LENGTH)

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        normalized = value.strip()
        if not normalized:
            raise ValueError("Email is required")
        if not EMAIL_PATTERN.match(normalized):
            raise ValueError("Invalid email format")
        return normalized

    @field_validator("name", "organization")
    @classmethod
    def clean_names(cls, value: str | None) -> str | None:
        return InputSanitizer.sanitize_name(value) or None

    @field_validator("message")
    @classmethod
    def clean_message(cls, value: str | None) -> str | None:
        return InputSanitizer.sanitize_message(value) or None


class InterestSignupResponse(CamelModel):
    id: int
    created_at: datetime


@router.post("", response_model=InterestSignupResponse, status_code=201)
async def create_interest_signup(
    data: InterestSignupCreate,
    db: AsyncSession = Depends(get_db),
):
    """Record interest from a visitor."""
    signup = await InterestSignupService(db).create(
        email=data.email,
        name=data.name,
        organization=data.organization,
        message=data.message,
    )
    logger.info(f"Recorded interest signup: id={signup.id}")
    return InterestSignupResponse(id=signup.id, created_at=signup.created_at)
