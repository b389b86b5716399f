"""Vision and next-steps API router."""

from datetime import UTC, datetime
from typing import Any

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from solarroots.context import AppContext, get_app_context
from solarroots.db import get_db
from solarroots.models.directory import CamelModel, NextStep, VisionAssessment
from solarroots.services.next_steps import determine_next_steps
from solarroots.services.site_service import SiteService
from solarroots.services.vision_assessment import assess_directory

router = APIRouter(tags=["vision"])


class NextStepsResponse(CamelModel):
    next_steps: list[NextStep]
    generated_at: datetime


class VisionResponse(CamelModel):
    vision: dict[str, Any]
    vision_document: str
    assessment: VisionAssessment
    generated_at: datetime


@router.get("/next-steps", response_model=NextStepsResponse)
async def get_next_steps(db: AsyncSession = Depends(get_db)):
    """Suggested improvements for the current directory."""
    entries = await SiteService(db).list_entries()
    return NextStepsResponse(
        next_steps=determine_next_steps(entries),
        generated_at=datetime.now(UTC),
    )


@router.get("/vision", response_model=VisionResponse)
async def get_vision(
    context: AppContext = Depends(get_app_context),
    db: AsyncSession = Depends(get_db),
):
    """The vision document and how the directory measures up to it."""
    entries = await SiteService(db).list_entries()
    return VisionResponse(
        vision=context.vision.model_dump(mode="json"),
        vision_document=context.vision_document,
        assessment=assess_directory(entries, context.vision.directory_targets),
        generated_at=datetime.now(UTC),
    )
