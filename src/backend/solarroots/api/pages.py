"""HTML page router."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from solarroots.context import AppContext, get_app_context
from solarroots.db import get_db
from solarroots.rendering import render_page
from solarroots.services.next_steps import determine_next_steps
from solarroots.services.site_service import SiteService
from solarroots.services.vision_assessment import assess_directory

logger = logging.getLogger(__name__)

router = APIRouter(tags=["pages"])

PAGE_HEADERS = {"cache-control": "no-store"}


@router.get("/", response_class=HTMLResponse)
@router.get("/index.html", response_class=HTMLResponse, include_in_schema=False)
async def index(
    context: AppContext = Depends(get_app_context),
    db: AsyncSession = Depends(get_db),
):
    """Render the directory page."""
    try:
        entries = await SiteService(db).list_entries()
    except SQLAlchemyError:
        logger.exception("Failed to load page")
        return PlainTextResponse("Internal Server Error", status_code=500)

    html = render_page(
        entries,
        determine_next_steps(entries),
        context.vision,
        assess_directory(entries, context.vision.directory_targets),
    )
    return HTMLResponse(html, headers=PAGE_HEADERS)
