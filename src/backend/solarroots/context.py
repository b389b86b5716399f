"""Process-wide application context.

The vision document is loaded once at startup and shared read-only by every
request. Handlers receive it through the get_app_context dependency rather
than importing a module global.
"""

from dataclasses import dataclass

from fastapi import HTTPException, Request

from solarroots.config import Settings
from solarroots.models.directory import VisionConfig
from solarroots.services.vision_loader import load_vision_file


@dataclass(frozen=True)
class AppContext:
    """Immutable state shared by all requests."""

    settings: Settings
    vision: VisionConfig
    vision_document: str


def build_app_context(settings: Settings) -> AppContext:
    """Load the vision document named by settings.

    Raises:
        ConfigError: if the document cannot be read or parsed
    """
    vision, document = load_vision_file(settings.vision_config_path)
    return AppContext(settings=settings, vision=vision, vision_document=document)


def get_app_context(request: Request) -> AppContext:
    """Dependency returning the context installed at startup."""
    context = getattr(request.app.state, "context", None)
    if context is None:
        raise HTTPException(status_code=503, detail="Vision configuration not loaded")
    return context
