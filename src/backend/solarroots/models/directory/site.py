"""Directory entry models."""

from pydantic import BaseModel, ConfigDict, Field


class DirectoryEntry(BaseModel):
    """One listed organization as fetched from storage."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    description: str | None = None
    website: str | None = None
    tags: tuple[str, ...] = Field(default_factory=tuple)
