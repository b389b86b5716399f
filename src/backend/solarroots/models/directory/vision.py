"""Vision configuration models.

The vision document is human-edited YAML:

    mission: ...
    pillars:
      - {id, title, description}
    directory_targets:
      minimum_sites: 10
      minimum_tag_density: 3
      recommended_tags: [...]
      storytelling_focus: [...]

Every model is frozen; sequences are tuples so a loaded config can be shared
across requests without copying.
"""

from pydantic import BaseModel, ConfigDict, Field


class VisionPillar(BaseModel):
    """A thematic pillar of the mission. Passed through, never scored."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str


class VisionTargets(BaseModel):
    """Directory targets the assessment engine scores against."""

    model_config = ConfigDict(frozen=True)

    minimum_sites: int = Field(..., ge=0)
    minimum_tag_density: float = Field(
        ..., ge=0, description="Average tags per site; 0 disables the density goal"
    )
    recommended_tags: tuple[str, ...]
    storytelling_focus: tuple[str, ...]


class VisionConfig(BaseModel):
    """Parsed vision document."""

    model_config = ConfigDict(frozen=True)

    mission: str
    pillars: tuple[VisionPillar, ...] = Field(default_factory=tuple)
    directory_targets: VisionTargets
