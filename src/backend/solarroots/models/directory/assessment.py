"""Assessment result models, serialized with camelCase keys."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for API-facing models that render camelCase JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class AssessmentMetrics(CamelModel):
    site_count: int
    minimum_sites: int
    meets_minimum_sites: bool
    total_tags: int
    average_tags_per_site: float
    minimum_tag_density: float
    meets_minimum_tag_density: bool
    recommended_tags: list[str]
    present_recommended_tags: list[str]
    missing_recommended_tags: list[str]
    coverage_ratio: float


class VisionAssessment(CamelModel):
    metrics: AssessmentMetrics
    storytelling_focus: list[str]
    opportunities: list[str]
    progress_score: float


class NextStep(CamelModel):
    """A suggested improvement for the directory."""

    id: str
    title: str
    description: str
