"""Directory and vision models.

These are the plain values exchanged between storage, the vision assessment
engine and the renderers.
"""

from solarroots.models.directory.assessment import (
    AssessmentMetrics,
    CamelModel,
    NextStep,
    VisionAssessment,
)
from solarroots.models.directory.site import DirectoryEntry
from solarroots.models.directory.vision import VisionConfig, VisionPillar, VisionTargets

__all__ = [
    "AssessmentMetrics",
    "CamelModel",
    "DirectoryEntry",
    "NextStep",
    "VisionAssessment",
    "VisionConfig",
    "VisionPillar",
    "VisionTargets",
]
