"""Vision alignment scoring.

Compares the current directory against the vision's directory targets and
reports per-metric pass/fail, recommended-tag coverage, narrative
opportunities, and a single progress score.

Progress Score Factors (equal weight, each clamped to 1):
- Volume: site count / minimum sites
- Depth: average tags per site / minimum tag density
- Breadth: recommended-tag coverage ratio

A zero target counts as fully met for its factor.
"""

from collections import Counter
from collections.abc import Iterable, Iterator, Sequence
from decimal import ROUND_HALF_UP, Decimal

from solarroots.models.directory import (
    AssessmentMetrics,
    DirectoryEntry,
    VisionAssessment,
    VisionTargets,
)

DIRECTORY_NAME = "SolarRoots"


class OrderedTextSet:
    """Insertion-ordered set of strings; re-adding existing text is a no-op."""

    def __init__(self) -> None:
        self._items: list[str] = []
        self._seen: set[str] = set()

    def add(self, text: str) -> None:
        if text in self._seen:
            return
        self._seen.add(text)
        self._items.append(text)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)


def format_list(items: Sequence[str]) -> str:
    """Join items for prose: "a", "a and b", "a, b, and c"."""
    if not items:
        return ""
    if len(items) == 1:
        return items[0]
    if len(items) == 2:
        return f"{items[0]} and {items[1]}"
    return f"{', '.join(items[:-1])}, and {items[-1]}"


def _count_tags(entries: Iterable[DirectoryEntry]) -> tuple[int, Counter[str]]:
    occurrences: Counter[str] = Counter()
    total = 0
    for entry in entries:
        for tag in entry.tags:
            total += 1
            occurrences[tag] += 1
    return total, occurrences


def _ratio(value: float, target: float) -> float:
    if target <= 0:
        return 1.0
    return min(value / target, 1.0)


def _round_half_up(value: float) -> float:
    """Round to one decimal, ties away from zero on the exact binary value."""
    return float(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def assess_directory(
    entries: Sequence[DirectoryEntry],
    targets: VisionTargets,
) -> VisionAssessment:
    """Score the directory against the vision targets.

    Pure and deterministic: neither argument is modified and no state is
    kept between calls.

    Args:
        entries: Directory entries as fetched from storage
        targets: The loaded vision directory targets

    Returns:
        VisionAssessment with metrics, opportunities and progress score
    """
    minimum_sites = targets.minimum_sites
    minimum_tag_density = targets.minimum_tag_density
    recommended_tags = list(targets.recommended_tags)
    storytelling_focus = list(targets.storytelling_focus)

    site_count = len(entries)
    total_tags, occurrences = _count_tags(entries)
    average_tags_per_site = total_tags / site_count if site_count else 0.0

    present_tags = [tag for tag in recommended_tags if tag in occurrences]
    missing_tags = [tag for tag in recommended_tags if tag not in occurrences]
    coverage_ratio = len(present_tags) / len(recommended_tags) if recommended_tags else 1.0

    meets_minimum_sites = site_count >= minimum_sites
    # With no sites the average is 0, so any positive density goal is unmet.
    meets_minimum_tag_density = (
        True if minimum_tag_density <= 0 else average_tags_per_site >= minimum_tag_density
    )

    metrics = AssessmentMetrics(
        site_count=site_count,
        minimum_sites=minimum_sites,
        meets_minimum_sites=meets_minimum_sites,
        total_tags=total_tags,
        average_tags_per_site=average_tags_per_site,
        minimum_tag_density=minimum_tag_density,
        meets_minimum_tag_density=meets_minimum_tag_density,
        recommended_tags=recommended_tags,
        present_recommended_tags=present_tags,
        missing_recommended_tags=missing_tags,
        coverage_ratio=coverage_ratio,
    )

    opportunities = OrderedTextSet()

    if not meets_minimum_sites and minimum_sites > 0:
        remaining = minimum_sites - site_count
        entry_word = "entry" if remaining == 1 else "entries"
        opportunities.add(
            f"Publish {remaining} more directory {entry_word} to reach the "
            f"{DIRECTORY_NAME} minimum of {minimum_sites}."
        )

    if not meets_minimum_tag_density and minimum_tag_density > 0:
        opportunities.add(
            f"Increase the average tags per site to at least {minimum_tag_density:.1f} "
            f"(currently {average_tags_per_site:.1f}) by documenting more dimensions "
            "of each cooperative."
        )

    if missing_tags:
        opportunities.add(
            f"Introduce tags for {format_list(missing_tags)} so the directory reflects "
            f"{DIRECTORY_NAME} focus areas."
        )

    if storytelling_focus:
        opportunities.add(
            f"Collect narratives covering {format_list(storytelling_focus)} to stay "
            f"aligned with the {DIRECTORY_NAME} storytelling focus."
        )

    factors = [
        _ratio(site_count, minimum_sites),
        _ratio(average_tags_per_site, minimum_tag_density),
        coverage_ratio,
    ]
    progress_score = _round_half_up(sum(factors) / len(factors) * 100)

    return VisionAssessment(
        metrics=metrics,
        storytelling_focus=storytelling_focus,
        opportunities=list(opportunities),
        progress_score=progress_score,
    )
