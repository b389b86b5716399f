"""HTML rendering for the directory page.

The page is a static template with {{placeholder}} markers. Every fragment
substituted into it escapes free text first.
"""

import re
from collections.abc import Sequence
from functools import lru_cache
from pathlib import Path

from solarroots.models.directory import DirectoryEntry, NextStep, VisionAssessment, VisionConfig
from solarroots.security import InputSanitizer

TEMPLATE_PATH = Path(__file__).parent / "templates" / "index.html"
PLACEHOLDER = re.compile(r"\{\{(\w+)\}\}")

EMPTY_DIRECTORY_CARD = """<article class="site-card">
  <h2>No entries yet</h2>
  <p>Add a site by seeding the database or using the API at <code>/api/sites</code>.</p>
</article>"""

EMPTY_NEXT_STEPS = """<li class="next-step">
  <h3>Keep exploring</h3>
  <p>Experiment with the directory data to uncover new improvements.</p>
</li>"""

escape = InputSanitizer.escape_html


@lru_cache(maxsize=1)
def load_template() -> str:
    return TEMPLATE_PATH.read_text(encoding="utf-8")


def render_template(template: str, values: dict[str, str]) -> str:
    """Replace each {{key}} marker with its value in a single pass.

    Substituted values are not rescanned, so markers inside user text stay
    literal. Unknown markers are left in place.
    """
    return PLACEHOLDER.sub(lambda match: values.get(match.group(1), match.group(0)), template)


def render_site_card(entry: DirectoryEntry) -> str:
    tag_list = "".join(f'<span class="tag">{escape(tag)}</span>' for tag in entry.tags)
    description = f"<p>{escape(entry.description)}</p>" if entry.description else ""
    link = (
        f'<a href="{InputSanitizer.escape_attribute(entry.website)}" target="_blank" '
        'rel="noopener noreferrer">Visit site</a>'
        if entry.website
        else ""
    )
    return f"""<article class="site-card">
  <h2>{escape(entry.name)}</h2>
  {description}
  {link}
  <div class="tag-list">{tag_list}</div>
</article>"""


def render_site_cards(entries: Sequence[DirectoryEntry]) -> str:
    if not entries:
        return EMPTY_DIRECTORY_CARD
    return "\n".join(render_site_card(entry) for entry in entries)


def render_next_steps(steps: Sequence[NextStep]) -> str:
    if not steps:
        return EMPTY_NEXT_STEPS
    return "\n".join(
        f"""<li class="next-step">
  <h3>{escape(step.title)}</h3>
  <p>{escape(step.description)}</p>
</li>"""
        for step in steps
    )


def _status(met: bool) -> str:
    return "met" if met else "not yet met"


def render_vision_progress(assessment: VisionAssessment) -> str:
    return f"{assessment.progress_score:.1f}% aligned with the SolarRoots vision"


def render_vision_metrics(assessment: VisionAssessment) -> str:
    """Metrics list items: volume, depth and breadth against their targets."""
    m = assessment.metrics
    items = [
        f"Sites: {m.site_count} of {m.minimum_sites} ({_status(m.meets_minimum_sites)})",
        (
            f"Average tags per site: {m.average_tags_per_site:.1f} of "
            f"{m.minimum_tag_density:.1f} ({_status(m.meets_minimum_tag_density)})"
        ),
        (
            f"Recommended tags covered: {len(m.present_recommended_tags)} of "
            f"{len(m.recommended_tags)} ({m.coverage_ratio * 100:.0f}%)"
        ),
    ]
    return "\n".join(f"<li>{escape(item)}</li>" for item in items)


def render_vision_opportunities(assessment: VisionAssessment) -> str:
    return "\n".join(
        f'<li class="vision-tile"><p>{escape(text)}</p></li>'
        for text in assessment.opportunities
    )


def render_page(
    entries: Sequence[DirectoryEntry],
    next_steps: Sequence[NextStep],
    vision: VisionConfig,
    assessment: VisionAssessment,
) -> str:
    """Render the full directory page."""
    return render_template(
        load_template(),
        {
            "visionMission": escape(vision.mission.strip()),
            "siteCards": render_site_cards(entries),
            "visionProgress": escape(render_vision_progress(assessment)),
            "visionMetrics": render_vision_metrics(assessment),
            "visionOpportunities": render_vision_opportunities(assessment),
            "nextSteps": render_next_steps(next_steps),
        },
    )
