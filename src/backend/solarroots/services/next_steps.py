"""Next-step recommendations for growing the directory."""

from collections.abc import Sequence

from solarroots.models.directory import DirectoryEntry, NextStep

EVERGREEN_STEPS = (
    NextStep(
        id="extend-schema",
        title="Extend the directory schema",
        description="Model events, contacts, or regional data to support richer cooperative profiles.",
    ),
    NextStep(
        id="add-authentication",
        title="Introduce authenticated submissions",
        description="Secure write operations so trusted organizers can submit updates directly from the site.",
    ),
    NextStep(
        id="enhance-frontend",
        title="Pair with a richer frontend",
        description="Connect the directory API to a dedicated UI for multi-page navigation and advanced filtering.",
    ),
)


def _plural(count: int, singular: str, plural: str) -> str:
    return singular if count == 1 else plural


def determine_next_steps(entries: Sequence[DirectoryEntry]) -> list[NextStep]:
    """Suggest improvements based on gaps in the directory data.

    Data-driven steps come first, followed by the evergreen steps. Each step
    id appears at most once.
    """
    steps: list[NextStep] = []
    seen: set[str] = set()

    def add_step(step: NextStep) -> None:
        if step.id in seen:
            return
        seen.add(step.id)
        steps.append(step)

    if not entries:
        add_step(
            NextStep(
                id="seed-directory",
                title="Seed your directory data",
                description=(
                    "Add your first entries by seeding the database or sending a POST "
                    "request to the /api/sites endpoint."
                ),
            )
        )
    else:
        missing_descriptions = sum(1 for entry in entries if not entry.description)
        if missing_descriptions:
            add_step(
                NextStep(
                    id="enrich-descriptions",
                    title="Enrich site descriptions",
                    description=(
                        f"Provide meaningful descriptions for the {missing_descriptions} "
                        f"{_plural(missing_descriptions, 'entry', 'entries')} that currently "
                        "lack context."
                    ),
                )
            )

        missing_websites = sum(1 for entry in entries if not entry.website)
        if missing_websites:
            add_step(
                NextStep(
                    id="verify-links",
                    title="Add website links",
                    description=(
                        f"Share verified website URLs for {missing_websites} "
                        f"{_plural(missing_websites, 'cooperative', 'cooperatives')} so "
                        "visitors can connect directly."
                    ),
                )
            )

        distinct_tags = {tag for entry in entries for tag in entry.tags}
        if not distinct_tags:
            add_step(
                NextStep(
                    id="categorise-sites",
                    title="Add tags to categorise sites",
                    description=(
                        "Create or assign tags that highlight technologies, ownership "
                        "models, or regions to improve discovery."
                    ),
                )
            )
        elif len(distinct_tags) < max(3, len(entries)):
            add_step(
                NextStep(
                    id="expand-taxonomy",
                    title="Expand your tagging taxonomy",
                    description=(
                        "Broaden the tag set with additional topics so the directory can "
                        "filter and group projects more effectively."
                    ),
                )
            )

    for step in EVERGREEN_STEPS:
        add_step(step)

    return steps
