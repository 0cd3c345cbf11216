"""Title/subtitle templates for milestone events.

Selection logic lives in :mod:`lifelab.analytics.streaks`; this module only
turns a :class:`MilestoneEvent` into display copy.
"""

from __future__ import annotations

from typing import NamedTuple

from lifelab.models.events import MilestoneEvent, MilestoneKind, RecentEvent


class Icon:
    STREAK = "flame.fill"
    FIRST_TIME = "sparkles"
    COMPLETION = "checkmark.seal.fill"
    UPDATED = "square.and.pencil"
    EMPTY = "heart"


class Template(NamedTuple):
    icon: str
    title: str
    subtitle: str | None = None
    # Used instead of ``subtitle`` when count > 1.
    plural_subtitle: str | None = None


TEMPLATES: dict[MilestoneKind, Template] = {
    MilestoneKind.STREAK_DAYS: Template(
        Icon.STREAK, "{count} days in a row", "You've shown up consistently"
    ),
    MilestoneKind.PROGRESS_TODAY: Template(Icon.UPDATED, "You made progress today"),
    MilestoneKind.COMPLETED_YESTERDAY: Template(
        Icon.COMPLETION,
        "Completed yesterday",
        "A real milestone",
        plural_subtitle="{count} experiments finished",
    ),
    MilestoneKind.FIRST_IN_CATEGORY: Template(
        Icon.FIRST_TIME, "First time: {category}", "Love this direction"
    ),
    MilestoneKind.EMPTY_STATE: Template(Icon.EMPTY, "You're here", "That's the first step"),
}


def render(event: MilestoneEvent) -> RecentEvent:
    template = TEMPLATES[event.kind]
    values = {"count": event.count, "category": event.category}

    subtitle = template.subtitle
    if template.plural_subtitle and (event.count or 0) > 1:
        subtitle = template.plural_subtitle

    return RecentEvent(
        icon=template.icon,
        title=template.title.format(**values),
        subtitle=subtitle.format(**values) if subtitle else None,
    )


def render_all(events: list[MilestoneEvent]) -> list[RecentEvent]:
    return [render(e) for e in events]
