"""Column ordering and numbering of grade items.

Functions here work on any objects exposing ``id``, ``activity_id`` and
``module`` so they can be exercised without the database.
"""

from collections.abc import Iterable, Sequence
from typing import Any

from django.utils.translation import gettext_lazy as _

from EtaskApp.core.choices import ActivitiesSorting

MODULE_NAMES = {
    "assign": _("Assignment"),
    "quiz": _("Quiz"),
    "workshop": _("Workshop"),
    "lesson": _("Lesson"),
    "forum": _("Forum"),
    "glossary": _("Glossary"),
    "data": _("Database"),
    "lti": _("External tool"),
    "scorm": _("SCORM package"),
    "h5pactivity": _("H5P"),
}


def sort_grade_items(items: Iterable[Any], mode: str, sequence: Iterable[Iterable[int]] = ()) -> list:
    """Order grade items by the configured activities sorting mode.

    Args:
        items: Grade items.
        mode: ``latest`` (id descending), ``oldest`` (id ascending) or
            ``inherit`` (course section order). Unknown modes act as ``latest``.
        sequence: For ``inherit``: sections in course order, each an ordered
            iterable of activity ids.
    """
    items = list(items)
    if mode == ActivitiesSorting.OLDEST:
        return sorted(items, key=lambda item: item.id)
    if mode == ActivitiesSorting.INHERIT:
        return sort_by_sections(items, sequence)
    return sorted(items, key=lambda item: item.id, reverse=True)


def sort_by_sections(items: Iterable[Any], sequence: Iterable[Iterable[int]]) -> list:
    """Emit grade items activity by activity in section order.

    Items of one activity keep their input order. Activities missing from
    ``sequence`` follow at the end, in the order they were first seen.
    """
    by_activity: dict[int, list] = {}
    for item in items:
        by_activity.setdefault(item.activity_id, []).append(item)

    ordered = []
    placed = set()
    for section in sequence:
        for activity_id in section:
            if activity_id in by_activity and activity_id not in placed:
                ordered.extend(by_activity[activity_id])
                placed.add(activity_id)

    for activity_id, group in by_activity.items():
        if activity_id not in placed:
            ordered.extend(group)
    return ordered


def number_activities(items: Iterable[Any]) -> dict[int, int]:
    """Ordinal of each activity within its module, counted in grade item id order."""
    counters: dict[str, int] = {}
    numbers: dict[int, int] = {}
    for item in sorted(items, key=lambda item: item.id):
        if item.activity_id in numbers:
            continue
        counters[item.module] = counters.get(item.module, 0) + 1
        numbers[item.activity_id] = counters[item.module]
    return numbers


def short_title(module: str, number: int) -> str:
    """Column label such as ``A1`` for the first assignment."""
    return f"{module[:1].upper()}{number}"


def module_display_name(module: str) -> str:
    """Localized name of a module, e.g. ``Assignment`` for ``assign``."""
    name = MODULE_NAMES.get(module)
    return str(name) if name is not None else module.capitalize()


def section_sequence(sections: Sequence[Any]) -> list[list[int]]:
    """Activity ids per section, for sections with a prefetched ``activities`` relation."""
    return [[activity.id for activity in section.activities.all()] for section in sections]
