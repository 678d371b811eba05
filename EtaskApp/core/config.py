"""Grading table display configuration.

Resolution order for each option: the course's own value, then the site-level
plugin setting (``settings.ETASK``), then the built-in default.
"""

import logging
from dataclasses import dataclass

from django.conf import settings

from EtaskApp.core.choices import ActivitiesSorting, Placement

logger = logging.getLogger(__name__)

STUDENTS_PER_PAGE_DEFAULT = 10

DEFAULTS = {
    "PRIVATE_VIEW": True,
    "PROGRESS_BARS": True,
    "STUDENTS_PER_PAGE": STUDENTS_PER_PAGE_DEFAULT,
    "REGISTERED_DUE_DATE_MODULES": "assign:due_at,quiz:time_close,workshop:due_at,lesson:time_close",
}


@dataclass(frozen=True)
class EtaskConfig:
    private_view: bool = True
    progress_bars: bool = True
    students_per_page: int = STUDENTS_PER_PAGE_DEFAULT
    activities_sorting: str = ActivitiesSorting.LATEST
    placement: str = Placement.ABOVE


def plugin_settings() -> dict:
    """Site-level options merged over the defaults."""
    return {**DEFAULTS, **dict(getattr(settings, "ETASK", {}))}


def _first_set(*values):
    for value in values:
        if value is not None:
            return value
    return None


def get_etask_config(course) -> EtaskConfig:
    options = plugin_settings()

    students_per_page = int(_first_set(course.students_per_page, options["STUDENTS_PER_PAGE"],
                                       STUDENTS_PER_PAGE_DEFAULT))
    if students_per_page < 1:
        logger.warning("Ignoring students per page %s for course %s", students_per_page, course.pk)
        students_per_page = STUDENTS_PER_PAGE_DEFAULT

    sorting = course.activities_sorting
    if sorting not in ActivitiesSorting.values:
        sorting = ActivitiesSorting.LATEST
    placement = course.placement
    if placement not in Placement.values:
        placement = Placement.ABOVE

    return EtaskConfig(
        private_view=bool(_first_set(course.private_view, options["PRIVATE_VIEW"], True)),
        progress_bars=bool(_first_set(course.progress_bars, options["PROGRESS_BARS"], True)),
        students_per_page=students_per_page,
        activities_sorting=sorting,
        placement=placement,
    )


def parse_due_date_modules(text: str) -> dict[str, str]:
    """Parse ``"assign:due_at, quiz:time_close"`` into ``{"assign": "due_at", "quiz": "time_close"}``.

    Raises:
        ValueError: If a non-empty entry is not a ``module:field`` pair.
    """
    fields = {}
    for entry in (text or "").split(","):
        if not entry.strip():
            continue
        module, sep, field = entry.partition(":")
        if not sep or not module.strip() or not field.strip():
            raise ValueError(f"expected 'module:field', got {entry.strip()!r}")
        fields[module.strip()] = field.strip()
    return fields


def due_date_fields() -> dict[str, str]:
    """Registered due date field per module; malformed settings degrade to no fields."""
    try:
        return parse_due_date_modules(plugin_settings()["REGISTERED_DUE_DATE_MODULES"])
    except ValueError:
        logger.warning("Malformed ETASK['REGISTERED_DUE_DATE_MODULES'], due dates disabled", exc_info=True)
        return {}
