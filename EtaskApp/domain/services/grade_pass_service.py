"""Domain service functions for displaying and editing the grade to pass of grade items.

Only users with the manage capability may change a grade to pass. Every
attempt by such a user ends in a :class:`GradePassResult` carrying a
user-visible message; failures never propagate to the page renderer.
"""

import logging
from dataclasses import dataclass
from typing import Any

from django.core.exceptions import ValidationError
from django.db import DatabaseError, transaction
from django.utils.translation import gettext as _
from rest_framework.exceptions import PermissionDenied

from EtaskApp.core.access import can_manage
from EtaskApp.core.validators import round_half_up, validate_grade_pass
from EtaskApp.courses.models import Course
from EtaskApp.learning.models import GradeItem

logger = logging.getLogger(__name__)

EMPTY_CHOICE_LABEL = "-"


@dataclass(frozen=True)
class GradePassResult:
    success: bool
    message: str
    grade_item: GradeItem | None = None


def scale_menu(grade_item: GradeItem) -> dict[int, str]:
    """Scale labels of a scaled grade item, ``{}`` for numeric items."""
    if not grade_item.scale_id:
        return {}
    return grade_item.scale.as_menu()


def grade_pass_choices(grade_item: GradeItem) -> list[tuple[int, str]]:
    """Choices for the grade to pass select, ascending by value, ``0`` meaning not set."""
    if grade_item.scale_id:
        options = dict(scale_menu(grade_item))
    else:
        options = {value: str(value) for value in range(round_half_up(grade_item.grade_max), 0, -1)}
    options[0] = EMPTY_CHOICE_LABEL
    return sorted(options.items())


def display_value(grade_item: GradeItem, value: Any) -> str | None:
    """Human readable grade to pass, ``None`` when not set or not resolvable."""
    if value is None:
        return None
    rounded = round_half_up(value)
    if not rounded:
        return None
    if grade_item.scale_id:
        return scale_menu(grade_item).get(rounded)
    return str(rounded)


def update_grade_pass(actor, course: Course, grade_item_id: int, value: Any) -> GradePassResult:
    """Set the grade to pass of a grade item of ``course``.

    Raises:
        PermissionDenied: If ``actor`` lacks the manage capability.
    """
    if not can_manage(actor, course):
        raise PermissionDenied(_("Teacher role required"))

    grade_item = (
        GradeItem.objects.for_course(course).filter(pk=grade_item_id).first()
    )
    if grade_item is None:
        logger.warning("Grade item %s not found in course %s", grade_item_id, course.pk)
        return GradePassResult(False, failure_message(str(grade_item_id)))

    try:
        validate_grade_pass(grade_item, value)
    except ValidationError as exc:
        logger.info("Rejected grade to pass %r for grade item %s: %s", value, grade_item.pk, exc.messages)
        return GradePassResult(False, failure_message(grade_item.item_name), grade_item)

    grade_item.grade_pass = round_half_up(value)
    grade_item._history_user = actor
    grade_item._change_reason = "grade to pass updated from the grading table"
    try:
        with transaction.atomic():
            grade_item.save(update_fields=["grade_pass", "updated_at"])
    except DatabaseError:
        logger.exception("Failed to save grade to pass for grade item %s", grade_item.pk)
        return GradePassResult(False, failure_message(grade_item.item_name), grade_item)

    shown = display_value(grade_item, grade_item.grade_pass) or EMPTY_CHOICE_LABEL
    logger.info("Grade to pass of grade item %s set to %s by user %s", grade_item.pk, grade_item.grade_pass, actor.pk)
    message = _("Grade to pass for %(item_name)s was successfully updated to value %(grade_pass)s.") % {
        "item_name": grade_item.item_name,
        "grade_pass": shown,
    }
    return GradePassResult(True, message, grade_item)


def failure_message(item_name: str) -> str:
    return _(
        "Error in saving grade to pass for %(item_name)s. Please, try it again later or contact plugin developer."
    ) % {"item_name": item_name}
