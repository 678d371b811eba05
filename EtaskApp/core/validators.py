"""Validation helpers for grade to pass values."""

from decimal import Decimal, ROUND_HALF_UP
from typing import Any

from django.core.exceptions import ValidationError
from django.utils.translation import gettext as _


def round_half_up(value: Any) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def grade_pass_domain(grade_item) -> set[int]:
    """Return the allowed grade to pass values of a grade item (0 means not set)."""
    if grade_item.scale_id:
        return {0, *grade_item.scale.as_menu().keys()}
    return set(range(0, round_half_up(grade_item.grade_max) + 1))


def grade_pass_in_domain(grade_item, value: Any) -> bool:
    """True if ``value`` is a whole number within the grade item's domain."""
    try:
        number = Decimal(str(value))
    except ArithmeticError:
        return False
    if not number.is_finite() or number != number.to_integral_value():
        return False
    return int(number) in grade_pass_domain(grade_item)


def validate_grade_pass(grade_item, value: Any) -> None:
    """Ensure a grade to pass lies in the scale domain (scaled items) or in 0..grade_max."""
    if not grade_pass_in_domain(grade_item, value):
        if grade_item.scale_id:
            raise ValidationError(_("Grade to pass must be one of the scale values."))
        raise ValidationError(
            _("Grade to pass must be a whole number between 0 and %(max)s.") % {"max": round_half_up(grade_item.grade_max)}
        )
