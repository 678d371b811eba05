"""Grade cell status classification."""

from decimal import Decimal

from EtaskApp.core.choices import GradeStatus


def classify_status(grade: Decimal | int | None, grade_pass: Decimal | int | None, completed: bool) -> GradeStatus:
    """Return the status of one grade cell.

    Rules, in priority order:
        no grade and the activity is completed -> COMPLETED
        no grade or no grade to pass           -> NONE
        grade >= grade to pass                 -> PASSED
        otherwise                              -> FAILED

    A zero grade counts as no grade and a zero grade to pass as not set.
    """
    if not grade and completed:
        return GradeStatus.COMPLETED
    if not grade or not grade_pass:
        return GradeStatus.NONE
    if grade >= grade_pass:
        return GradeStatus.PASSED
    return GradeStatus.FAILED
