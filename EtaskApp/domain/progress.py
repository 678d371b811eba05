"""Per-activity progress aggregation for the Completed / Passed bars."""

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP

from EtaskApp.core.choices import GradeStatus


@dataclass(frozen=True)
class Progress:
    """Whole percentages of students who completed (any outcome) and who passed."""
    completed: int = 0
    passed: int = 0


def percent(part: int, whole: int) -> int:
    """``100 * part / whole`` rounded half up; 0 for an empty population."""
    if whole <= 0:
        return 0
    value = Decimal(100 * part) / Decimal(whole)
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def summarize(statuses: Iterable[str], students_count: int) -> Progress:
    """Aggregate cell statuses of one activity into a :class:`Progress`.

    Completed counts every student with an outcome (completed, passed or
    failed); passed counts passed students only.
    """
    counts = Counter(statuses)
    done = counts[GradeStatus.COMPLETED] + counts[GradeStatus.PASSED] + counts[GradeStatus.FAILED]
    return Progress(
        completed=percent(done, students_count),
        passed=percent(counts[GradeStatus.PASSED], students_count),
    )
