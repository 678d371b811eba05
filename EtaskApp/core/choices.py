"""Typed enumerations (TextChoices) for member roles, grade statuses and grading table display options."""
from django.db import models
from django.utils.translation import gettext_lazy as _


class MemberRole(models.TextChoices):
    """Role of a user within a specific course context."""
    TEACHER = "TEACHER", _("Teacher")
    NONEDITING_TEACHER = "NONEDITING_TEACHER", _("Non-editing teacher")
    STUDENT = "STUDENT", _("Student")


class CompletionState(models.IntegerChoices):
    """Completion state of an activity for one user, as tracked by the host."""
    INCOMPLETE = 0, _("Incomplete")
    COMPLETE = 1, _("Complete")
    COMPLETE_PASS = 2, _("Complete (pass)")
    COMPLETE_FAIL = 3, _("Complete (fail)")


class GradeStatus(models.TextChoices):
    """Status of a grade cell; the value doubles as the cell CSS class."""
    COMPLETED = "completed", _("Completed")
    PASSED = "passed", _("Passed")
    FAILED = "failed", _("Failed")
    NONE = "none", _("None")


class ActivitiesSorting(models.TextChoices):
    """Column order of the grading table."""
    LATEST = "latest", _("Sort the activities by the latest")
    OLDEST = "oldest", _("Sort the activities by the oldest")
    INHERIT = "inherit", _("Sort the activities as they are in the course")


class Placement(models.TextChoices):
    """Where the grading table sits relative to the course topics."""
    ABOVE = "above", _("Place the grading table above the course topics")
    BELOW = "below", _("Place the grading table below the course topics")
