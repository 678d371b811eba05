"""Course domain models: Course, CourseMembership, CourseGroup, Section."""

from django.db import models
from django.conf import settings
from django.core.validators import MinValueValidator
from django.utils.translation import gettext_lazy as _

from simple_history.models import HistoricalRecords

from EtaskApp.core.choices import MemberRole, ActivitiesSorting, Placement
from EtaskApp.courses.querysets import CourseQuerySet, CourseMembershipQuerySet


User = settings.AUTH_USER_MODEL


class Course(models.Model):
    """A course owned by a user, carrying the grading table display options.

    Fields:
        title: Human readable course title.
        description: Optional longer text.
        owner: FK to user who owns/administers the course.
        private_view: Students see only their own grades. ``None`` inherits
            the site-level ``ETASK['PRIVATE_VIEW']``.
        progress_bars: Calculate the Completed/Passed bars. ``None`` inherits
            ``ETASK['PROGRESS_BARS']``.
        students_per_page: Rows per table page. ``None`` inherits
            ``ETASK['STUDENTS_PER_PAGE']``.
        activities_sorting: Column order (latest, oldest, as in the course).
        placement: Table above or below the course topics.
        created_at / updated_at: Timestamps.
        history: Audit history (django-simple-history).
    """
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    owner = models.ForeignKey(User, on_delete=models.PROTECT, related_name="owned_courses")
    private_view = models.BooleanField(
        _("eTask private view"), null=True, blank=True,
        help_text=_("This settings determines whether all the students can see each other's grades "
                    "in the eTask grading table or not."),
    )
    progress_bars = models.BooleanField(
        _("eTask progress bars"), null=True, blank=True,
        help_text=_("This settings determines whether progress bars Completed and Passed are "
                    "calculated in the eTask grading table activity popover or not."),
    )
    students_per_page = models.PositiveSmallIntegerField(
        _("eTask students per page"), null=True, blank=True,
        validators=[MinValueValidator(1)],
        help_text=_("This settings determines the number of students per page in the eTask grading table."),
    )
    activities_sorting = models.CharField(
        _("eTask activities sorting"), max_length=16,
        choices=ActivitiesSorting.choices, default=ActivitiesSorting.LATEST,
    )
    placement = models.CharField(
        _("eTask placement"), max_length=16,
        choices=Placement.choices, default=Placement.ABOVE,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)
    history = HistoricalRecords()

    objects = CourseQuerySet.as_manager()

    def __str__(self) -> str:
        return f"{self.title} (#{self.pk})"


class CourseMembership(models.Model):
    """Enrollment of a user in a course with a role.

    Constraints:
        uq_course_user: Prevent duplicate membership rows.
    """
    course = models.ForeignKey(Course, on_delete=models.CASCADE, related_name="memberships")
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name="course_memberships")
    role = models.CharField(max_length=24, choices=MemberRole.choices)
    added_by = models.ForeignKey(User, on_delete=models.PROTECT, related_name="members_added")
    created_at = models.DateTimeField(auto_now_add=True)

    objects = CourseMembershipQuerySet.as_manager()

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=["course", "user"], name="uq_course_user"),
        ]

    def __str__(self) -> str:
        return f"{self.user} -> {self.course} ({self.role})"


class CourseGroup(models.Model):
    """A named group of course members, used by the grading table group filter."""
    course = models.ForeignKey(Course, on_delete=models.CASCADE, related_name="groups")
    name = models.CharField(max_length=254)
    members = models.ManyToManyField(User, related_name="course_groups", blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["name", "id"]
        constraints = [
            models.UniqueConstraint(fields=["course", "name"], name="uq_course_group_name"),
        ]

    def __str__(self) -> str:
        return self.name


class Section(models.Model):
    """A course topic. Section 0 is the general section at the top of the course page."""
    course = models.ForeignKey(Course, on_delete=models.CASCADE, related_name="sections")
    number = models.PositiveSmallIntegerField()
    name = models.CharField(max_length=255, blank=True)
    summary = models.TextField(blank=True)
    visible = models.BooleanField(default=True)

    class Meta:
        ordering = ["number"]
        constraints = [
            models.UniqueConstraint(fields=["course", "number"], name="uq_course_section_number"),
        ]

    @property
    def display_name(self) -> str:
        if self.name:
            return self.name
        if self.number == 0:
            return str(_("General"))
        return f"{_('Topic')} {self.number}"

    def __str__(self) -> str:
        return f"{self.course}: {self.display_name}"
