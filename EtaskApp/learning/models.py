"""Learning domain models: Activity, Scale, GradeItem, Grade, ActivityCompletion."""

from django.db import models
from django.conf import settings
from django.core.validators import MinValueValidator

from EtaskApp.courses.models import Course, Section
from EtaskApp.core.choices import CompletionState
from EtaskApp.courses.querysets import GradeItemQuerySet

from simple_history.models import HistoricalRecords

User = settings.AUTH_USER_MODEL


class Activity(models.Model):
    """A course module instance (assignment, quiz, ...) placed in a section."""
    course = models.ForeignKey(Course, on_delete=models.CASCADE, related_name="activities")
    section = models.ForeignKey(Section, on_delete=models.CASCADE, related_name="activities")
    module = models.CharField(max_length=32, help_text="Module name, e.g. 'assign' or 'quiz'.")
    name = models.CharField(max_length=255)
    position = models.PositiveSmallIntegerField(default=0, help_text="Order within the section.")
    url = models.CharField(max_length=600, blank=True)
    due_at = models.DateTimeField(null=True, blank=True)
    time_close = models.DateTimeField(null=True, blank=True)
    completion_expected = models.DateTimeField(null=True, blank=True)
    visible = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name_plural = "activities"
        ordering = ["section__number", "position", "id"]

    def __str__(self) -> str:
        return f"{self.module}: {self.name}"


class Scale(models.Model):
    """An ordered list of labels; grade value ``n`` maps to the ``n``-th label (1-based)."""
    name = models.CharField(max_length=255)
    items = models.TextField(help_text="Comma separated labels, lowest first.")
    course = models.ForeignKey(Course, on_delete=models.CASCADE, null=True, blank=True, related_name="scales")

    def as_menu(self) -> dict[int, str]:
        labels = [label.strip() for label in self.items.split(",")]
        return {index: label for index, label in enumerate(labels, start=1) if label}

    def __str__(self) -> str:
        return self.name


class GradeItem(models.Model):
    """A gradable activity column with an editable grade to pass (0 = not set)."""
    course = models.ForeignKey(Course, on_delete=models.CASCADE, related_name="grade_items")
    activity = models.ForeignKey(Activity, on_delete=models.CASCADE, related_name="grade_items")
    item_name = models.CharField(max_length=255)
    grade_max = models.DecimalField(max_digits=10, decimal_places=5, default=100,
                                    validators=[MinValueValidator(0)])
    scale = models.ForeignKey(Scale, on_delete=models.SET_NULL, null=True, blank=True, related_name="grade_items")
    grade_pass = models.DecimalField(max_digits=10, decimal_places=5, default=0,
                                     validators=[MinValueValidator(0)])
    hidden = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)
    history = HistoricalRecords()

    objects = GradeItemQuerySet.as_manager()

    @property
    def module(self) -> str:
        return self.activity.module

    def __str__(self) -> str:
        return f"{self.module}: {self.item_name}"


class Grade(models.Model):
    """A learner's final grade for a grade item (scale index for scaled items)."""
    grade_item = models.ForeignKey(GradeItem, on_delete=models.CASCADE, related_name="grades")
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name="grades")
    final_grade = models.DecimalField(max_digits=10, decimal_places=5, null=True, blank=True,
                                      validators=[MinValueValidator(0)])
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=["grade_item", "user"], name="uq_grade_item_user"),
        ]

    def __str__(self) -> str:
        return f"[{self.final_grade}/{self.grade_item.grade_max}] for {self.user}"


class ActivityCompletion(models.Model):
    """Completion state of an activity for one user; a missing row means incomplete."""
    activity = models.ForeignKey(Activity, on_delete=models.CASCADE, related_name="completions")
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name="activity_completions")
    state = models.PositiveSmallIntegerField(choices=CompletionState.choices, default=CompletionState.INCOMPLETE)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=["activity", "user"], name="uq_activity_user"),
        ]

    @property
    def is_complete(self) -> bool:
        return self.state != CompletionState.INCOMPLETE
