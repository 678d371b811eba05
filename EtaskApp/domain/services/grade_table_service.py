"""Domain service building the grading table of a course for one viewer.

Pipeline: roster -> grade items -> grades and completion -> per-cell status ->
per-activity progress -> private view / ordering -> page slice.

Progress is collected over every student allowed by the group filter before
the private view and the page slice are applied.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any

from django.db.models import Prefetch

from EtaskApp.core.access import can_manage, can_view_all
from EtaskApp.core.choices import ActivitiesSorting, GradeStatus
from EtaskApp.core.config import EtaskConfig, due_date_fields, get_etask_config
from EtaskApp.courses.models import Course, Section
from EtaskApp.domain.progress import Progress, summarize
from EtaskApp.domain.sequencing import (
    module_display_name,
    number_activities,
    section_sequence,
    short_title,
    sort_grade_items,
)
from EtaskApp.domain.services import grade_pass_service, roster_service
from EtaskApp.domain.status import classify_status
from EtaskApp.learning.models import Activity, ActivityCompletion, Grade, GradeItem

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GradeTableRequest:
    """Request-scoped table state: group filter, 0-based page and editing mode."""
    group: int | None = None
    page: int = 0
    editing: bool = False

    @classmethod
    def from_params(cls, params) -> "GradeTableRequest":
        """Read the state from query parameters; malformed values fall back to defaults."""
        return cls(
            group=_int_or_none(params.get("group")),
            page=_int_or_none(params.get("page")) or 0,
            editing=params.get("edit") in ("1", "on", "true"),
        )


def _int_or_none(value) -> int | None:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


@dataclass
class HeadCell:
    grade_item: GradeItem
    short_title: str
    title: str
    progress: Progress
    grade_pass: str | None
    due_date: datetime | None
    editable: bool = False
    grade_pass_choices: list[tuple[int, str]] = field(default_factory=list)

    @property
    def activity(self) -> Activity:
        return self.grade_item.activity


@dataclass
class BodyCell:
    grade_item: GradeItem
    status: str
    display: str
    grade_id: int | None = None
    title: str = ""


@dataclass
class Row:
    student: Any
    cells: list[BodyCell]
    is_viewer: bool = False


@dataclass
class GradeTable:
    course: Course
    config: EtaskConfig
    heads: list[HeadCell]
    rows: list[Row]
    students_count: int
    page: int
    per_page: int
    groups: dict[int, str]
    selected_group: int | None
    can_manage: bool
    can_view_all: bool
    private_view: bool

    @property
    def num_pages(self) -> int:
        return max(1, -(-self.students_count // self.per_page))

    @property
    def show_group_filter(self) -> bool:
        return bool(self.groups) and self.can_view_all

    @property
    def placement(self) -> str:
        return self.config.placement


def whole_grade(value: Decimal | None) -> int | None:
    """Final grade truncated toward zero; fractions of a point are not shown or compared."""
    if value is None:
        return None
    return int(value)


def grade_display(grade_item: GradeItem, grade: int | None) -> str:
    """Text shown in a grade cell; empty when there is nothing to show."""
    if not grade:
        return ""
    if grade_item.scale_id:
        return grade_pass_service.scale_menu(grade_item).get(grade, "")
    return str(grade)


def get_due_date(activity: Activity, fields: dict[str, str]) -> datetime | None:
    """Due date from the module's registered field, else the expected completion date."""
    field_name = fields.get(activity.module)
    due = getattr(activity, field_name, None) if field_name else None
    if isinstance(due, datetime):
        return due
    return activity.completion_expected


def paginate(rows: list, page: int, per_page: int) -> tuple[list, int]:
    """Slice ``rows`` to one page; out-of-range pages fall back to the first one."""
    if page < 0 or len(rows) <= page * per_page:
        page = 0
    start = page * per_page
    return rows[start:start + per_page], page


def build_grade_table(course: Course, viewer, request: GradeTableRequest | None = None) -> GradeTable:
    request = request or GradeTableRequest()
    config = get_etask_config(course)
    manager = can_manage(viewer, course)
    privileged = can_view_all(viewer, course)

    groups = roster_service.get_course_groups(course)
    selected_group = roster_service.resolve_selected_group(course, viewer, request.group)
    students = roster_service.get_students(course, viewer, selected_group)

    grade_items = list(GradeItem.objects.for_course(course)) if students else []
    numbers = number_activities(grade_items)
    sequence = []
    if config.activities_sorting == ActivitiesSorting.INHERIT:
        sections = Section.objects.filter(course=course).prefetch_related(
            Prefetch("activities", queryset=Activity.objects.order_by("position", "id"))
        )
        sequence = section_sequence(sections)
    grade_items = sort_grade_items(grade_items, config.activities_sorting, sequence)

    grades = {
        (grade.grade_item_id, grade.user_id): grade
        for grade in Grade.objects.filter(grade_item__in=grade_items, user__in=students)
    }
    completed = {
        (completion.activity_id, completion.user_id)
        for completion in ActivityCompletion.objects.filter(
            activity__in={item.activity_id for item in grade_items}, user__in=students
        )
        if completion.is_complete
    }

    viewer_id = getattr(viewer, "id", None)
    private_view = roster_service.is_private_view(course, viewer, config.private_view)
    shown = roster_service.visible_rows(students, viewer_id, private_view)
    shown_ids = {student.id for student in shown}

    statuses: dict[int, list[str]] = {item.id: [] for item in grade_items}
    cells_by_student: dict[int, list[BodyCell]] = {student.id: [] for student in shown}
    for student in students:
        for item in grade_items:
            grade = grades.get((item.id, student.id))
            final_grade = whole_grade(grade.final_grade) if grade else None
            status = classify_status(final_grade, item.grade_pass, (item.activity_id, student.id) in completed)
            statuses[item.id].append(status)
            if student.id in shown_ids:
                cells_by_student[student.id].append(BodyCell(
                    grade_item=item,
                    status=status,
                    display=grade_display(item, final_grade),
                    grade_id=grade.id if grade else None,
                    title=f"{student.full_name}: {item.item_name}",
                ))

    calculate_progress = config.progress_bars or privileged
    fields = due_date_fields()
    heads = []
    for item in grade_items:
        progress = summarize(statuses[item.id], len(students)) if calculate_progress else Progress()
        editable = manager and request.editing
        heads.append(HeadCell(
            grade_item=item,
            short_title=short_title(item.module, numbers[item.activity_id]),
            title=f"{module_display_name(item.module)}: {item.item_name}",
            progress=progress,
            grade_pass=grade_pass_service.display_value(item, item.grade_pass),
            due_date=get_due_date(item.activity, fields),
            editable=editable,
            grade_pass_choices=grade_pass_service.grade_pass_choices(item) if editable else [],
        ))

    rows = [Row(student, cells_by_student[student.id], student.id == viewer_id) for student in shown]
    page_rows, page = paginate(rows, request.page, config.students_per_page)
    logger.debug("Grade table for course %s: %d students, %d items, page %d",
                 course.pk, len(students), len(grade_items), page)

    return GradeTable(
        course=course,
        config=config,
        heads=heads,
        rows=page_rows,
        students_count=len(rows),
        page=page,
        per_page=config.students_per_page,
        groups=groups,
        selected_group=selected_group,
        can_manage=manager,
        can_view_all=privileged,
        private_view=private_view,
    )


def status_legend() -> list[tuple[str, str]]:
    return [(status.value, status.label) for status in (GradeStatus.COMPLETED, GradeStatus.PASSED, GradeStatus.FAILED)]
