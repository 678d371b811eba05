"""Domain service functions deciding which students appear in the grading table.

Rules:
- Only members with the STUDENT role are listed.
- A student in one or more groups is listed when a group is selected and the
  student belongs to it; without a selected group, only when every group of
  the student is also a group of the viewer. Students in no group are always
  listed.
- Teachers and non-editing teachers always have a selected group when the
  course has groups (requested, then their own first group, then the course's
  first group). Other viewers never select a group.
- Private view restricts a plain student viewer to their own row.
"""

from collections.abc import Iterable, Sequence
from typing import Any

from django.contrib.auth import get_user_model

from EtaskApp.courses.models import Course, CourseGroup, CourseMembership
from EtaskApp.core.access import can_view_all, is_student

User = get_user_model()


def get_course_groups(course: Course) -> dict[int, str]:
    """Groups of a course as ``{id: name}`` ordered by name."""
    return dict(CourseGroup.objects.filter(course=course).order_by("name", "id").values_list("id", "name"))


def get_user_group_ids(course: Course, user: User) -> list[int]:
    """Ids of the course groups ``user`` belongs to, ordered by name."""
    if not getattr(user, "is_authenticated", False):
        return []
    return list(
        CourseGroup.objects.filter(course=course, members=user)
        .order_by("name", "id")
        .values_list("id", flat=True)
    )


def resolve_selected_group(course: Course, viewer: User, requested: int | None = None) -> int | None:
    """Group shown to the viewer, or ``None`` when filtering by the viewer's own groups."""
    if not can_view_all(viewer, course):
        return None
    course_groups = get_course_groups(course)
    if requested and requested in course_groups:
        return requested
    viewer_groups = get_user_group_ids(course, viewer)
    if viewer_groups:
        return viewer_groups[0]
    return next(iter(course_groups), None)


def is_allowed_by_groups(
    user_groups: Iterable[int],
    selected_group: int | None,
    viewer_groups: Iterable[int],
) -> bool:
    """Group part of the roster filter for one student."""
    user_groups = set(user_groups)
    if not user_groups:
        return True
    if selected_group:
        return selected_group in user_groups
    return user_groups <= set(viewer_groups)


def get_students(course: Course, viewer: User, selected_group: int | None = None) -> list[User]:
    """Students of the course allowed in the grading table of ``viewer``."""
    student_ids = CourseMembership.objects.filter(course=course).students().values_list("user_id", flat=True)
    students = list(
        User.objects.filter(pk__in=student_ids)
        .prefetch_related("course_groups")
        .order_by("last_name", "first_name", "id")
    )
    viewer_groups = get_user_group_ids(course, viewer)
    allowed = []
    for student in students:
        user_groups = [group.id for group in student.course_groups.all() if group.course_id == course.id]
        if is_allowed_by_groups(user_groups, selected_group, viewer_groups):
            allowed.append(student)
    return allowed


def is_private_view(course: Course, viewer: User, private_view_enabled: bool) -> bool:
    """True when the viewer is a student without elevated capability and private view is on."""
    return bool(private_view_enabled and is_student(viewer, course) and not can_view_all(viewer, course))


def visible_rows(students: Sequence[Any], viewer_id: int | None, private_view: bool) -> list:
    """Students shown as rows, in display order.

    Private view keeps the viewer's own row only; otherwise the viewer's row
    (when present) moves to the first position.
    """
    if private_view:
        return [student for student in students if student.id == viewer_id]
    own = [student for student in students if student.id == viewer_id]
    return own + [student for student in students if student.id != viewer_id]
