"""Role & capability helpers for the grading table.

Capabilities:
    manage    - full management (edit grades to pass, grade links): course
                owner, superuser or TEACHER member.
    view all  - read-only access to every student's row: manage, or
                NONEDITING_TEACHER member.
    student   - listed as a row; subject to the private view.
"""

from EtaskApp.courses.models import Course, CourseMembership
from EtaskApp.core.choices import MemberRole


def member_role(user, course: Course | None) -> str | None:
    if not (user and course) or not user.is_authenticated:
        return None
    return (
        CourseMembership.objects.filter(course=course, user=user)
        .values_list("role", flat=True)
        .first()
    )


def is_owner(user, course: Course | None) -> bool:
    return bool(user and course and course.owner_id == user.id)


def can_manage(user, course: Course | None) -> bool:
    if not (user and course) or not user.is_authenticated:
        return False
    if user.is_superuser or is_owner(user, course):
        return True
    return member_role(user, course) == MemberRole.TEACHER


def can_view_all(user, course: Course | None) -> bool:
    if can_manage(user, course):
        return True
    return member_role(user, course) == MemberRole.NONEDITING_TEACHER


def is_student(user, course: Course | None) -> bool:
    return member_role(user, course) == MemberRole.STUDENT


def is_member(user, course: Course | None) -> bool:
    if not (user and course) or not user.is_authenticated:
        return False
    return user.is_superuser or is_owner(user, course) or member_role(user, course) is not None
