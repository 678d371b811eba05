from rest_framework.permissions import BasePermission, SAFE_METHODS
from django.shortcuts import get_object_or_404

from EtaskApp.courses.models import Course
from EtaskApp.core.access import can_manage, is_member


class CourseResolverMixin:
    """Resolve the target course from the object or from the ``course_pk`` route kwarg."""

    def _course_from_view(self, view):
        if hasattr(view, "_resolved_course"):
            return view._resolved_course
        course = None
        kw = view.kwargs
        if "course_pk" in kw:
            course = get_object_or_404(Course, pk=kw["course_pk"])
        if course:
            view._resolved_course = course
        return course

    def _course_from_obj(self, obj):
        return obj if isinstance(obj, Course) else getattr(obj, "course", None)


class IsCourseMember(CourseResolverMixin, BasePermission):
    """Grants read access to members (any role), owners and superusers."""

    def has_permission(self, request, view):
        course = self._course_from_view(view)
        if course:
            return is_member(request.user, course)
        return True

    def has_object_permission(self, request, view, obj):
        return is_member(request.user, self._course_from_obj(obj))


class IsCourseManagerOrReadOnly(CourseResolverMixin, BasePermission):
    """
    Grants write access to users holding the manage capability of the course.
    Read (SAFE_METHODS) is left to membership checks.
    """

    def has_permission(self, request, view):
        if request.method in SAFE_METHODS:
            return True
        course = self._course_from_view(view)
        if course:
            return can_manage(request.user, course)
        return True

    def has_object_permission(self, request, view, obj):
        if request.method in SAFE_METHODS:
            return True
        return can_manage(request.user, self._course_from_obj(obj))
