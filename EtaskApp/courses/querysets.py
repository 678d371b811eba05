from django.db.models import QuerySet, Q

from EtaskApp.core.choices import MemberRole


class CourseQuerySet(QuerySet):
    def visible_to(self, user):
        if not user or not user.is_authenticated:
            return self.none()
        if user.is_superuser:
            return self.all()
        return self.filter(
            Q(owner=user) |
            Q(memberships__user=user)
        ).distinct()


class CourseMembershipQuerySet(QuerySet):
    def students(self):
        return self.filter(role=MemberRole.STUDENT)


class GradeItemQuerySet(QuerySet):
    def for_course(self, course):
        """Visible module grade items of a course, in insertion (id) order."""
        return (
            self.filter(course=course, hidden=False)
            .select_related("activity", "activity__section", "scale")
            .order_by("id")
        )
