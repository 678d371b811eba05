"""REST API views for courses, grading table display settings, grade items and the grading table."""

from django.shortcuts import get_object_or_404

from rest_framework import status, mixins, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.request import Request
from rest_framework.views import APIView

from drf_spectacular.utils import (
    extend_schema,
    extend_schema_view,
    OpenApiResponse,
    OpenApiParameter,
)

from EtaskApp.courses.models import Course
from EtaskApp.api.mixins import PaginationMixin
from EtaskApp.api.throttles import GradePassRateThrottle
from EtaskApp.core.permissions import IsCourseMember, IsCourseManagerOrReadOnly
from EtaskApp.domain.services import grade_pass_service, grade_table_service
from EtaskApp.domain.services.grade_table_service import GradeTableRequest
from EtaskApp.learning.models import GradeItem
from EtaskApp.api.serializers import (
    CourseReadSerializer,
    CourseFormatSettingsSerializer,
    GradeItemReadSerializer,
    GradePassWriteSerializer,
    GradePassResultSerializer,
    GradeTableSerializer,
)

AUTH_RESPONSES = {
    401: OpenApiResponse(description="Authentication required."),
    403: OpenApiResponse(description="Forbidden"),
    404: OpenApiResponse(description="Not Found"),
}

VALIDATION_RESPONSE = {
    422: OpenApiResponse(response=GradePassResultSerializer, description="Semantic validation failed."),
}

COURSE_PK = OpenApiParameter("course_pk", int, OpenApiParameter.PATH)


# ---------- Courses ----------
@extend_schema_view(
    list=extend_schema(tags=["Courses"], responses={200: CourseReadSerializer(many=True), **AUTH_RESPONSES}),
    retrieve=extend_schema(tags=["Courses"], responses={200: CourseReadSerializer, **AUTH_RESPONSES}),
    format_settings=extend_schema(
        tags=["Courses"],
        methods=["GET", "PATCH"],
        request=CourseFormatSettingsSerializer,
        responses={200: CourseFormatSettingsSerializer, **AUTH_RESPONSES},
        description="Course-level grading table settings. `null` values inherit the site settings.",
        extensions={"x-permissions": {"required_roles": ["teacher", "owner"], "methods": ["PATCH"]}},
    ),
)
class CourseViewSet(PaginationMixin, viewsets.ReadOnlyModelViewSet):
    """Read access to courses and their grading table settings."""
    serializer_class = CourseReadSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        """Return course queryset filtered by visibility."""
        return Course.objects.visible_to(self.request.user).select_related("owner").order_by("id")

    def list(self, request: Request, *args, **kwargs) -> Response:
        """List courses visible to the requesting user."""
        return self.paginate_and_respond(self.get_queryset(), CourseReadSerializer)

    @action(detail=True, methods=["get", "patch"], url_path="format-settings",
            permission_classes=[IsAuthenticated, IsCourseManagerOrReadOnly])
    def format_settings(self, request: Request, pk: int | None = None) -> Response:
        """Read or update the course-level grading table settings."""
        course = self.get_object()
        if request.method == "GET":
            return Response(CourseFormatSettingsSerializer(course).data)
        ser = CourseFormatSettingsSerializer(course, data=request.data, partial=True)
        ser.is_valid(raise_exception=True)
        ser.save()
        return Response(ser.data)


# ---------- Grading table ----------
@extend_schema(
    tags=["Grading table"],
    parameters=[
        COURSE_PK,
        OpenApiParameter("group", int, OpenApiParameter.QUERY, required=False,
                         description="Group filter (teachers and non-editing teachers)."),
        OpenApiParameter("page", int, OpenApiParameter.QUERY, required=False, description="0-based page."),
    ],
    responses={200: GradeTableSerializer, **AUTH_RESPONSES},
)
class GradeTableView(APIView):
    """The grading table of a course as seen by the requesting user."""
    permission_classes = [IsAuthenticated, IsCourseMember]

    def get(self, request: Request, course_pk: int) -> Response:
        course = get_object_or_404(Course, pk=course_pk)
        table = grade_table_service.build_grade_table(
            course, request.user, GradeTableRequest.from_params(request.query_params)
        )
        return Response(GradeTableSerializer(table).data)


# ---------- Grade items ----------
@extend_schema_view(
    list=extend_schema(tags=["Grade items"], responses={200: GradeItemReadSerializer(many=True), **AUTH_RESPONSES}),
    retrieve=extend_schema(tags=["Grade items"], responses={200: GradeItemReadSerializer, **AUTH_RESPONSES}),
    partial_update=extend_schema(
        tags=["Grade items"],
        request=GradePassWriteSerializer,
        responses={
            200: GradePassResultSerializer,
            429: OpenApiResponse(description="Too many requests / throttled."),
            **AUTH_RESPONSES,
            **VALIDATION_RESPONSE,
        },
        description="Update the grade to pass. `0` clears it; scaled items take a scale value.",
        extensions={"x-permissions": {"required_roles": ["teacher", "owner"]}},
    ),
)
@extend_schema(parameters=[COURSE_PK])
class GradeItemViewSet(PaginationMixin, mixins.ListModelMixin, mixins.RetrieveModelMixin, viewsets.GenericViewSet):
    """Grade items of a course with grade to pass editing."""
    serializer_class = GradeItemReadSerializer
    permission_classes = [IsAuthenticated, IsCourseMember, IsCourseManagerOrReadOnly]

    def get_queryset(self):
        course = get_object_or_404(Course, pk=self.kwargs["course_pk"])
        return GradeItem.objects.for_course(course)

    def get_throttles(self):
        if self.action == "partial_update":
            return [GradePassRateThrottle()]
        return super().get_throttles()

    def list(self, request: Request, *args, **kwargs) -> Response:
        return self.paginate_and_respond(self.get_queryset(), GradeItemReadSerializer)

    def partial_update(self, request: Request, *args, **kwargs) -> Response:
        """Set the grade to pass; failures answer 422 with the user-visible message."""
        grade_item = self.get_object()
        ser = GradePassWriteSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        result = grade_pass_service.update_grade_pass(
            request.user, grade_item.course, grade_item.pk, ser.validated_data["grade_pass"]
        )
        code = status.HTTP_200_OK if result.success else status.HTTP_422_UNPROCESSABLE_ENTITY
        return Response(GradePassResultSerializer(result).data, status=code)
