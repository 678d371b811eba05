"""Serializers for courses, display settings, grade items and the grading table."""

from rest_framework import serializers
from django.contrib.auth import get_user_model

from EtaskApp.courses.models import Course
from EtaskApp.learning.models import GradeItem
from EtaskApp.domain.services import grade_pass_service

User = get_user_model()


class UserSerializer(serializers.ModelSerializer):
    """Public, safe representation of a user."""

    class Meta:
        model = User
        fields = ["id", "email", "first_name", "last_name"]


class CourseReadSerializer(serializers.ModelSerializer):
    """Serializer for reading course details including owner."""
    owner = UserSerializer()

    class Meta:
        model = Course
        fields = ["id", "title", "description", "owner", "created_at", "updated_at"]


class CourseFormatSettingsSerializer(serializers.ModelSerializer):
    """Course-level grading table toggles; ``null`` inherits the site setting."""

    class Meta:
        model = Course
        fields = ["private_view", "progress_bars", "students_per_page", "activities_sorting", "placement"]


class EtaskConfigSerializer(serializers.Serializer):
    """Effective (resolved) display configuration."""
    private_view = serializers.BooleanField()
    progress_bars = serializers.BooleanField()
    students_per_page = serializers.IntegerField()
    activities_sorting = serializers.CharField()
    placement = serializers.CharField()


class GradeItemReadSerializer(serializers.ModelSerializer):
    """Grade item with its grade to pass resolved for display and the editable choices."""
    module = serializers.CharField(source="activity.module", read_only=True)
    activity_id = serializers.IntegerField(read_only=True)
    grade_pass = serializers.SerializerMethodField()
    grade_pass_display = serializers.SerializerMethodField()
    grade_pass_choices = serializers.SerializerMethodField()

    class Meta:
        model = GradeItem
        fields = ["id", "activity_id", "module", "item_name", "grade_max", "scale",
                  "grade_pass", "grade_pass_display", "grade_pass_choices"]

    def get_grade_pass(self, obj: GradeItem) -> int:
        return int(obj.grade_pass)

    def get_grade_pass_display(self, obj: GradeItem) -> str | None:
        return grade_pass_service.display_value(obj, obj.grade_pass)

    def get_grade_pass_choices(self, obj: GradeItem) -> list[dict]:
        return [{"value": value, "label": label} for value, label in grade_pass_service.grade_pass_choices(obj)]


class GradePassWriteSerializer(serializers.Serializer):
    """Payload of a grade to pass update."""
    grade_pass = serializers.IntegerField(min_value=0)


class GradePassResultSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    message = serializers.CharField()
    grade_item = GradeItemReadSerializer(allow_null=True)


class ProgressSerializer(serializers.Serializer):
    completed = serializers.IntegerField()
    passed = serializers.IntegerField()


class HeadCellSerializer(serializers.Serializer):
    grade_item_id = serializers.IntegerField(source="grade_item.id")
    activity_id = serializers.IntegerField(source="grade_item.activity_id")
    module = serializers.CharField(source="grade_item.module")
    item_name = serializers.CharField(source="grade_item.item_name")
    short_title = serializers.CharField()
    title = serializers.CharField()
    progress = ProgressSerializer()
    grade_pass = serializers.CharField(allow_null=True)
    due_date = serializers.DateTimeField(allow_null=True)


class BodyCellSerializer(serializers.Serializer):
    grade_item_id = serializers.IntegerField(source="grade_item.id")
    status = serializers.CharField()
    display = serializers.CharField(allow_blank=True)
    title = serializers.CharField()


class RowSerializer(serializers.Serializer):
    student = UserSerializer()
    is_viewer = serializers.BooleanField()
    cells = BodyCellSerializer(many=True)


class GroupSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField()


class GradeTableSerializer(serializers.Serializer):
    """JSON rendition of :class:`~EtaskApp.domain.services.grade_table_service.GradeTable`."""
    course_id = serializers.IntegerField(source="course.id")
    config = EtaskConfigSerializer()
    heads = HeadCellSerializer(many=True)
    rows = RowSerializer(many=True)
    students_count = serializers.IntegerField()
    page = serializers.IntegerField()
    per_page = serializers.IntegerField()
    num_pages = serializers.IntegerField()
    groups = serializers.SerializerMethodField()
    selected_group = serializers.IntegerField(allow_null=True)
    private_view = serializers.BooleanField()
    can_manage = serializers.BooleanField()

    def get_groups(self, obj) -> list[dict]:
        groups = obj.groups if obj.show_group_filter else {}
        return GroupSerializer(
            [{"id": group_id, "name": name} for group_id, name in groups.items()], many=True
        ).data
