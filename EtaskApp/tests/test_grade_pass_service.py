from decimal import Decimal
from unittest import mock

import pytest
from django.db import DatabaseError
from model_bakery import baker
from rest_framework.exceptions import PermissionDenied

from EtaskApp.domain.services import grade_pass_service
from EtaskApp.tests.factories import make_item, make_student

pytestmark = pytest.mark.django_db


@pytest.fixture
def scale():
    return baker.make("learning.Scale", name="Marks", items="Poor, Fair, Good, Excellent")


def test_choices_for_numeric_item(course, section):
    item = make_item(course, section, grade_max=3)
    assert grade_pass_service.grade_pass_choices(item) == [(0, "-"), (1, "1"), (2, "2"), (3, "3")]


def test_choices_for_scaled_item(course, section, scale):
    item = make_item(course, section, grade_max=4, scale=scale)
    assert grade_pass_service.grade_pass_choices(item) == [
        (0, "-"), (1, "Poor"), (2, "Fair"), (3, "Good"), (4, "Excellent"),
    ]


def test_display_value(course, section, scale):
    numeric = make_item(course, section)
    scaled = make_item(course, section, grade_max=4, scale=scale)
    assert grade_pass_service.display_value(numeric, Decimal("55.00000")) == "55"
    assert grade_pass_service.display_value(numeric, 0) is None
    assert grade_pass_service.display_value(numeric, None) is None
    assert grade_pass_service.display_value(scaled, 3) == "Good"
    assert grade_pass_service.display_value(scaled, 9) is None


def test_teacher_updates_grade_pass(course, section, teacher):
    item = make_item(course, section, name="Essay")
    result = grade_pass_service.update_grade_pass(teacher, course, item.pk, 60)
    assert result.success is True
    assert result.message == "Grade to pass for Essay was successfully updated to value 60."
    item.refresh_from_db()
    assert item.grade_pass == 60


def test_update_records_history(course, section, teacher):
    item = make_item(course, section)
    grade_pass_service.update_grade_pass(teacher, course, item.pk, 40)
    latest = item.history.latest()
    assert latest.history_user == teacher
    assert latest.history_change_reason == "grade to pass updated from the grading table"
    assert latest.grade_pass == 40


def test_scaled_update_reports_scale_label(course, section, owner, scale):
    item = make_item(course, section, name="Poster", grade_max=4, scale=scale)
    result = grade_pass_service.update_grade_pass(owner, course, item.pk, 2)
    assert result.success is True
    assert result.message.endswith("to value Fair.")


def test_clearing_grade_pass_reports_dash(course, section, teacher):
    item = make_item(course, section, name="Essay", grade_pass=50)
    result = grade_pass_service.update_grade_pass(teacher, course, item.pk, 0)
    assert result.success is True
    assert result.message.endswith("to value -.")
    item.refresh_from_db()
    assert item.grade_pass == 0


@pytest.mark.parametrize("value", [101, -1, "abc", "12.5"])
def test_out_of_domain_value_fails(course, section, teacher, value):
    item = make_item(course, section, name="Essay", grade_pass=30)
    result = grade_pass_service.update_grade_pass(teacher, course, item.pk, value)
    assert result.success is False
    assert result.message == (
        "Error in saving grade to pass for Essay. Please, try it again later or contact plugin developer."
    )
    item.refresh_from_db()
    assert item.grade_pass == 30


def test_unknown_grade_item_fails(course, teacher):
    result = grade_pass_service.update_grade_pass(teacher, course, 424242, 10)
    assert result.success is False
    assert "424242" in result.message


def test_grade_item_of_other_course_fails(course, section, teacher):
    other = make_item(baker.make("courses.Course"), baker.make("courses.Section", number=1))
    result = grade_pass_service.update_grade_pass(teacher, course, other.pk, 10)
    assert result.success is False


def test_storage_error_fails(course, section, teacher):
    item = make_item(course, section, name="Essay")
    with mock.patch("EtaskApp.learning.models.GradeItem.save", side_effect=DatabaseError("gone")):
        result = grade_pass_service.update_grade_pass(teacher, course, item.pk, 10)
    assert result.success is False
    assert result.message.startswith("Error in saving grade to pass for Essay.")


def test_non_managers_are_denied(course, section, noneditor):
    item = make_item(course, section)
    student = make_student(course, "Student")
    for user in (noneditor, student):
        with pytest.raises(PermissionDenied):
            grade_pass_service.update_grade_pass(user, course, item.pk, 10)
    item.refresh_from_db()
    assert item.grade_pass == 0
