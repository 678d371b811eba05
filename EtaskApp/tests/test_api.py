from decimal import Decimal
from unittest import mock

import pytest
from model_bakery import baker

from EtaskApp.api.throttles import GradePassRateThrottle
from EtaskApp.tests.factories import make_item, make_student, set_grade

pytestmark = pytest.mark.django_db

COURSES_URL = "/api/v1/courses/"


def grade_table_url(course):
    return f"{COURSES_URL}{course.id}/grade-table/"


def grade_item_url(course, item=None):
    url = f"{COURSES_URL}{course.id}/grade-items/"
    return f"{url}{item.id}/" if item else url


def settings_url(course):
    return f"{COURSES_URL}{course.id}/format-settings/"


def test_anonymous_requests_are_rejected(api_client, course):
    assert api_client.get(COURSES_URL).status_code == 401
    assert api_client.get(grade_table_url(course)).status_code == 401


def test_course_list_shows_member_courses_only(client_for, course, teacher):
    baker.make("courses.Course", title="Other")
    resp = client_for(teacher).get(COURSES_URL)
    assert resp.status_code == 200
    assert [c["title"] for c in resp.data["results"]] == ["Algebra"]


def test_grade_table_json(client_for, course, section, teacher):
    item = make_item(course, section, module="quiz", name="Quiz 1", grade_pass=50)
    student = make_student(course, "Adams")
    set_grade(item, student, Decimal("64.5"))

    resp = client_for(teacher).get(grade_table_url(course))
    assert resp.status_code == 200
    data = resp.data
    assert data["course_id"] == course.id
    assert data["heads"][0]["short_title"] == "Q1"
    assert data["heads"][0]["grade_pass"] == "50"
    assert data["heads"][0]["progress"] == {"completed": 100, "passed": 100}
    cell = data["rows"][0]["cells"][0]
    assert cell["status"] == "passed"
    assert cell["display"] == "64"
    assert data["students_count"] == 1
    assert data["can_manage"] is True
    assert data["groups"] == []


def test_grade_table_private_view_for_students(client_for, course, section):
    make_item(course, section)
    viewer = make_student(course, "Brown")
    make_student(course, "Adams")
    data = client_for(viewer).get(grade_table_url(course)).data
    assert data["private_view"] is True
    assert [row["student"]["id"] for row in data["rows"]] == [viewer.id]


def test_grade_table_page_parameter(client_for, course, section, teacher):
    course.students_per_page = 1
    course.save()
    make_item(course, section)
    make_student(course, "Adams")
    make_student(course, "Brown")
    data = client_for(teacher).get(grade_table_url(course), {"page": 1}).data
    assert data["page"] == 1
    assert data["rows"][0]["student"]["last_name"] == "Brown"
    data = client_for(teacher).get(grade_table_url(course), {"page": 7}).data
    assert data["page"] == 0


def test_grade_table_requires_membership(client_for, course):
    outsider = baker.make("users.User")
    assert client_for(outsider).get(grade_table_url(course)).status_code == 403


def test_grade_items_list(client_for, course, section, noneditor):
    make_item(course, section, grade_max=2, grade_pass=1)
    resp = client_for(noneditor).get(grade_item_url(course))
    assert resp.status_code == 200
    row = resp.data["results"][0]
    assert row["grade_pass"] == 1
    assert row["grade_pass_display"] == "1"
    assert row["grade_pass_choices"] == [
        {"value": 0, "label": "-"}, {"value": 1, "label": "1"}, {"value": 2, "label": "2"},
    ]


def test_teacher_patches_grade_pass(client_for, course, section, teacher):
    item = make_item(course, section, name="Essay")
    resp = client_for(teacher).patch(grade_item_url(course, item), {"grade_pass": 70}, format="json")
    assert resp.status_code == 200
    assert resp.data["success"] is True
    assert resp.data["message"] == "Grade to pass for Essay was successfully updated to value 70."
    assert resp.data["grade_item"]["grade_pass"] == 70
    item.refresh_from_db()
    assert item.grade_pass == 70


def test_out_of_range_patch_answers_422(client_for, course, section, teacher):
    item = make_item(course, section, name="Essay", grade_max=10)
    resp = client_for(teacher).patch(grade_item_url(course, item), {"grade_pass": 11}, format="json")
    assert resp.status_code == 422
    assert resp.data["success"] is False
    assert resp.data["message"].startswith("Error in saving grade to pass for Essay.")


def test_negative_patch_is_a_bad_request(client_for, course, section, teacher):
    item = make_item(course, section)
    resp = client_for(teacher).patch(grade_item_url(course, item), {"grade_pass": -3}, format="json")
    assert resp.status_code == 400


def test_students_and_noneditors_cannot_patch(client_for, course, section, noneditor):
    item = make_item(course, section)
    student = make_student(course, "Adams")
    for user in (student, noneditor):
        resp = client_for(user).patch(grade_item_url(course, item), {"grade_pass": 5}, format="json")
        assert resp.status_code == 403


def test_grade_pass_updates_are_throttled(client_for, course, section, teacher):
    item = make_item(course, section)
    client = client_for(teacher)
    with mock.patch.object(GradePassRateThrottle, "rate", "2/hour"):
        codes = [
            client.patch(grade_item_url(course, item), {"grade_pass": value}, format="json").status_code
            for value in (1, 2, 3)
        ]
    assert codes == [200, 200, 429]


def test_format_settings_read_and_update(client_for, course, teacher):
    client = client_for(teacher)
    resp = client.get(settings_url(course))
    assert resp.status_code == 200
    assert resp.data["students_per_page"] is None

    resp = client.patch(settings_url(course), {"students_per_page": 5, "activities_sorting": "inherit"},
                        format="json")
    assert resp.status_code == 200
    course.refresh_from_db()
    assert course.students_per_page == 5
    assert course.activities_sorting == "inherit"


def test_format_settings_validation(client_for, course, teacher):
    resp = client_for(teacher).patch(settings_url(course), {"students_per_page": 0}, format="json")
    assert resp.status_code == 400


def test_format_settings_patch_requires_manager(client_for, course):
    student = make_student(course, "Adams")
    client = client_for(student)
    assert client.get(settings_url(course)).status_code == 200
    assert client.patch(settings_url(course), {"placement": "below"}, format="json").status_code == 403


def test_format_settings_hidden_from_outsiders(client_for, course):
    outsider = baker.make("users.User")
    assert client_for(outsider).get(settings_url(course)).status_code == 404
