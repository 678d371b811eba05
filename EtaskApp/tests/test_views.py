from decimal import Decimal

import pytest
from django.contrib.messages import get_messages
from django.urls import reverse
from model_bakery import baker

from EtaskApp.tests.factories import make_item, make_student, set_grade

pytestmark = pytest.mark.django_db


def course_url(course):
    return reverse("gradetable:course", args=[course.id])


def test_login_required(client, course):
    resp = client.get(course_url(course))
    assert resp.status_code == 302
    assert "/admin/login/" in resp["Location"]


def test_outsiders_get_404(client, course):
    client.force_login(baker.make("users.User"))
    assert client.get(course_url(course)).status_code == 404


def test_course_page_renders_table_and_topics(client, course, section, teacher):
    item = make_item(course, section, name="Essay", grade_pass=50)
    student = make_student(course, "Adams", "Adam")
    set_grade(item, student, Decimal("80"))
    client.force_login(teacher)

    resp = client.get(course_url(course))
    assert resp.status_code == 200
    html = resp.content.decode()
    assert "Week 1" in html
    assert "A1" in html
    assert "Adam Adams" in html
    assert 'class="grade-item-grade text-center passed"' in html
    assert "grade-pass-form" not in html
    assert resp.context["table"].placement == "above"


def test_editing_mode_renders_forms_for_managers(client, course, section, teacher):
    item = make_item(course, section)
    make_student(course, "Adams")
    client.force_login(teacher)
    resp = client.get(course_url(course), {"edit": "1"})
    assert f'id="grade-pass-form{item.id}"' in resp.content.decode()
    assert resp.context["columns"][0][1] is not None


def test_students_never_get_forms(client, course, section):
    make_item(course, section)
    student = make_student(course, "Adams")
    client.force_login(student)
    resp = client.get(course_url(course), {"edit": "1"})
    assert resp.status_code == 200
    assert "grade-pass-form" not in resp.content.decode()
    assert resp.context["columns"][0][1] is None


def test_post_updates_grade_pass_and_redirects(client, course, section, teacher):
    item = make_item(course, section, name="Essay")
    client.force_login(teacher)
    resp = client.post(f"{course_url(course)}?edit=1&page=0",
                       {"grade_item_id": item.id, "grade_pass": 40})
    assert resp.status_code == 302
    assert resp["Location"] == f"{course_url(course)}?page=0&edit=1"
    messages = [str(m) for m in get_messages(resp.wsgi_request)]
    assert messages == ["Grade to pass for Essay was successfully updated to value 40."]
    item.refresh_from_db()
    assert item.grade_pass == 40


def test_post_invalid_choice_flashes_error(client, course, section, teacher):
    item = make_item(course, section, name="Essay", grade_max=10)
    client.force_login(teacher)
    resp = client.post(course_url(course), {"grade_item_id": item.id, "grade_pass": 99}, follow=True)
    assert resp.status_code == 200
    html = resp.content.decode()
    assert "alert-danger" in html
    assert "Error in saving grade to pass for Essay." in html
    item.refresh_from_db()
    assert item.grade_pass == 0


def test_post_unknown_grade_item_flashes_error(client, course, teacher):
    client.force_login(teacher)
    resp = client.post(course_url(course), {"grade_item_id": 31337, "grade_pass": 1})
    messages = [str(m) for m in get_messages(resp.wsgi_request)]
    assert messages[0].startswith("Error in saving grade to pass for 31337.")


def test_post_forbidden_for_students(client, course, section):
    item = make_item(course, section)
    student = make_student(course, "Adams")
    client.force_login(student)
    resp = client.post(course_url(course), {"grade_item_id": item.id, "grade_pass": 5})
    assert resp.status_code == 403


def test_table_below_topics(client, course, section, teacher):
    course.placement = "below"
    course.save()
    make_item(course, section)
    make_student(course, "Adams")
    client.force_login(teacher)
    html = client.get(course_url(course)).content.decode()
    assert html.index("sectionname") < html.index("etask-grade-table")
