import pytest
from django.core.cache import cache
from model_bakery import baker
from rest_framework.test import APIClient

from EtaskApp.core.choices import MemberRole
from EtaskApp.tests.factories import enrol

@pytest.fixture(autouse=True)
def clear_throttle_cache():
    cache.clear()
    yield
    cache.clear()

@pytest.fixture
def owner():
    return baker.make("users.User", email="owner@example.com", first_name="Olga", last_name="Owner")

@pytest.fixture
def course(owner):
    return baker.make("courses.Course", title="Algebra", owner=owner)

@pytest.fixture
def section(course):
    return baker.make("courses.Section", course=course, number=1, name="Week 1")

@pytest.fixture
def teacher(course):
    user = baker.make("users.User", email="teacher@example.com", first_name="Tom", last_name="Teacher")
    return enrol(course, user, MemberRole.TEACHER)

@pytest.fixture
def noneditor(course):
    user = baker.make("users.User", email="assistant@example.com", first_name="Ann", last_name="Assistant")
    return enrol(course, user, MemberRole.NONEDITING_TEACHER)

@pytest.fixture
def api_client():
    return APIClient()

@pytest.fixture
def client_for(api_client):
    def _client_for(user):
        api_client.force_authenticate(user=user)
        return api_client
    return _client_for
