import pytest
from django.apps import apps
from django.db.migrations.loader import MigrationLoader


@pytest.fixture
def project_state(settings):
    settings.MIGRATION_MODULES = {}
    return MigrationLoader(None, ignore_no_migrations=True).project_state()


@pytest.mark.parametrize("app_label", ["users", "courses", "learning"])
def test_migrations_create_every_model(project_state, app_label):
    for model in apps.get_app_config(app_label).get_models():
        state = project_state.models[(app_label, model._meta.model_name)]
        fields = {field.name for field in model._meta.local_fields + model._meta.local_many_to_many}
        assert set(state.fields) == fields, model.__name__


def test_history_tables_are_migrated(project_state):
    assert ("courses", "historicalcourse") in project_state.models
    assert ("learning", "historicalgradeitem") in project_state.models
    assert "item_number" not in project_state.models[("learning", "gradeitem")].fields
