from django.apps import AppConfig


class GradetableConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "EtaskApp.gradetable"
    label = "gradetable"
    verbose_name = "eTask grading table"
