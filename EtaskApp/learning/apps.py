"""Learning app configuration (registers signal handlers)."""

from django.apps import AppConfig


class LearningConfig(AppConfig):
    """AppConfig for the host learning data (activities, scales, grade items, grades, completion)."""
    default_auto_field = "django.db.models.BigAutoField"
    name = "EtaskApp.learning"
    label = "learning"

    def ready(self):
        """Import signal handlers to connect Django model signals."""
        from EtaskApp.learning import signals  # noqa: F401
