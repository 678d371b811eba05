"""Core app configuration and startup checks (plugin settings sanity)."""

from django.apps import AppConfig
from django.core.checks import register, Error, Warning


class CoreConfig(AppConfig):
    """AppConfig registering a system check for the ETASK plugin settings."""
    default_auto_field = "django.db.models.BigAutoField"
    name = "EtaskApp.core"

    def ready(self):
        """Register a Django system check validating ``settings.ETASK``."""
        @register()
        def etask_settings_check(app_configs, **kwargs):
            from EtaskApp.core.config import parse_due_date_modules, plugin_settings

            errors = []
            try:
                options = plugin_settings()
            except (TypeError, ValueError) as exc:
                return [Error(f"ETASK setting must be a dict: {exc}", id="core.E001")]
            per_page = options.get("STUDENTS_PER_PAGE")
            if per_page is not None and (not isinstance(per_page, int) or per_page < 1):
                errors.append(Error("ETASK['STUDENTS_PER_PAGE'] must be a positive integer.", id="core.E002"))
            try:
                parse_due_date_modules(options.get("REGISTERED_DUE_DATE_MODULES", ""))
            except ValueError as exc:
                errors.append(Warning(f"Malformed REGISTERED_DUE_DATE_MODULES: {exc}", id="core.W001"))
            return errors
