"""Django app configuration for the API application.

Registers signal handlers on app ready.
"""

from django.apps import AppConfig


class ApiConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "api"
    verbose_name = "Inquiry CRM"

    def ready(self):
        import api.signals  # noqa: F401

        # No startup side effects here. To seed an admin account and sample
        # data run `python manage.py setup_crm`.
