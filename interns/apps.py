from django.apps import AppConfig


class InternsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "interns"
