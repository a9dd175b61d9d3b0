"""Django app configuration for the staff management pages."""

from django.apps import AppConfig


class DjangoConfregManageConfig(AppConfig):
    """Configuration for the registration listing and export."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "django_confreg.manage"
    label = "confreg_manage"
    verbose_name = "Management"
