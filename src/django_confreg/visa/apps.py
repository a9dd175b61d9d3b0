"""Django app configuration for the visa and travel request app."""

from django.apps import AppConfig


class DjangoConfregVisaConfig(AppConfig):
    """Configuration for visa invitation and travel support requests."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "django_confreg.visa"
    label = "confreg_visa"
    verbose_name = "Visa & Travel Requests"
