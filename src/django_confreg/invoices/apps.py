"""Django app configuration for the invoices app."""

from django.apps import AppConfig


class DjangoConfregInvoicesConfig(AppConfig):
    """Configuration for invoice rendering and delivery."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "django_confreg.invoices"
    label = "confreg_invoices"
    verbose_name = "Invoices"
