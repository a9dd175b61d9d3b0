"""Django admin configuration for the visa app."""

from django.contrib import admin
from django.http import HttpRequest

from django_confreg.visa.models import VisaRequest


@admin.register(VisaRequest)
class VisaRequestAdmin(admin.ModelAdmin):
    """Read-only admin for submitted visa and travel requests."""

    list_display = ("id", "type", "first_name", "last_name", "email", "institute", "file_name", "create_date")
    list_filter = ("type",)
    search_fields = ("first_name", "last_name", "email", "institute", "nationality", "paper_title")
    readonly_fields = ("file_key", "file_name", "create_date")

    def has_add_permission(self, request: HttpRequest) -> bool:  # noqa: ARG002, D102
        return False

    def has_change_permission(self, request: HttpRequest, obj: VisaRequest | None = None) -> bool:  # noqa: ARG002, D102
        return False

    def has_delete_permission(self, request: HttpRequest, obj: VisaRequest | None = None) -> bool:  # noqa: ARG002, D102
        return False
