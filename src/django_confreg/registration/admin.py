"""Django admin configuration for the registration app."""

from django.contrib import admin
from django.http import HttpRequest

from django_confreg.registration.models import (
    CustomerInfo,
    EventProcessingException,
    PaymentLog,
    StripeEvent,
)


@admin.register(CustomerInfo)
class CustomerInfoAdmin(admin.ModelAdmin):
    """Admin interface for registrations.

    Every field is read-only. Submitted details are fixed at intake and the
    payment fields are owned by the Stripe webhook.
    """

    list_display = ("id", "first_name", "last_name", "email", "affiliation", "type", "status", "create_date")
    list_filter = ("status", "type", "form_slug")
    search_fields = ("first_name", "last_name", "email", "affiliation", "position")
    readonly_fields = (
        "title",
        "other_title",
        "first_name",
        "middle_name",
        "last_name",
        "email",
        "phone",
        "affiliation",
        "position",
        "type",
        "paper_number",
        "have_visa",
        "dietary_requirements",
        "other_explain",
        "form_slug",
        "status",
        "attendee_name",
        "line1",
        "line2",
        "city",
        "state",
        "postal_code",
        "country",
        "create_date",
    )

    def has_add_permission(self, request: HttpRequest) -> bool:  # noqa: ARG002, D102
        return False


@admin.register(PaymentLog)
class PaymentLogAdmin(admin.ModelAdmin):
    """Read-only admin for the payment audit log."""

    list_display = ("id", "type", "customer_id", "create_time")
    list_filter = ("type",)
    search_fields = ("customer_id",)
    readonly_fields = ("content", "type", "customer_id", "create_time")

    def has_add_permission(self, request: HttpRequest) -> bool:  # noqa: ARG002, D102
        return False

    def has_change_permission(self, request: HttpRequest, obj: PaymentLog | None = None) -> bool:  # noqa: ARG002, D102
        return False

    def has_delete_permission(self, request: HttpRequest, obj: PaymentLog | None = None) -> bool:  # noqa: ARG002, D102
        return False


@admin.register(StripeEvent)
class StripeEventAdmin(admin.ModelAdmin):
    """Read-only admin for Stripe webhook events."""

    list_display = ("stripe_id", "kind", "processed", "livemode", "created_at")
    list_filter = ("kind", "processed", "livemode")
    search_fields = ("stripe_id",)
    readonly_fields = (
        "stripe_id",
        "kind",
        "livemode",
        "payload",
        "processed",
        "api_version",
        "created_at",
    )

    def has_add_permission(self, request: HttpRequest) -> bool:  # noqa: ARG002, D102
        return False

    def has_change_permission(self, request: HttpRequest, obj: StripeEvent | None = None) -> bool:  # noqa: ARG002, D102
        return False

    def has_delete_permission(self, request: HttpRequest, obj: StripeEvent | None = None) -> bool:  # noqa: ARG002, D102
        return False


@admin.register(EventProcessingException)
class EventProcessingExceptionAdmin(admin.ModelAdmin):
    """Read-only admin for webhook processing errors."""

    list_display = ("message", "event", "created_at")
    list_filter = ("created_at",)
    search_fields = ("message",)
    readonly_fields = ("event", "data", "message", "traceback", "created_at")

    def has_add_permission(self, request: HttpRequest) -> bool:  # noqa: ARG002, D102
        return False

    def has_change_permission(self, request: HttpRequest, obj: EventProcessingException | None = None) -> bool:  # noqa: ARG002, D102
        return False

    def has_delete_permission(self, request: HttpRequest, obj: EventProcessingException | None = None) -> bool:  # noqa: ARG002, D102
        return False
