"""Stripe webhook handling for the registration app.

Provides a registry-based dispatch system for processing Stripe webhook events.
Each event kind (e.g. ``checkout.session.completed``) maps to a handler class
that encapsulates idempotent processing, signal dispatch, and error capture.

The ``stripe_webhook`` view verifies the event signature, deduplicates by
Stripe event ID, and delegates to the appropriate handler.

Usage in URL configuration::

    from django_confreg.registration.webhooks import stripe_webhook

    urlpatterns = [
        path("webhooks/stripe/", stripe_webhook),
    ]
"""

import json
import logging
import traceback

import stripe
from django.db import DatabaseError, IntegrityError, transaction
from django.http import HttpRequest, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_POST

from django_confreg.registration.models import (
    CustomerInfo,
    EventProcessingException,
    PaymentLog,
    StripeEvent,
)
from django_confreg.registration.services.invoicing import (
    build_invoice_payload,
    compute_totals,
    send_invoice_payload,
)
from django_confreg.registration.signals import registration_paid
from django_confreg.registration.stripe_client import StripeClient
from django_confreg.settings import get_config

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


class WebhookRegistry:
    """Registry mapping Stripe event kinds to handler classes.

    Handlers are registered at module load time and looked up by the webhook
    view when an event arrives.
    """

    def __init__(self) -> None:
        self._registry: dict[str, type["Webhook"]] = {}

    def register(self, kind: str, handler_class: type["Webhook"]) -> None:
        """Register a handler class for a Stripe event kind.

        Args:
            kind: The Stripe event type string (e.g. ``"checkout.session.completed"``).
            handler_class: A ``Webhook`` subclass that handles this event kind.
        """
        self._registry[kind] = handler_class

    def get(self, kind: str) -> type["Webhook"] | None:
        """Return the handler class for a given event kind, or ``None``."""
        return self._registry.get(kind)

    def keys(self) -> list[str]:
        """Return all registered event kinds."""
        return list(self._registry.keys())


registry = WebhookRegistry()


# ---------------------------------------------------------------------------
# Base handler
# ---------------------------------------------------------------------------


class Webhook:
    """Base class for Stripe webhook event handlers.

    Subclasses set ``name`` to the Stripe event kind they handle and
    implement ``process_webhook()``. The base ``process()`` method wraps
    execution in an idempotency check and exception capture.

    Attributes:
        name: The Stripe event kind this handler processes.
        event: The ``StripeEvent`` model instance being handled.
    """

    name: str = ""

    def __init__(self, event: StripeEvent) -> None:
        self.event = event

    def process(self) -> None:
        """Run the handler with idempotency and error capture.

        Skips events that have already been processed. On success, fires any
        associated signal and marks the event processed. On failure, captures
        the traceback to ``EventProcessingException`` and re-raises.
        """
        if self.event.processed:
            logger.info("Event %s already processed, skipping", self.event.stripe_id)
            return

        try:
            self.process_webhook()
            self.send_signal()
            self.event.processed = True
            self.event.save(update_fields=["processed"])
        except Exception:
            self.log_exception()
            raise

    def process_webhook(self) -> None:
        """Implement event-specific processing logic.

        Raises:
            NotImplementedError: Subclasses must override this method.
        """
        raise NotImplementedError

    def send_signal(self) -> None:
        """Send a Django signal after successful processing. No-op by default."""

    def log_exception(self) -> None:
        """Capture the current exception to ``EventProcessingException``."""
        tb = traceback.format_exc()
        logger.error("Error processing webhook %s (event %s): %s", self.name, self.event.stripe_id, tb)
        EventProcessingException.objects.create(
            event=self.event,
            data=json.dumps(self.event.payload),
            message=tb[:500],
            traceback=tb,
        )


def _event_data_object(event: StripeEvent) -> dict[str, object]:
    """Extract the ``data.object`` dict from a StripeEvent payload."""
    payload = event.payload
    if isinstance(payload, dict):
        data = payload.get("data")
        if isinstance(data, dict):
            obj = data.get("object")
            if isinstance(obj, dict):
                return obj
    return {}


def _save_payment_log(content: str, log_type: int, customer_id: int) -> None:
    """Append a payment log entry; database errors are logged and swallowed."""
    try:
        PaymentLog.objects.create(content=content, type=log_type, customer_id=customer_id)
    except DatabaseError:
        logger.exception("Error saving payment log for customer %s", customer_id)


def _custom_field_name(session: dict[str, object]) -> str:
    """Return the text value of the session's first custom field, or ``""``."""
    custom_fields = session.get("custom_fields")
    if not isinstance(custom_fields, list) or not custom_fields:
        return ""
    text = custom_fields[0].get("text") if isinstance(custom_fields[0], dict) else None
    if not isinstance(text, dict):
        return ""
    return str(text.get("value") or "").strip()


# ---------------------------------------------------------------------------
# Concrete handlers
# ---------------------------------------------------------------------------


class CheckoutSessionCompletedWebhook(Webhook):
    """Handles ``checkout.session.completed`` events.

    Correlates the session to a registration through ``client_reference_id``,
    logs the raw session, marks the registration paid with the captured
    billing address and attendee name, then logs the line items and hands an
    invoice to the invoice-email service.
    """

    name = "checkout.session.completed"

    def __init__(self, event: StripeEvent) -> None:
        super().__init__(event)
        self.customer: CustomerInfo | None = None

    def process_webhook(self) -> None:
        """Run the registration payment flow for one completed session."""
        session = _event_data_object(self.event)
        session_id = str(session.get("id") or "")
        logger.info("Checkout session completed: %s", session_id)

        reference = session.get("client_reference_id")
        try:
            customer_id = int(str(reference))
        except (TypeError, ValueError):
            logger.warning("Checkout session %s has no usable client_reference_id: %r", session_id, reference)
            return

        _save_payment_log(json.dumps(session), PaymentLog.Type.CHECKOUT_COMPLETED, customer_id)

        customer = CustomerInfo.objects.filter(pk=customer_id).first()
        if customer is None:
            logger.warning("Checkout session %s references unknown registration %s", session_id, customer_id)
            return

        attendee_name = _custom_field_name(session) or customer.full_name
        details = session.get("customer_details") or {}
        address = (details.get("address") or {}) if isinstance(details, dict) else {}
        self._mark_paid(customer, address, attendee_name)
        self.customer = customer

        currency = str(session.get("currency") or get_config().currency)
        line_items = self._fetch_line_items(session_id)
        totals = compute_totals(line_items, currency)
        if line_items:
            _save_payment_log(json.dumps(line_items), PaymentLog.Type.LINE_ITEMS, customer_id)

        payload = build_invoice_payload(customer, attendee_name, line_items, totals, currency)
        send_invoice_payload(payload)

    def send_signal(self) -> None:
        """Fire ``registration_paid`` when a registration was marked paid."""
        if self.customer is None:
            return
        session = _event_data_object(self.event)
        registration_paid.send(sender=CustomerInfo, customer=self.customer, session_id=session.get("id"))

    @staticmethod
    def _mark_paid(customer: CustomerInfo, address: dict, attendee_name: str) -> None:
        customer.status = CustomerInfo.Status.PAID
        customer.line1 = address.get("line1") or None
        customer.line2 = address.get("line2") or None
        customer.city = address.get("city") or None
        customer.state = address.get("state") or None
        customer.postal_code = address.get("postal_code") or None
        customer.country = address.get("country") or None
        customer.attendee_name = attendee_name
        customer.save(update_fields=sorted(CustomerInfo.PAYMENT_FIELDS))
        logger.info("Registration %s marked paid", customer.pk)

    @staticmethod
    def _fetch_line_items(session_id: str) -> list[dict]:
        """Return the session's line items; Stripe failures yield an empty list."""
        try:
            return StripeClient().list_line_items(session_id)
        except (stripe.StripeError, ValueError):
            logger.exception("Could not fetch line items for checkout session %s", session_id)
            return []


class PaymentIntentSucceededWebhook(Webhook):
    """Handles ``payment_intent.succeeded`` events by logging them."""

    name = "payment_intent.succeeded"

    def process_webhook(self) -> None:
        """Log the succeeded PaymentIntent id."""
        intent = _event_data_object(self.event)
        logger.info("PaymentIntent succeeded: %s", intent.get("id"))


registry.register(CheckoutSessionCompletedWebhook.name, CheckoutSessionCompletedWebhook)
registry.register(PaymentIntentSucceededWebhook.name, PaymentIntentSucceededWebhook)


# ---------------------------------------------------------------------------
# View
# ---------------------------------------------------------------------------


def _webhook_error(message: str) -> JsonResponse:
    return JsonResponse({"error": f"Webhook Error: {message}"}, status=400)


@csrf_exempt
@require_POST
def stripe_webhook(request: HttpRequest) -> JsonResponse:
    """Receive and process Stripe webhook events.

    Verifies the event signature against the configured webhook secret,
    deduplicates by Stripe event ID, persists the raw event, and dispatches
    to the registered handler.

    Once the signature is verified the response is always
    ``{"received": true}``, even when processing fails, so Stripe does not
    redeliver an event whose state change already happened. Errors are
    logged and captured to ``EventProcessingException``.

    Args:
        request: The incoming HTTP request from Stripe.

    Returns:
        ``{"received": true}`` with status 200, or status 400 with an
        ``error`` message when verification fails.
    """
    payload = request.body
    sig_header = request.META.get("HTTP_STRIPE_SIGNATURE", "")

    config = get_config()
    webhook_secret = config.stripe.webhook_secret
    if not webhook_secret:
        logger.error("Stripe webhook received but no webhook secret is configured")
        return _webhook_error("No webhook secret configured")

    try:
        event = stripe.Webhook.construct_event(
            payload,
            sig_header,
            webhook_secret,
            tolerance=config.stripe.webhook_tolerance,
        )
    except (stripe.SignatureVerificationError, ValueError) as exc:
        logger.warning("Webhook Error: %s", exc)
        return _webhook_error(str(exc))

    stripe_id = event["id"]
    kind = event["type"]

    if StripeEvent.objects.filter(stripe_id=stripe_id).exists():
        logger.info("Duplicate Stripe event %s, acknowledging", stripe_id)
        return JsonResponse({"received": True})

    try:
        with transaction.atomic():
            stripe_event = StripeEvent.objects.create(
                stripe_id=stripe_id,
                kind=kind,
                livemode=bool(event.get("livemode", False)),
                payload=json.loads(payload),
                api_version=event.get("api_version") or "",
            )
    except IntegrityError:
        logger.info("Stripe event %s recorded concurrently, acknowledging", stripe_id)
        return JsonResponse({"received": True})

    handler_class = registry.get(kind)
    if handler_class is None:
        logger.info("Unhandled event type: %s", kind)
        return JsonResponse({"received": True})

    try:
        handler_class(stripe_event).process()
    except Exception:
        logger.exception("Error processing Stripe event %s (kind=%s)", stripe_id, kind)

    return JsonResponse({"received": True})
