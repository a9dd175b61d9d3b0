"""Invoice totals and delivery to the external invoice-email service.

Stripe line items arrive in minor currency units with tax included. The
gross is converted to major units and the tax-exclusive subtotal is backed
out with the configured tax rate.
"""

import logging
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

import httpx

from django_confreg.registration.models import CustomerInfo
from django_confreg.registration.stripe_utils import convert_amount_for_db
from django_confreg.settings import get_config

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")


@dataclass(frozen=True, slots=True)
class InvoiceTotals:
    """Tax-inclusive gross split into subtotal and tax, in major units."""

    subtotal: Decimal
    tax: Decimal
    total: Decimal


def compute_totals(line_items: list[dict], currency: str, tax_rate: Decimal | None = None) -> InvoiceTotals:
    """Back out subtotal and tax from Stripe line items.

    The gross in minor units is ``sum(amount_total * quantity)``; a missing
    ``amount_total`` counts as 0 and a missing ``quantity`` as 1.

    Args:
        line_items: Line item dicts as returned by Stripe.
        currency: ISO 4217 code used for the minor-to-major conversion.
        tax_rate: Tax included in the gross; defaults to the configured rate.

    Returns:
        The totals, with ``subtotal + tax == total`` exactly.
    """
    if tax_rate is None:
        tax_rate = get_config().invoice.tax_rate
    gross_minor = sum((item.get("amount_total") or 0) * (item.get("quantity") or 1) for item in line_items)
    total = convert_amount_for_db(gross_minor, currency).quantize(CENTS, rounding=ROUND_HALF_UP)
    subtotal = (total / (1 + tax_rate)).quantize(CENTS, rounding=ROUND_HALF_UP)
    return InvoiceTotals(subtotal=subtotal, tax=total - subtotal, total=total)


def format_currency(amount: Decimal) -> str:
    """Format *amount* with the configured symbol and two decimals, e.g. ``$1,450.00``."""
    return f"{get_config().currency_symbol}{amount.quantize(CENTS, rounding=ROUND_HALF_UP):,.2f}"


def build_invoice_payload(
    customer: CustomerInfo,
    name: str,
    line_items: list[dict],
    totals: InvoiceTotals,
    currency: str,
) -> dict:
    """Assemble the JSON body posted to the invoice-email service.

    The registration id is the invoice number and the billing address is
    the one captured at checkout.
    """
    return {
        "invoiceNumber": str(customer.pk),
        "name": name,
        "email": customer.email,
        "country": customer.country or "",
        "state": customer.state or "",
        "city": customer.city or "",
        "postalCode": customer.postal_code or "",
        "addressLine1": customer.line1 or "",
        "addressLine2": customer.line2 or "",
        "payments": [
            {
                "name": item.get("description") or "",
                "amount": format_currency(convert_amount_for_db(item.get("amount_total") or 0, currency)),
                "quantity": item.get("quantity") or 0,
            }
            for item in line_items
        ],
        "subTotal": format_currency(totals.subtotal),
        "tax": format_currency(totals.tax),
        "total": format_currency(totals.total),
    }


def send_invoice_payload(payload: dict) -> bool:
    """POST *payload* to the configured invoice service.

    Failures are logged and not retried.

    Returns:
        ``True`` if the service accepted the invoice.
    """
    config = get_config().invoice
    if not config.service_url:
        logger.warning("No invoice service URL configured; invoice %s not sent", payload.get("invoiceNumber"))
        return False

    try:
        response = httpx.post(config.service_url, json=payload, timeout=config.service_timeout)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        logger.error(
            "Failed to send invoice %s: %s %s",
            payload.get("invoiceNumber"),
            exc.response.status_code,
            exc.response.reason_phrase,
        )
        return False
    except httpx.HTTPError:
        logger.exception("Error sending invoice %s", payload.get("invoiceNumber"))
        return False

    logger.info("Invoice %s sent successfully", payload.get("invoiceNumber"))
    return True
