"""Registration intake: persist a validated submission as an unpaid record."""

import logging

from django_confreg.registration.models import CustomerInfo

logger = logging.getLogger(__name__)

_SERIALIZED_FIELDS = (
    "id",
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
)


def create_registration(fields: dict) -> CustomerInfo:
    """Create exactly one unpaid :class:`CustomerInfo` from validated *fields*.

    Payment fields in *fields* are ignored; a new registration always starts
    unpaid with no billing address. Database errors propagate to the caller.

    Args:
        fields: Cleaned values keyed by model field name.

    Returns:
        The saved registration.
    """
    data = {key: value for key, value in fields.items() if key not in CustomerInfo.PAYMENT_FIELDS}
    customer = CustomerInfo.objects.create(status=CustomerInfo.Status.UNPAID, **data)
    logger.info("Created registration %s (form '%s', type %s)", customer.pk, customer.form_slug, customer.type)
    return customer


def serialize_customer(customer: CustomerInfo) -> dict:
    """Return a JSON-serialisable dict of a registration's stored fields."""
    data = {name: getattr(customer, name) for name in _SERIALIZED_FIELDS}
    data["create_date"] = customer.create_date.isoformat() if customer.create_date else None
    return data
