"""Early-bird pricing and checkout link selection.

The cutoff is a fixed instant configured in ``DJANGO_CONFREG["pricing"]``.
"Now" is always read from the wall clock at call time and viewed in the
configured fixed UTC offset, so a quote rendered before the cutoff and a
submission made after it land on different tiers.
"""

import logging
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from urllib.parse import urlencode

from django.utils import timezone as dj_timezone

from django_confreg.registration.definitions import FormDefinition, RegistrationOption
from django_confreg.settings import get_config

logger = logging.getLogger(__name__)

EARLY = "early"
LATE = "late"


def conference_now(now: datetime | None = None) -> datetime:
    """Return *now* (default: the current instant) in the conference's fixed UTC offset."""
    offset = timezone(timedelta(hours=get_config().pricing.utc_offset_hours))
    return (now or dj_timezone.now()).astimezone(offset)


def is_early_bird(now: datetime | None = None) -> bool:
    """Whether *now* falls strictly before the configured cutoff instant."""
    return conference_now(now) < get_config().pricing.cutoff


def price_tier(now: datetime | None = None) -> str:
    """Return ``"early"`` before the cutoff and ``"late"`` at or after it."""
    return EARLY if is_early_bird(now) else LATE


def quote_price(option: RegistrationOption, now: datetime | None = None) -> Decimal | None:
    """Return the price for *option* at *now*, or ``None`` if the option is unpriced."""
    return option.early_price if is_early_bird(now) else option.late_price


def checkout_link(definition: FormDefinition, reg_type: int, now: datetime | None = None) -> str:
    """Return the configured hosted-checkout URL for a form, type, and tier.

    Args:
        definition: The registration form the submission came from.
        reg_type: The chosen registration type.
        now: Evaluation instant; defaults to the current time.

    Returns:
        The checkout URL, or an empty string when none is configured.
    """
    links = get_config().checkout_links.get(definition.slug, {})
    tiers = links.get(str(int(reg_type)))
    if tiers is None:
        logger.error("No checkout link configured for form '%s' type %s", definition.slug, reg_type)
        return ""
    return tiers[price_tier(now)]


def build_checkout_url(base_url: str, customer_id: int, email: str) -> str:
    """Append the correlation token and pre-filled email to a checkout URL.

    The registration id travels as ``client_reference_id`` and comes back
    on the ``checkout.session.completed`` event.
    """
    query = urlencode({"client_reference_id": customer_id, "prefilled_email": email})
    separator = "&" if "?" in base_url else "?"
    return f"{base_url}{separator}{query}"
