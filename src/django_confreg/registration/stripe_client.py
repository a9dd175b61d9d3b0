"""Thin wrapper around ``stripe.StripeClient`` for the calls the webhook makes.

The client is bound to the globally configured secret key and API version and
uses the modern v1 namespace for every call.
"""

import logging

import stripe

from django_confreg.registration.stripe_utils import obfuscate_key
from django_confreg.settings import get_config

logger = logging.getLogger(__name__)


class StripeClient:
    """Stripe API client configured from ``DJANGO_CONFREG["stripe"]``.

    Raises:
        ValueError: If no Stripe secret key is configured.
    """

    def __init__(self) -> None:
        config = get_config().stripe
        if not config.secret_key:
            msg = "DJANGO_CONFREG['stripe']['secret_key'] is not configured."
            raise ValueError(msg)

        self.client = stripe.StripeClient(
            config.secret_key,
            stripe_version=config.api_version,
        )
        logger.debug("Initialized StripeClient with key %s", obfuscate_key(config.secret_key))

    def list_line_items(self, session_id: str) -> list[dict]:
        """Return the line items of a Checkout Session as plain dicts.

        Args:
            session_id: The ``cs_...`` id of the completed Checkout Session.

        Returns:
            One dict per line item, in the order Stripe returns them.
        """
        page = self.client.v1.checkout.sessions.line_items.list(session_id)
        return [item.to_dict() for item in page.data]
