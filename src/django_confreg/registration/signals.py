"""Custom signals for the registration app.

Signals:
    registration_paid: Sent after the Stripe webhook marks a registration paid.
        Sender: The ``CustomerInfo`` class.
        Kwargs:
            customer: The ``CustomerInfo`` instance that was paid.
            session_id: The Stripe Checkout Session id.
"""

from django.dispatch import Signal

registration_paid = Signal()
