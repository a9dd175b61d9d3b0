"""Currency conversion for Stripe amounts and key obfuscation for logging.

Stripe represents monetary amounts as integers in the smallest currency unit
(e.g. cents for AUD). Most currencies have 100 minor units per major unit, but
"zero-decimal" currencies such as JPY report the major amount directly.
"""

from decimal import Decimal

_OBFUSCATE_VISIBLE_CHARS = 4

ZERO_DECIMAL_CURRENCIES: frozenset[str] = frozenset(
    {
        "BIF",
        "CLP",
        "DJF",
        "GNF",
        "JPY",
        "KMF",
        "KRW",
        "MGA",
        "PYG",
        "RWF",
        "UGX",
        "VND",
        "VUV",
        "XAF",
        "XOF",
        "XPF",
    }
)


def convert_amount_for_db(amount: int, currency: str) -> Decimal:
    """Convert an integer amount from the Stripe API to major currency units.

    Args:
        amount: The amount in the smallest currency unit as returned by Stripe.
        currency: An ISO 4217 currency code (case-insensitive).

    Returns:
        The amount as a :class:`~decimal.Decimal`, e.g. ``145000`` AUD
        becomes ``Decimal("1450")``.
    """
    if currency.upper() in ZERO_DECIMAL_CURRENCIES:
        return Decimal(amount)
    return Decimal(amount) / 100


def obfuscate_key(key: str) -> str:
    """Mask all but the last four characters of a secret for log output."""
    if len(key) < _OBFUSCATE_VISIBLE_CHARS:
        return "****"
    return "****" + key[-_OBFUSCATE_VISIBLE_CHARS:]
