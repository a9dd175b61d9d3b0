"""Template filters for invoice rendering.

Usage::

    {% load invoice_tags %}
    {{ currency_symbol }}{{ item.amount|money }}
"""

from decimal import Decimal

from django import template

from django_confreg.invoices.rendering import format_money

register = template.Library()


@register.filter
def money(value: Decimal) -> str:
    """Format a Decimal with exactly two decimals."""
    return format_money(value)


@register.filter
def quantity(value: Decimal) -> str:
    """Drop trailing zeros from an item quantity (``Decimal("2.0")`` -> ``"2"``)."""
    return f"{value.normalize():f}"
