"""Template helpers for the management pages."""

from django import template
from django.http import QueryDict

register = template.Library()


@register.simple_tag(takes_context=True)
def listing_url(context: template.Context, **changes: object) -> str:
    """Return the current query string with *changes* applied.

    Usage::

        {% load manage_tags %}
        <a href="{% listing_url page=2 %}">Next</a>
    """
    query: QueryDict = context["request"].GET.copy()
    for key, value in changes.items():
        query[key] = str(value)
    return f"?{query.urlencode()}"


@register.simple_tag
def next_sort_order(customer_page: object, column: str) -> str:
    """Return the order a column header link should request next."""
    if customer_page is not None and customer_page.sort_by == column and customer_page.sort_order == "asc":
        return "desc"
    return "asc"
