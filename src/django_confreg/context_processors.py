"""Django context processors for django-confreg."""

from django.http import HttpRequest

from django_confreg.features import is_feature_enabled

# Feature names that correspond to FeaturesConfig boolean attributes.
_FEATURE_NAMES = (
    "registration",
    "visa_requests",
    "invoices",
    "public_ui",
    "manage_ui",
    "all_ui",
)


def confreg_features(request: HttpRequest) -> dict[str, dict[str, bool]]:  # noqa: ARG001
    """Expose feature toggle flags to templates.

    Add ``"django_confreg.context_processors.confreg_features"`` to the
    ``context_processors`` list in your ``TEMPLATES`` setting.

    Usage in templates::

        {% if confreg_features.visa_requests_enabled %}
            <a href="{% url 'visa:request-form' kind='visa' %}">Visa invitation</a>
        {% endif %}
    """
    return {"confreg_features": {f"{name}_enabled": is_feature_enabled(name) for name in _FEATURE_NAMES}}
