"""Typed configuration for django-confreg.

Reads a single ``DJANGO_CONFREG`` dict from Django settings and exposes it as
composed, frozen dataclasses with sensible defaults.

Usage::

    from django_confreg.settings import get_config

    config = get_config()
    config.stripe.webhook_secret
    config.invoice.tax_rate
    config.pricing.cutoff
"""

import functools
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal, InvalidOperation

from django.conf import settings
from django.test.signals import setting_changed


@dataclass(frozen=True, slots=True)
class StripeConfig:
    """Stripe payment gateway configuration."""

    secret_key: str | None = None
    publishable_key: str | None = None
    webhook_secret: str | None = None
    api_version: str = "2024-12-18"
    webhook_tolerance: int = 300


@dataclass(frozen=True, slots=True)
class InvoiceConfig:
    """Invoice numbers, issuer details, and the outbound invoice-email service."""

    service_url: str = ""
    service_timeout: float = 10.0
    tax_rate: Decimal = Decimal("0.10")
    tax_label: str = "GST"
    from_email: str | None = None
    company_name: str = ""
    company_address: str = ""
    company_phone: str = ""
    company_email: str = ""
    abn: str = ""
    payment_terms: str = "Payment is due within 30 days of invoice date."
    due_days: int = 30
    bank_account_name: str = ""
    bank_bsb: str = ""
    bank_account_number: str = ""


@dataclass(frozen=True, slots=True)
class StorageConfig:
    """S3-compatible object storage used for uploaded attachments."""

    endpoint_url: str | None = None
    bucket: str = ""
    access_key_id: str | None = None
    secret_access_key: str | None = None
    region: str = "auto"
    key_prefix: str = "uploads"


@dataclass(frozen=True, slots=True)
class PricingConfig:
    """Early-bird cutoff and the fixed UTC offset the cutoff is expressed in."""

    cutoff: datetime = datetime.fromisoformat("2025-08-15T00:00:00+10:00")
    utc_offset_hours: int = 10


@dataclass(frozen=True, slots=True)
class FeaturesConfig:
    """Feature toggles for enabling/disabling django-confreg modules.

    All features are enabled by default. Set to ``False`` in
    ``DJANGO_CONFREG['features']`` to disable.
    """

    registration_enabled: bool = True
    visa_requests_enabled: bool = True
    invoices_enabled: bool = True

    public_ui_enabled: bool = True
    manage_ui_enabled: bool = True
    all_ui_enabled: bool = True


@dataclass(frozen=True, slots=True)
class ConfregConfig:
    """Top-level django-confreg configuration."""

    stripe: StripeConfig = field(default_factory=StripeConfig)
    invoice: InvoiceConfig = field(default_factory=InvoiceConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)
    pricing: PricingConfig = field(default_factory=PricingConfig)
    features: FeaturesConfig = field(default_factory=FeaturesConfig)
    checkout_links: Mapping[str, Mapping[str, Mapping[str, str]]] = field(default_factory=dict)
    currency: str = "AUD"
    currency_symbol: str = "$"
    default_page_size: int = 10
    max_page_size: int = 100


_SECTIONS = ("stripe", "invoice", "storage", "pricing", "features", "checkout_links")


@functools.lru_cache(maxsize=1)
def get_config() -> ConfregConfig:
    """Build and return the registration configuration.

    Reads ``settings.DJANGO_CONFREG`` (a plain dict) and returns a frozen
    :class:`ConfregConfig`.  The result is cached; the cache is cleared
    automatically when Django's ``setting_changed`` signal fires (e.g. inside
    ``override_settings``).
    """
    raw = getattr(settings, "DJANGO_CONFREG", {})
    if not isinstance(raw, Mapping):
        msg = "DJANGO_CONFREG must be a mapping (dict-like object)"
        raise TypeError(msg)
    raw_data = dict(raw)

    sections = {name: raw_data.pop(name, {}) for name in _SECTIONS}
    for name, value in sections.items():
        if not isinstance(value, Mapping):
            msg = f"DJANGO_CONFREG['{name}'] must be a mapping (dict-like object)"
            raise TypeError(msg)

    invoice_data = dict(sections["invoice"])
    if "tax_rate" in invoice_data:
        invoice_data["tax_rate"] = _to_decimal(invoice_data["tax_rate"], "DJANGO_CONFREG['invoice']['tax_rate']")

    pricing_data = dict(sections["pricing"])
    if "cutoff" in pricing_data:
        pricing_data["cutoff"] = _to_datetime(pricing_data["cutoff"], "DJANGO_CONFREG['pricing']['cutoff']")

    config = ConfregConfig(
        stripe=StripeConfig(**dict(sections["stripe"])),
        invoice=InvoiceConfig(**invoice_data),
        storage=StorageConfig(**dict(sections["storage"])),
        pricing=PricingConfig(**pricing_data),
        features=FeaturesConfig(**dict(sections["features"])),
        checkout_links=_checkout_links(sections["checkout_links"]),
        **raw_data,
    )
    _validate_confreg_config(config)
    return config


def _to_decimal(value: object, label: str) -> Decimal:
    """Coerce a configured number to ``Decimal`` without float artefacts."""
    try:
        return Decimal(str(value))
    except InvalidOperation as exc:
        msg = f"{label} must be a number"
        raise ValueError(msg) from exc


def _to_datetime(value: object, label: str) -> datetime:
    """Accept an aware ``datetime`` or an ISO 8601 string with an offset."""
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value)
        except ValueError as exc:
            msg = f"{label} must be an ISO 8601 timestamp"
            raise ValueError(msg) from exc
    if not isinstance(value, datetime):
        msg = f"{label} must be a datetime or ISO 8601 string"
        raise TypeError(msg)
    if value.tzinfo is None:
        msg = f"{label} must include a UTC offset"
        raise ValueError(msg)
    return value


def _checkout_links(raw: Mapping[str, object]) -> dict[str, dict[str, dict[str, str]]]:
    """Normalise ``checkout_links`` to ``{form_slug: {type: {"early": url, "late": url}}}``.

    A plain string for a registration type is used for both price tiers.
    """
    links: dict[str, dict[str, dict[str, str]]] = {}
    for form_slug, per_type in raw.items():
        if not isinstance(per_type, Mapping):
            msg = f"DJANGO_CONFREG['checkout_links']['{form_slug}'] must be a mapping"
            raise TypeError(msg)
        links[str(form_slug)] = {}
        for reg_type, tiers in per_type.items():
            if isinstance(tiers, str):
                tiers = {"early": tiers, "late": tiers}
            if not isinstance(tiers, Mapping) or not {"early", "late"} <= tiers.keys():
                msg = (
                    f"DJANGO_CONFREG['checkout_links']['{form_slug}']['{reg_type}'] "
                    "must be a URL or a mapping with 'early' and 'late' URLs"
                )
                raise ValueError(msg)
            links[str(form_slug)][str(reg_type)] = {"early": str(tiers["early"]), "late": str(tiers["late"])}
    return links


def _validate_confreg_config(config: ConfregConfig) -> None:
    """Validate high-impact configuration values with clear error messages."""
    if not isinstance(config.currency, str) or not config.currency.strip():
        msg = "DJANGO_CONFREG['currency'] must be a non-empty string"
        raise ValueError(msg)
    if not isinstance(config.currency_symbol, str) or not config.currency_symbol.strip():
        msg = "DJANGO_CONFREG['currency_symbol'] must be a non-empty string"
        raise ValueError(msg)
    if not isinstance(config.default_page_size, int) or config.default_page_size <= 0:
        msg = "DJANGO_CONFREG['default_page_size'] must be a positive integer"
        raise ValueError(msg)
    if not isinstance(config.max_page_size, int) or config.max_page_size < config.default_page_size:
        msg = "DJANGO_CONFREG['max_page_size'] must be an integer >= default_page_size"
        raise ValueError(msg)
    if not Decimal(0) <= config.invoice.tax_rate < Decimal(1):
        msg = "DJANGO_CONFREG['invoice']['tax_rate'] must be between 0 and 1"
        raise ValueError(msg)
    if not isinstance(config.invoice.due_days, int) or config.invoice.due_days < 0:
        msg = "DJANGO_CONFREG['invoice']['due_days'] must be a non-negative integer"
        raise ValueError(msg)
    if not isinstance(config.pricing.utc_offset_hours, int) or not -12 <= config.pricing.utc_offset_hours <= 14:
        msg = "DJANGO_CONFREG['pricing']['utc_offset_hours'] must be an integer between -12 and 14"
        raise ValueError(msg)


def _clear_config_cache(*, setting: str, **kwargs: object) -> None:  # noqa: ARG001
    """Clear the cached config when Django settings change during tests."""
    if setting == "DJANGO_CONFREG":
        get_config.cache_clear()


setting_changed.connect(_clear_config_cache, dispatch_uid="django_confreg.settings.clear_config_cache")
