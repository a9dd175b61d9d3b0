from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
from django.test import override_settings

from django_confreg.settings import get_config


def test_get_config_rejects_non_mapping_root() -> None:
    with override_settings(DJANGO_CONFREG=["bad"]):
        with pytest.raises(TypeError, match="must be a mapping"):
            get_config()


def test_get_config_rejects_non_mapping_nested_sections() -> None:
    with override_settings(DJANGO_CONFREG={"stripe": ["bad"]}):
        with pytest.raises(TypeError, match=r"DJANGO_CONFREG\['stripe'\] must be a mapping"):
            get_config()

    with override_settings(DJANGO_CONFREG={"checkout_links": "bad"}):
        with pytest.raises(TypeError, match=r"DJANGO_CONFREG\['checkout_links'\] must be a mapping"):
            get_config()


def test_get_config_validates_primitive_values() -> None:
    with override_settings(DJANGO_CONFREG={"currency": ""}):
        with pytest.raises(ValueError, match="currency"):
            get_config()

    with override_settings(DJANGO_CONFREG={"currency_symbol": ""}):
        with pytest.raises(ValueError, match="currency_symbol"):
            get_config()

    with override_settings(DJANGO_CONFREG={"default_page_size": 0}):
        with pytest.raises(ValueError, match="positive integer"):
            get_config()

    with override_settings(DJANGO_CONFREG={"default_page_size": 50, "max_page_size": 10}):
        with pytest.raises(ValueError, match="max_page_size"):
            get_config()

    with override_settings(DJANGO_CONFREG={"invoice": {"tax_rate": "1.5"}}):
        with pytest.raises(ValueError, match="tax_rate"):
            get_config()

    with override_settings(DJANGO_CONFREG={"invoice": {"tax_rate": "ten"}}):
        with pytest.raises(ValueError, match="must be a number"):
            get_config()

    with override_settings(DJANGO_CONFREG={"pricing": {"utc_offset_hours": 20}}):
        with pytest.raises(ValueError, match="utc_offset_hours"):
            get_config()


def test_get_config_cache_clears_on_setting_changed() -> None:
    with override_settings(DJANGO_CONFREG={"currency": "USD"}):
        assert get_config().currency == "USD"

    with override_settings(DJANGO_CONFREG={"currency": "EUR"}):
        assert get_config().currency == "EUR"


def test_get_config_defaults_when_setting_missing() -> None:
    with override_settings(DJANGO_CONFREG={}):
        config = get_config()

    assert config.currency == "AUD"
    assert config.currency_symbol == "$"
    assert config.invoice.tax_rate == Decimal("0.10")
    assert config.pricing.cutoff == datetime(2025, 8, 15, tzinfo=timezone(timedelta(hours=10)))
    assert config.checkout_links == {}
    assert config.stripe.webhook_secret is None


def test_tax_rate_is_coerced_without_float_artefacts() -> None:
    with override_settings(DJANGO_CONFREG={"invoice": {"tax_rate": 0.15}}):
        assert get_config().invoice.tax_rate == Decimal("0.15")


def test_pricing_cutoff_accepts_iso_string() -> None:
    with override_settings(DJANGO_CONFREG={"pricing": {"cutoff": "2026-01-01T00:00:00+00:00"}}):
        assert get_config().pricing.cutoff == datetime(2026, 1, 1, tzinfo=timezone.utc)


def test_pricing_cutoff_rejects_naive_and_garbage_values() -> None:
    with override_settings(DJANGO_CONFREG={"pricing": {"cutoff": "2026-01-01T00:00:00"}}):
        with pytest.raises(ValueError, match="UTC offset"):
            get_config()

    with override_settings(DJANGO_CONFREG={"pricing": {"cutoff": "soon"}}):
        with pytest.raises(ValueError, match="ISO 8601"):
            get_config()

    with override_settings(DJANGO_CONFREG={"pricing": {"cutoff": 12}}):
        with pytest.raises(TypeError, match="datetime"):
            get_config()


def test_checkout_links_string_applies_to_both_tiers() -> None:
    with override_settings(DJANGO_CONFREG={"checkout_links": {"provsec": {1: "https://pay.example/a"}}}):
        links = get_config().checkout_links

    assert links == {"provsec": {"1": {"early": "https://pay.example/a", "late": "https://pay.example/a"}}}


def test_checkout_links_require_both_tiers() -> None:
    with override_settings(DJANGO_CONFREG={"checkout_links": {"raid": {"1": {"early": "https://pay.example/a"}}}}):
        with pytest.raises(ValueError, match="'early' and 'late'"):
            get_config()

    with override_settings(DJANGO_CONFREG={"checkout_links": {"raid": ["https://pay.example/a"]}}):
        with pytest.raises(TypeError, match=r"\['raid'\] must be a mapping"):
            get_config()


def test_unknown_top_level_key_is_rejected() -> None:
    with override_settings(DJANGO_CONFREG={"not_a_setting": True}):
        with pytest.raises(TypeError):
            get_config()
