"""Tests for the StripeClient wrapper in django_confreg.registration.stripe_client."""

from unittest.mock import MagicMock, patch

import pytest
from django.test import override_settings

from django_confreg.registration.stripe_client import StripeClient


@pytest.fixture
def mock_stripe_client_cls():
    with patch("django_confreg.registration.stripe_client.stripe.StripeClient") as mock_cls:
        mock_instance = MagicMock()
        mock_cls.return_value = mock_instance
        yield mock_cls, mock_instance.v1


# =============================================================================
# TestInit
# =============================================================================


@pytest.mark.unit
class TestInit:
    def test_init_raises_on_missing_stripe_key(self):
        with override_settings(DJANGO_CONFREG={"stripe": {}}):
            with pytest.raises(ValueError, match="secret_key"):
                StripeClient()

    def test_init_uses_configured_key_and_version(self, mock_stripe_client_cls):
        mock_cls, _ = mock_stripe_client_cls
        with override_settings(DJANGO_CONFREG={"stripe": {"secret_key": "sk_test_abc", "api_version": "2025-01-01"}}):
            StripeClient()

        mock_cls.assert_called_once_with("sk_test_abc", stripe_version="2025-01-01")


# =============================================================================
# TestListLineItems
# =============================================================================


@pytest.mark.unit
class TestListLineItems:
    def test_returns_items_as_dicts(self, mock_stripe_client_cls):
        _, v1 = mock_stripe_client_cls
        first = MagicMock()
        first.to_dict.return_value = {"id": "li_1", "amount_total": 145000, "quantity": 1}
        second = MagicMock()
        second.to_dict.return_value = {"id": "li_2", "amount_total": 9000, "quantity": 2}
        v1.checkout.sessions.line_items.list.return_value = MagicMock(data=[first, second])

        items = StripeClient().list_line_items("cs_test_123")

        v1.checkout.sessions.line_items.list.assert_called_once_with("cs_test_123")
        assert items == [
            {"id": "li_1", "amount_total": 145000, "quantity": 1},
            {"id": "li_2", "amount_total": 9000, "quantity": 2},
        ]

    def test_empty_session_returns_empty_list(self, mock_stripe_client_cls):
        _, v1 = mock_stripe_client_cls
        v1.checkout.sessions.line_items.list.return_value = MagicMock(data=[])

        assert StripeClient().list_line_items("cs_test_empty") == []
