"""Tests for the registration intake service and the CustomerInfo model."""

import pytest

from django_confreg.registration.models import CustomerInfo
from django_confreg.registration.services.intake import create_registration, serialize_customer


@pytest.mark.django_db
class TestCreateRegistration:
    def test_creates_unpaid_record(self):
        customer = create_registration(
            {"first_name": "Ada", "last_name": "Lovelace", "email": "ada@example.com", "type": 1, "form_slug": "raid"}
        )

        assert CustomerInfo.objects.count() == 1
        assert customer.status == CustomerInfo.Status.UNPAID
        assert customer.is_paid is False
        assert customer.create_date is not None

    def test_ignores_payment_fields(self):
        customer = create_registration(
            {
                "first_name": "Ada",
                "last_name": "Lovelace",
                "email": "ada@example.com",
                "type": 1,
                "status": CustomerInfo.Status.PAID,
                "attendee_name": "Someone Else",
                "line1": "1 Main St",
                "country": "AU",
            }
        )

        customer.refresh_from_db()
        assert customer.status == CustomerInfo.Status.UNPAID
        assert customer.attendee_name is None
        assert customer.line1 is None
        assert customer.country is None


@pytest.mark.django_db
class TestSerializeCustomer:
    def test_includes_id_and_iso_date(self, make_customer):
        customer = make_customer(middle_name="King")

        data = serialize_customer(customer)

        assert data["id"] == customer.pk
        assert data["middle_name"] == "King"
        assert data["status"] == 0
        assert data["create_date"] == customer.create_date.isoformat()


@pytest.mark.django_db
class TestCustomerInfoModel:
    def test_full_name_skips_missing_middle_name(self, make_customer):
        assert make_customer().full_name == "Ada Lovelace"
        assert make_customer(middle_name="King").full_name == "Ada King Lovelace"

    def test_address_display(self, make_customer):
        customer = make_customer(line1="1 Main St", city="Brisbane", state="QLD", postal_code="4000", country="AU")
        assert customer.address_display == "1 Main St, Brisbane, QLD, 4000, AU"

    def test_str(self, make_customer):
        customer = make_customer()
        assert str(customer) == f"#{customer.pk} Ada Lovelace (Unpaid)"
