import pytest

from django_confreg.registration.models import CustomerInfo


@pytest.fixture
def make_customer(db):
    """Factory creating registrations with sensible defaults."""

    def _make(**overrides):
        fields = {
            "first_name": "Ada",
            "last_name": "Lovelace",
            "email": "ada@example.com",
            "affiliation": "Analytical Engines",
            "type": 4,
            "form_slug": "raid",
            "dietary_requirements": "No",
        }
        fields.update(overrides)
        return CustomerInfo.objects.create(**fields)

    return _make
