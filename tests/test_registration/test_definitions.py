"""Tests for the registration form definitions."""

from decimal import Decimal

import pytest
from django.http import Http404

from django_confreg.registration.definitions import (
    PROVSEC,
    RAID,
    dietary_text,
    form_definitions,
    get_form_definition,
)
from django_confreg.registration.models import RegistrationType


@pytest.mark.unit
class TestGetFormDefinition:
    def test_known_slugs(self):
        assert get_form_definition("provsec") is PROVSEC
        assert get_form_definition("raid") is RAID

    def test_unknown_slug_raises_404(self):
        with pytest.raises(Http404):
            get_form_definition("nope")

    def test_form_definitions_lists_every_form(self):
        assert {definition.slug for definition in form_definitions()} == {"provsec", "raid"}


@pytest.mark.unit
class TestFormDefinition:
    def test_get_option_accepts_int_or_string(self):
        assert RAID.get_option(3).label == "Student Registration"
        assert RAID.get_option("3").label == "Student Registration"
        assert RAID.get_option(99) is None

    def test_raid_prices(self):
        student = RAID.get_option(RegistrationType.STUDENT)
        assert student.early_price == Decimal(800)
        assert student.late_price == Decimal(950)
        assert RAID.quotes_prices is True

    def test_provsec_quotes_no_prices(self):
        assert PROVSEC.quotes_prices is False

    def test_identifier_requirements(self):
        assert RAID.get_option(RegistrationType.PAPER_AUTHOR).requires_identifier is True
        assert RAID.get_option(RegistrationType.STUDENT).requires_identifier is True
        assert RAID.get_option(RegistrationType.POSTER_AUTHOR).requires_identifier is False
        assert RAID.get_option(RegistrationType.REGULAR).requires_identifier is False


@pytest.mark.unit
class TestDietaryText:
    def test_joins_labels_in_selection_order(self):
        assert dietary_text(["3", "1"]) == "Halal, Vegetarian"

    def test_other_with_qualifier(self):
        assert dietary_text(["1", "5"], "No nuts") == "Vegetarian, Other: No nuts"

    def test_other_without_qualifier(self):
        assert dietary_text(["5"]) == "Other"

    def test_unknown_ids_dropped(self):
        assert dietary_text(["0", "42"]) == "No"

    def test_empty_selection(self):
        assert dietary_text([]) == ""
