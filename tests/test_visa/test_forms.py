"""Tests for the visa request forms."""

from datetime import date

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile
from django.http import Http404

from django_confreg.visa.definitions import STUDENT_WAIVER, TRAVEL_STIPEND, VISA, get_request_kind
from django_confreg.visa.forms import RequestApplicationForm, VisaRequestForm
from django_confreg.visa.models import VisaRequest


def _pdf(name="cv.pdf", content_type="application/pdf"):
    return SimpleUploadedFile(name, b"%PDF-1.4 test", content_type=content_type)


def _identity(**overrides):
    data = {"title": "Dr", "first_name": "Ada", "last_name": "Lovelace", "email": "ada@example.com"}
    data.update(overrides)
    return data


@pytest.mark.unit
class TestGetRequestKind:
    def test_known_slugs(self):
        assert get_request_kind("visa") is VISA
        assert get_request_kind("travel-stipend") is TRAVEL_STIPEND
        assert get_request_kind("student-waiver") is STUDENT_WAIVER

    def test_unknown_slug_raises_404(self):
        with pytest.raises(Http404):
            get_request_kind("tourist")


# =============================================================================
# VisaRequestForm (JSON API)
# =============================================================================


@pytest.mark.django_db
class TestVisaRequestForm:
    def test_maps_camel_case_keys(self):
        form = VisaRequestForm.from_json(
            {
                "title": "Dr",
                "firstName": "Ada",
                "lastName": "Lovelace",
                "email": "ada@example.com",
                "dateOfBirth": "1990-12-10T00:00:00.000Z",
                "nationality": "British",
                "conferenceInterests": "Cryptanalysis",
            }
        )

        assert form.is_valid(), form.errors
        assert form.cleaned_data["date_of_birth"] == date(1990, 12, 10)
        assert form.cleaned_data["conference_interests"] == "Cryptanalysis"
        assert form.cleaned_data["type"] == VisaRequest.Kind.VISA

    def test_accepts_type_and_waiver_fields(self):
        form = VisaRequestForm.from_json(
            _identity(type=2, paperNumber="123", hasIacr="1", fileKey="uploads/1_cv.pdf", fileName="cv.pdf")
        )

        assert form.is_valid(), form.errors
        assert form.cleaned_data["type"] == VisaRequest.Kind.STUDENT_WAIVER
        assert form.cleaned_data["has_iacr"] == 1
        assert form.cleaned_data["file_key"] == "uploads/1_cv.pdf"

    def test_required_identity_fields(self):
        form = VisaRequestForm.from_json({"firstName": "Ada"})
        assert not form.is_valid()
        assert {"title", "last_name", "email"} <= set(form.errors)

    @pytest.mark.parametrize("title", ["other", "Other", " OTHER "])
    def test_other_title_required_case_insensitively(self, title):
        form = VisaRequestForm.from_json(_identity(title=title))
        assert not form.is_valid()
        assert form.errors["other_title"] == ["Field is required."]

    def test_other_title_supplied(self):
        form = VisaRequestForm.from_json(_identity(title="other", otherTitle="Rev"))
        assert form.is_valid(), form.errors

    def test_invalid_email(self):
        form = VisaRequestForm.from_json(_identity(email="not-an-email"))
        assert not form.is_valid()
        assert "email" in form.errors

    def test_unknown_type_rejected(self):
        form = VisaRequestForm.from_json(_identity(type=7))
        assert not form.is_valid()
        assert "type" in form.errors


# =============================================================================
# RequestApplicationForm (HTML)
# =============================================================================


@pytest.mark.unit
class TestRequestApplicationFormFields:
    def test_visa_fields(self):
        form = RequestApplicationForm(kind=VISA)
        assert "attachment" not in form.fields
        assert "has_iacr" not in form.fields
        assert form.fields["date_of_birth"].required is True
        assert form.fields["paper_title"].required is False
        assert [value for value, _ in form.fields["title"].choices][0] == "Professor"

    def test_travel_stipend_fields(self):
        form = RequestApplicationForm(kind=TRAVEL_STIPEND)
        assert "nationality" not in form.fields
        assert "institute" not in form.fields
        assert form.fields["attachment"].required is True
        assert "research advisor" in form.fields["attachment"].help_text

    def test_student_waiver_fields(self):
        form = RequestApplicationForm(kind=STUDENT_WAIVER)
        for name in ("paper_number", "paper_title", "institute", "has_iacr", "attachment"):
            assert form.fields[name].required is True
        assert "date_of_birth" not in form.fields


@pytest.mark.unit
class TestRequestApplicationFormValidation:
    def test_visa_valid(self):
        form = RequestApplicationForm(
            _identity(
                title="Professor",
                date_of_birth="1990-12-10",
                nationality="British",
                institute="UCL",
                conference_interests="Lattices",
                iacr_experience="Member since 2015",
            ),
            kind=VISA,
        )

        assert form.is_valid(), form.errors
        fields = form.to_request_fields()
        assert fields["type"] == VisaRequest.Kind.VISA
        assert fields["paper_title"] is None
        assert fields["middle_name"] is None
        assert fields["date_of_birth"] == date(1990, 12, 10)

    def test_visa_missing_required(self):
        form = RequestApplicationForm(_identity(title="Professor"), kind=VISA)
        assert not form.is_valid()
        assert {"date_of_birth", "nationality", "institute", "conference_interests", "iacr_experience"} <= set(
            form.errors
        )

    def test_student_other_title(self):
        form = RequestApplicationForm(_identity(title="Other"), {"attachment": _pdf()}, kind=TRAVEL_STIPEND)
        assert not form.is_valid()
        assert "other_title" in form.errors

    def test_travel_stipend_requires_attachment(self):
        form = RequestApplicationForm(_identity(title="Mr"), kind=TRAVEL_STIPEND)
        assert not form.is_valid()
        assert "attachment" in form.errors

    def test_travel_stipend_rejects_non_pdf(self):
        upload = SimpleUploadedFile("cv.docx", b"PK", content_type="application/msword")
        form = RequestApplicationForm(_identity(title="Mr"), {"attachment": upload}, kind=TRAVEL_STIPEND)
        assert not form.is_valid()
        assert form.errors["attachment"] == ["Please upload a PDF file."]

    def test_pdf_extension_accepted_without_content_type(self):
        upload = _pdf(name="CV.PDF", content_type="application/octet-stream")
        form = RequestApplicationForm(_identity(title="Mr"), {"attachment": upload}, kind=TRAVEL_STIPEND)
        assert form.is_valid(), form.errors

    def test_student_waiver_valid(self):
        form = RequestApplicationForm(
            _identity(title="Miss", paper_number="42", paper_title="On Lattices", institute="QUT", has_iacr="0"),
            {"attachment": _pdf()},
            kind=STUDENT_WAIVER,
        )

        assert form.is_valid(), form.errors
        fields = form.to_request_fields()
        assert fields["has_iacr"] == 0
        assert fields["type"] == VisaRequest.Kind.STUDENT_WAIVER
        assert "attachment" not in fields
