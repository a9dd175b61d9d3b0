"""Forms for the visa app."""

from django import forms

from django_confreg.visa.definitions import RequestKind
from django_confreg.visa.models import VisaRequest

PDF_CONTENT_TYPE = "application/pdf"

# camelCase keys accepted by the JSON endpoint.
JSON_FIELD_NAMES = {
    "otherTitle": "other_title",
    "firstName": "first_name",
    "middleName": "middle_name",
    "lastName": "last_name",
    "dateOfBirth": "date_of_birth",
    "paperNumber": "paper_number",
    "paperTitle": "paper_title",
    "academicProfile": "academic_profile",
    "conferenceInterests": "conference_interests",
    "iacrExperience": "iacr_experience",
    "hasIacr": "has_iacr",
    "fileKey": "file_key",
    "fileName": "file_name",
}

YES_NO = (("1", "Yes"), ("0", "No"))


def _is_other(title: str | None) -> bool:
    return (title or "").strip().lower() == "other"


class VisaRequestForm(forms.ModelForm):
    """Validate the JSON body of the visa request API."""

    has_iacr = forms.TypedChoiceField(choices=YES_NO, coerce=int, required=False, empty_value=None)

    class Meta:
        model = VisaRequest
        fields = (
            "title",
            "other_title",
            "first_name",
            "middle_name",
            "last_name",
            "email",
            "date_of_birth",
            "nationality",
            "institute",
            "paper_number",
            "paper_title",
            "academic_profile",
            "conference_interests",
            "iacr_experience",
            "has_iacr",
            "file_key",
            "file_name",
            "type",
        )

    @classmethod
    def from_json(cls, body: dict) -> "VisaRequestForm":
        """Bind a camelCase JSON body, accepting snake_case keys as well."""
        data = {JSON_FIELD_NAMES.get(key, key): value for key, value in body.items()}
        if data.get("type") is None:
            data["type"] = VisaRequest.Kind.VISA
        if isinstance(data.get("date_of_birth"), str):
            data["date_of_birth"] = data["date_of_birth"][:10]
        return cls(data)

    def clean(self) -> dict:
        """Require ``other_title`` when the title is "other"."""
        cleaned = super().clean()
        if _is_other(cleaned.get("title")) and not (cleaned.get("other_title") or "").strip():
            self.add_error("other_title", "Field is required.")
        return cleaned


class RequestApplicationForm(forms.Form):
    """Public HTML form for one :class:`RequestKind`.

    Kind-specific fields the kind does not ask for are removed, and those it
    lists as required are made mandatory.
    """

    title = forms.ChoiceField(choices=(), widget=forms.RadioSelect)
    other_title = forms.CharField(max_length=100, required=False)
    first_name = forms.CharField(max_length=200)
    middle_name = forms.CharField(max_length=200, required=False)
    last_name = forms.CharField(max_length=200)
    email = forms.EmailField()
    date_of_birth = forms.DateField(required=False, widget=forms.DateInput(attrs={"type": "date"}))
    nationality = forms.CharField(max_length=200, required=False)
    institute = forms.CharField(max_length=300, required=False)
    paper_number = forms.CharField(max_length=100, required=False)
    paper_title = forms.CharField(max_length=500, required=False)
    academic_profile = forms.CharField(widget=forms.Textarea, required=False)
    conference_interests = forms.CharField(widget=forms.Textarea, required=False)
    iacr_experience = forms.CharField(widget=forms.Textarea, required=False)
    has_iacr = forms.TypedChoiceField(
        choices=YES_NO,
        coerce=int,
        required=False,
        empty_value=None,
        widget=forms.RadioSelect,
        label="Are you an IACR member?",
    )
    attachment = forms.FileField(required=False)

    _KIND_FIELDS = (
        "date_of_birth",
        "nationality",
        "institute",
        "paper_number",
        "paper_title",
        "academic_profile",
        "conference_interests",
        "iacr_experience",
        "has_iacr",
    )

    def __init__(self, *args: object, kind: RequestKind, **kwargs: object) -> None:
        super().__init__(*args, **kwargs)
        self.kind = kind
        self.fields["title"].choices = [(title, title) for title in kind.titles]
        for name in self._KIND_FIELDS:
            if name not in kind.fields:
                del self.fields[name]
            elif name in kind.required:
                self.fields[name].required = True
        if kind.requires_file:
            self.fields["attachment"].required = True
            self.fields["attachment"].help_text = kind.file_help
        else:
            del self.fields["attachment"]

    def clean_attachment(self) -> object:
        """Accept a single PDF only."""
        attachment = self.cleaned_data.get("attachment")
        if attachment is None:
            return attachment
        is_pdf = attachment.content_type == PDF_CONTENT_TYPE or attachment.name.lower().endswith(".pdf")
        if not is_pdf:
            raise forms.ValidationError("Please upload a PDF file.")
        return attachment

    def clean(self) -> dict:
        """Require ``other_title`` when the title is "other"."""
        cleaned = super().clean()
        if _is_other(cleaned.get("title")) and not cleaned.get("other_title", "").strip():
            self.add_error("other_title", "Field is required.")
        return cleaned

    def to_request_fields(self) -> dict:
        """Map cleaned data onto :class:`VisaRequest` field values, minus the attachment."""
        data = {
            name: (value if value != "" else None)
            for name, value in self.cleaned_data.items()
            if name != "attachment"
        }
        data["type"] = self.kind.type
        return data
