"""Forms for the registration app."""

from django import forms

from django_confreg.registration.definitions import (
    DIETARY_OPTIONS,
    OTHER_DIETARY_ID,
    OTHER_TITLE,
    FormDefinition,
    dietary_text,
)
from django_confreg.registration.models import CustomerInfo, PaymentLog

VISA_CHOICES = (("1", "Yes"), ("0", "No"))


class RegistrationForm(forms.Form):
    """Public registration form driven by a :class:`FormDefinition`.

    Fields the definition does not ask for are removed in ``__init__``, and
    the registration-type radio buttons are built from the definition's
    options, so every venue shares one form class and one template.
    """

    title = forms.ChoiceField(choices=())
    other_title = forms.CharField(max_length=100, required=False)
    first_name = forms.CharField(max_length=200)
    middle_name = forms.CharField(max_length=200, required=False)
    last_name = forms.CharField(max_length=200)
    email = forms.EmailField()
    phone = forms.CharField(max_length=50, required=False)
    affiliation = forms.CharField(max_length=300)
    position = forms.CharField(max_length=200)
    type = forms.TypedChoiceField(choices=(), coerce=int, widget=forms.RadioSelect)
    paper_number = forms.CharField(max_length=300, required=False)
    have_visa = forms.TypedChoiceField(choices=VISA_CHOICES, coerce=int, widget=forms.RadioSelect)
    dietary_requirements = forms.MultipleChoiceField(choices=DIETARY_OPTIONS, widget=forms.CheckboxSelectMultiple)
    other_explain = forms.CharField(max_length=500, required=False)

    def __init__(self, *args: object, definition: FormDefinition, **kwargs: object) -> None:
        super().__init__(*args, **kwargs)
        self.definition = definition

        if definition.titles:
            self.fields["title"].choices = [
                (title, "Other" if title == OTHER_TITLE else title) for title in definition.titles
            ]
        else:
            del self.fields["title"]
            del self.fields["other_title"]
        if not definition.ask_position:
            del self.fields["position"]
        if not definition.ask_phone:
            del self.fields["phone"]
        if not definition.ask_visa:
            del self.fields["have_visa"]

        self.fields["type"].choices = [(option.value, option.label) for option in definition.options]
        identifier_labels = {option.identifier_label for option in definition.options if option.identifier_label}
        if identifier_labels:
            self.fields["paper_number"].label = " / ".join(sorted(identifier_labels))
        else:
            del self.fields["paper_number"]

    def clean(self) -> dict:
        """Apply the rules that depend on more than one field."""
        cleaned = super().clean()

        if cleaned.get("title") == OTHER_TITLE and not cleaned.get("other_title", "").strip():
            self.add_error("other_title", "Please specify your title.")

        option = self.definition.get_option(cleaned["type"]) if "type" in cleaned else None
        if option is not None and option.requires_identifier and not cleaned.get("paper_number", "").strip():
            self.add_error("paper_number", f"{option.identifier_label} is required for this registration type.")

        dietary = cleaned.get("dietary_requirements") or []
        if OTHER_DIETARY_ID in dietary and not cleaned.get("other_explain", "").strip():
            self.add_error("other_explain", "Please describe your other dietary requirement.")

        return cleaned

    def to_customer_fields(self) -> dict:
        """Map cleaned data onto :class:`CustomerInfo` field values.

        Must only be called on a valid form.
        """
        data = self.cleaned_data
        dietary = data["dietary_requirements"]
        return {
            "title": data.get("title") or None,
            "other_title": data.get("other_title") or None,
            "first_name": data["first_name"],
            "middle_name": data.get("middle_name") or None,
            "last_name": data["last_name"],
            "email": data["email"],
            "phone": data.get("phone") or None,
            "affiliation": data["affiliation"],
            "position": data.get("position") or None,
            "type": data["type"],
            "paper_number": data.get("paper_number") or None,
            "have_visa": data.get("have_visa"),
            "dietary_requirements": dietary_text(dietary, data.get("other_explain", "")),
            "other_explain": data.get("other_explain") or None,
            "form_slug": self.definition.slug,
        }


def build_registration_form(definition: FormDefinition, data: dict | None = None) -> RegistrationForm:
    """Return a :class:`RegistrationForm` bound to *data* for *definition*."""
    return RegistrationForm(data, definition=definition)


class CustomerIntakeForm(forms.ModelForm):
    """Validate the JSON body accepted by the customer intake API.

    The body uses the model's snake_case names, except ``otherTitle`` which
    the view maps onto ``other_title`` before binding.
    """

    have_visa = forms.TypedChoiceField(choices=VISA_CHOICES, coerce=int, required=False, empty_value=None)

    class Meta:
        model = CustomerInfo
        fields = (
            "title",
            "other_title",
            "first_name",
            "middle_name",
            "last_name",
            "email",
            "phone",
            "affiliation",
            "position",
            "type",
            "paper_number",
            "have_visa",
            "dietary_requirements",
            "other_explain",
            "form_slug",
        )


class PaymentLogForm(forms.ModelForm):
    """Validate a client-reported payment log entry."""

    class Meta:
        model = PaymentLog
        fields = ("content", "type")
