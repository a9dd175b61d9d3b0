"""Declarative definitions of the public registration forms.

Each conference venue gets one :class:`FormDefinition` describing which
questions are asked, which registration categories are offered, and what
each category costs before and after the early-bird cutoff. A single form
class (:func:`django_confreg.registration.forms.build_registration_form`)
and a single template interpret every definition.
"""

from dataclasses import dataclass
from decimal import Decimal

from django.http import Http404

from django_confreg.registration.models import RegistrationType

OTHER_DIETARY_ID = "5"

DIETARY_OPTIONS: tuple[tuple[str, str], ...] = (
    ("0", "No"),
    ("1", "Vegetarian"),
    ("2", "Vegan"),
    ("3", "Halal"),
    ("4", "Dairy free"),
    (OTHER_DIETARY_ID, "Other"),
)

OTHER_TITLE = "other"


@dataclass(frozen=True, slots=True)
class RegistrationOption:
    """A registration category offered by a form.

    Attributes:
        value: The stored ``CustomerInfo.type`` value.
        label: Text shown next to the radio button.
        early_price: Price before the cutoff, or ``None`` when the form does
            not quote prices.
        late_price: Price at or after the cutoff.
        identifier_label: When set, the registrant must supply an
            identifier (paper ID, student ID) under this label.
    """

    value: int
    label: str
    early_price: Decimal | None = None
    late_price: Decimal | None = None
    identifier_label: str = ""

    @property
    def requires_identifier(self) -> bool:
        """Whether choosing this option makes the identifier field mandatory."""
        return bool(self.identifier_label)


@dataclass(frozen=True, slots=True)
class FormDefinition:
    """Everything needed to render, validate, and price one registration form."""

    slug: str
    name: str
    subtitle: str
    options: tuple[RegistrationOption, ...]
    titles: tuple[str, ...] = ()
    ask_position: bool = False
    ask_phone: bool = True
    ask_visa: bool = False
    currency_label: str = "AU$"

    def get_option(self, value: int | str) -> RegistrationOption | None:
        """Return the option whose value matches *value*, or ``None``."""
        for option in self.options:
            if str(option.value) == str(value):
                return option
        return None

    @property
    def quotes_prices(self) -> bool:
        """Whether any option carries a price to show on the form."""
        return any(option.early_price is not None for option in self.options)


PROVSEC = FormDefinition(
    slug="provsec",
    name="The 18th International Conference on Provable and Practical Security",
    subtitle="",
    options=(
        RegistrationOption(RegistrationType.PAPER_AUTHOR, "Author", identifier_label="Paper number"),
        RegistrationOption(RegistrationType.POSTER_AUTHOR, "Non-Author"),
    ),
    ask_position=True,
    ask_visa=True,
)

RAID = FormDefinition(
    slug="raid",
    name="The 28th International Symposium on Research in Attacks, Intrusions and Defenses (RAID 2025)",
    subtitle="19 OCT - 22 OCT 2025, Gold Coast, Australia",
    titles=("Prof", "A/Prof", "Dr", "Mr", "Ms", OTHER_TITLE),
    options=(
        RegistrationOption(
            RegistrationType.PAPER_AUTHOR,
            "Paper Author Registration",
            Decimal(1450),
            Decimal(1600),
            identifier_label="Paper ID & Title",
        ),
        RegistrationOption(
            RegistrationType.POSTER_AUTHOR,
            "Poster Author Registration",
            Decimal(1450),
            Decimal(1600),
        ),
        RegistrationOption(RegistrationType.REGULAR, "Regular Registration", Decimal(1450), Decimal(1600)),
        RegistrationOption(
            RegistrationType.STUDENT,
            "Student Registration",
            Decimal(800),
            Decimal(950),
            identifier_label="Student ID",
        ),
    ),
    ask_phone=True,
)

_REGISTRY: dict[str, FormDefinition] = {definition.slug: definition for definition in (PROVSEC, RAID)}


def get_form_definition(slug: str) -> FormDefinition:
    """Look up a registration form by slug.

    Raises:
        Http404: If no form with that slug exists.
    """
    try:
        return _REGISTRY[slug]
    except KeyError:
        raise Http404(f"No registration form named {slug!r}") from None


def form_definitions() -> list[FormDefinition]:
    """Return every registered form definition."""
    return list(_REGISTRY.values())


def dietary_text(selected: list[str] | tuple[str, ...], other_explain: str = "") -> str:
    """Turn selected dietary option ids into the stored display string.

    Labels are joined with ``", "`` in selection order; unknown ids are
    dropped. When the "Other" option is selected with a qualifier, its label
    becomes ``"Other: <qualifier>"``.

    Example::

        >>> dietary_text(["1", "5"], "No nuts")
        'Vegetarian, Other: No nuts'
    """
    label_by_id = dict(DIETARY_OPTIONS)
    labels = [label_by_id[option_id] for option_id in selected if option_id in label_by_id]
    text = ", ".join(labels)
    if OTHER_DIETARY_ID in selected and other_explain:
        text = text.replace("Other", f"Other: {other_explain}", 1)
    return text
