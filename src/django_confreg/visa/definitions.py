"""The three request forms served by the visa app.

Every form shares the identity fields (title, names, email); each kind adds
its own questions and may require a PDF attachment.
"""

from dataclasses import dataclass

from django.http import Http404

from django_confreg.visa.models import VisaRequest

SENIOR_TITLES = ("Professor", "A/Professor", "Dr", "Mr", "Ms", "Miss", "other")
STUDENT_TITLES = ("Mr", "Mrs", "Miss", "Other")


@dataclass(frozen=True, slots=True)
class RequestKind:
    """Everything needed to render and validate one request form.

    Attributes:
        slug: URL segment, e.g. ``"travel-stipend"``.
        type: The stored ``VisaRequest.type``.
        name: Page heading.
        titles: Title choices; a title equal to ``"other"`` (any case)
            makes ``other_title`` mandatory.
        fields: Kind-specific fields shown on the form.
        required: Subset of ``fields`` that must be filled in.
        requires_file: Whether a single PDF must be attached.
        file_help: Instructions shown next to the upload field.
    """

    slug: str
    type: int
    name: str
    titles: tuple[str, ...]
    fields: tuple[str, ...] = ()
    required: tuple[str, ...] = ()
    requires_file: bool = False
    file_help: str = ""


VISA = RequestKind(
    slug="visa",
    type=VisaRequest.Kind.VISA,
    name="Visa Invitation Letter Request",
    titles=SENIOR_TITLES,
    fields=(
        "date_of_birth",
        "nationality",
        "institute",
        "paper_title",
        "academic_profile",
        "conference_interests",
        "iacr_experience",
    ),
    required=("date_of_birth", "nationality", "institute", "conference_interests", "iacr_experience"),
)

TRAVEL_STIPEND = RequestKind(
    slug="travel-stipend",
    type=VisaRequest.Kind.TRAVEL_STIPEND,
    name="Student Travel Stipends",
    titles=STUDENT_TITLES,
    requires_file=True,
    file_help=(
        "Upload a single PDF file with 1) the student's CV, 2) a statement from the student, and "
        "3) a letter from the student's research advisor with a justification of financial need."
    ),
)

STUDENT_WAIVER = RequestKind(
    slug="student-waiver",
    type=VisaRequest.Kind.STUDENT_WAIVER,
    name="Student Registration Waiver",
    titles=STUDENT_TITLES,
    fields=("paper_number", "paper_title", "institute", "has_iacr"),
    required=("paper_number", "paper_title", "institute", "has_iacr"),
    requires_file=True,
    file_help="Please select a PDF file to upload.",
)

_REGISTRY: dict[str, RequestKind] = {kind.slug: kind for kind in (VISA, TRAVEL_STIPEND, STUDENT_WAIVER)}


def get_request_kind(slug: str) -> RequestKind:
    """Look up a request form by slug.

    Raises:
        Http404: If no request form with that slug exists.
    """
    try:
        return _REGISTRY[slug]
    except KeyError:
        raise Http404(f"No request form named {slug!r}") from None
