"""Staff-facing listing and export of registrations."""

import math
from dataclasses import dataclass

from django.db.models import Q, QuerySet
from django.utils import timezone

from django_confreg.registration.models import CustomerInfo, RegistrationType
from django_confreg.registration.services.intake import serialize_customer
from django_confreg.settings import get_config

SEARCH_FIELDS = ("first_name", "last_name", "email", "affiliation", "position")

SORTABLE_FIELDS = frozenset(
    {
        "id",
        "title",
        "first_name",
        "middle_name",
        "last_name",
        "attendee_name",
        "email",
        "phone",
        "affiliation",
        "position",
        "type",
        "paper_number",
        "status",
        "country",
        "create_date",
    }
)

DEFAULT_SORT = "id"

IDENTIFIER_TYPES = {
    RegistrationType.PAPER_AUTHOR: "Paper ID & Title",
    RegistrationType.POSTER_AUTHOR: "Poster ID & Title (to be entered by the poster author)",
    RegistrationType.STUDENT: "Student ID",
}


@dataclass(frozen=True, slots=True)
class CustomerPage:
    """One page of registrations plus the pagination totals."""

    customers: list[CustomerInfo]
    page: int
    page_size: int
    total: int
    sort_by: str = DEFAULT_SORT
    sort_order: str = "desc"
    search: str = ""

    @property
    def total_pages(self) -> int:
        """``ceil(total / page_size)``; zero when there are no matches."""
        return math.ceil(self.total / self.page_size)

    @property
    def has_previous(self) -> bool:  # noqa: D102
        return self.page > 1

    @property
    def has_next(self) -> bool:  # noqa: D102
        return self.page < self.total_pages

    def as_dict(self) -> dict:
        """Return the JSON body served by the listing API."""
        return {
            "data": [serialize_customer(customer) for customer in self.customers],
            "pagination": {
                "page": self.page,
                "pageSize": self.page_size,
                "total": self.total,
                "totalPages": self.total_pages,
            },
        }


def search_customers(search: str = "") -> QuerySet[CustomerInfo]:
    """Return registrations matching *search* in any of :data:`SEARCH_FIELDS`.

    Matching is a case-insensitive substring test combined with OR. An empty
    term matches everything.
    """
    queryset = CustomerInfo.objects.all()
    term = search.strip()
    if term:
        condition = Q()
        for name in SEARCH_FIELDS:
            condition |= Q(**{f"{name}__icontains": term})
        queryset = queryset.filter(condition)
    return queryset


def list_customers(
    page: int = 1,
    page_size: int | None = None,
    sort_by: str = DEFAULT_SORT,
    sort_order: str = "desc",
    search: str = "",
) -> CustomerPage:
    """Return one offset-paginated, sorted, searched page of registrations.

    Args:
        page: 1-based page number; values below 1 are treated as 1.
        page_size: Rows per page, clamped to ``[1, max_page_size]``;
            defaults to ``default_page_size`` from configuration.
        sort_by: Column to sort on; unknown columns fall back to ``id``.
        sort_order: ``"asc"`` or ``"desc"``; anything else means ``"desc"``.
        search: Free-text term matched against :data:`SEARCH_FIELDS`.

    Returns:
        A :class:`CustomerPage`. Database errors propagate.
    """
    config = get_config()
    page = max(page, 1)
    page_size = min(max(page_size or config.default_page_size, 1), config.max_page_size)
    if sort_by not in SORTABLE_FIELDS:
        sort_by = DEFAULT_SORT
    sort_order = "asc" if sort_order == "asc" else "desc"

    queryset = search_customers(search)
    total = queryset.count()
    ordering = sort_by if sort_order == "asc" else f"-{sort_by}"
    offset = (page - 1) * page_size
    customers = list(queryset.order_by(ordering, "-id")[offset : offset + page_size])

    return CustomerPage(
        customers=customers,
        page=page,
        page_size=page_size,
        total=total,
        sort_by=sort_by,
        sort_order=sort_order,
        search=search.strip(),
    )


def export_rows() -> list[dict[str, object]]:
    """Return every registration as a row of human-labelled columns, newest first."""
    rows = []
    for customer in CustomerInfo.objects.order_by("-create_date", "-id"):
        try:
            registration_type = RegistrationType(customer.type).label
        except ValueError:
            registration_type = "N/A"
        rows.append(
            {
                "Invoice ID": customer.pk,
                "Title": customer.title,
                "First name": customer.first_name,
                "Middle name": customer.middle_name,
                "Last name": customer.last_name,
                "Attendee Name": customer.attendee_name,
                "Email": customer.email,
                "Affiliation": customer.affiliation,
                "Registration Type": registration_type,
                "Identifier Type": IDENTIFIER_TYPES.get(customer.type),
                "Identifier Number": customer.paper_number,
                "Payment Status": "Paid" if customer.is_paid else "Unpaid",
                "Address": customer.address_display,
                "Dietary requirements": customer.dietary_requirements,
                "Created at": timezone.localtime(customer.create_date).strftime("%d/%m/%Y"),
            }
        )
    return rows
