"""Staff views listing and exporting registrations.

All views require a superuser or the ``confreg_registration.view_customerinfo``
permission.
"""

import logging

from django.db import DatabaseError
from django.http import HttpRequest, JsonResponse
from django.views import View
from django.views.generic import TemplateView

from django_confreg.features import FeatureRequiredMixin
from django_confreg.permissions import StaffRequiredMixin
from django_confreg.registration.services.listing import DEFAULT_SORT, export_rows, list_customers

logger = logging.getLogger(__name__)


def _int_param(request: HttpRequest, name: str, default: int | None) -> int | None:
    """Read an integer query parameter, falling back to *default* when absent or invalid."""
    try:
        return int(request.GET.get(name, ""))
    except ValueError:
        return default


def _listing_params(request: HttpRequest) -> dict[str, object]:
    return {
        "page": _int_param(request, "page", 1),
        "page_size": _int_param(request, "pageSize", None),
        "sort_by": request.GET.get("sortBy", DEFAULT_SORT),
        "sort_order": request.GET.get("sortOrder", "desc"),
        "search": request.GET.get("search", ""),
    }


class CustomerListView(StaffRequiredMixin, FeatureRequiredMixin, TemplateView):
    """Searchable, sortable, paginated table of registrations.

    A failed query renders the empty-state row instead of an error page.
    """

    required_feature = ("registration", "manage_ui")
    template_name = "django_confreg/manage/customer_list.html"

    def get_context_data(self, **kwargs: object) -> dict[str, object]:
        """Add the requested page of registrations, or ``None`` on query failure."""
        context = super().get_context_data(**kwargs)
        params = _listing_params(self.request)
        try:
            context["customer_page"] = list_customers(**params)
        except DatabaseError:
            logger.exception("Error fetching customers")
            context["customer_page"] = None
        context["search"] = params["search"]
        context["columns"] = (
            ("id", "ID"),
            ("first_name", "First name"),
            ("last_name", "Last name"),
            ("email", "Email"),
            ("affiliation", "Affiliation"),
            ("type", "Type"),
            ("status", "Status"),
            ("create_date", "Created"),
        )
        return context


class CustomerListAPIView(StaffRequiredMixin, FeatureRequiredMixin, View):
    """JSON listing: ``{data, pagination: {page, pageSize, total, totalPages}}``."""

    required_feature = "registration"

    def get(self, request: HttpRequest) -> JsonResponse:  # noqa: D102
        try:
            customer_page = list_customers(**_listing_params(request))
        except DatabaseError:
            logger.exception("Error fetching customers")
            return JsonResponse({"error": "Error fetching customers"}, status=500)
        return JsonResponse(customer_page.as_dict())


class CustomerExportView(StaffRequiredMixin, FeatureRequiredMixin, View):
    """JSON export of every registration with human-readable column names."""

    required_feature = "registration"

    def get(self, request: HttpRequest) -> JsonResponse:  # noqa: ARG002, D102
        try:
            rows = export_rows()
        except DatabaseError:
            logger.exception("Error fetching export data")
            return JsonResponse({"error": "Error fetching export data", "success": False}, status=500)
        return JsonResponse({"data": rows, "success": True})
