"""Views for the registration app.

Provides the public registration forms, the hand-off to Stripe Checkout,
and the JSON intake and payment-log endpoints.
"""

import logging

from django.db import DatabaseError
from django.http import HttpRequest, HttpResponse, JsonResponse
from django.shortcuts import redirect, render
from django.urls import reverse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt
from django.views.generic import TemplateView

from django_confreg.features import FeatureRequiredMixin
from django_confreg.jsonapi import form_errors, parse_json_body
from django_confreg.permissions import StaffRequiredMixin
from django_confreg.registration.definitions import FormDefinition, get_form_definition
from django_confreg.registration.forms import CustomerIntakeForm, PaymentLogForm, build_registration_form
from django_confreg.registration.pricing import build_checkout_url, checkout_link, is_early_bird, quote_price
from django_confreg.registration.services.intake import create_registration, serialize_customer

logger = logging.getLogger(__name__)

SUBMISSION_FAILED = "Your registration could not be submitted. Please try again later."


class RegistrationFormView(FeatureRequiredMixin, View):
    """Render and accept one venue's registration form.

    A valid submission creates an unpaid registration and redirects to the
    Stripe Checkout link for the chosen type and the price tier in force at
    submission time. Without a configured link the registrant lands on the
    completion page instead.
    """

    required_feature = ("registration", "public_ui")
    template_name = "django_confreg/registration/form.html"

    def get(self, request: HttpRequest, form_slug: str) -> HttpResponse:
        """Show the empty form with prices quoted for the current tier."""
        definition = get_form_definition(form_slug)
        return self._render(request, definition, build_registration_form(definition))

    def post(self, request: HttpRequest, form_slug: str) -> HttpResponse:
        """Validate, persist, and hand the registrant over to checkout."""
        definition = get_form_definition(form_slug)
        form = build_registration_form(definition, request.POST)
        if not form.is_valid():
            return self._render(request, definition, form)

        try:
            customer = create_registration(form.to_customer_fields())
        except DatabaseError:
            logger.exception("Error creating registration for form '%s'", form_slug)
            return self._render(request, definition, form, error=SUBMISSION_FAILED, status=500)

        link = checkout_link(definition, customer.type)
        if not link:
            return redirect(reverse("registration:complete", kwargs={"form_slug": form_slug}))
        return redirect(build_checkout_url(link, customer.pk, customer.email))

    def _render(
        self,
        request: HttpRequest,
        definition: FormDefinition,
        form: object,
        error: str = "",
        status: int = 200,
    ) -> HttpResponse:
        context = {
            "definition": definition,
            "form": form,
            "prices": [(option, quote_price(option)) for option in definition.options],
            "is_early_bird": is_early_bird(),
            "submission_error": error,
        }
        return render(request, self.template_name, context, status=status)


class RegistrationCompleteView(FeatureRequiredMixin, TemplateView):
    """Thank-you page shown when no checkout link applies."""

    required_feature = ("registration", "public_ui")
    template_name = "django_confreg/registration/complete.html"

    def get_context_data(self, **kwargs: object) -> dict[str, object]:  # noqa: D102
        context = super().get_context_data(**kwargs)
        context["definition"] = get_form_definition(str(self.kwargs["form_slug"]))
        return context


@method_decorator(csrf_exempt, name="dispatch")
class CustomerCreateView(FeatureRequiredMixin, View):
    """JSON intake endpoint creating one unpaid registration."""

    required_feature = "registration"

    def post(self, request: HttpRequest) -> JsonResponse:
        """Validate the JSON body and create the registration.

        Returns:
            201 with the stored record, 400 with ``{"error": ...}`` on
            invalid input, or 500 when the database write fails.
        """
        try:
            body = parse_json_body(request)
        except ValueError as exc:
            return JsonResponse({"error": str(exc)}, status=400)

        if "otherTitle" in body:
            body.setdefault("other_title", body.pop("otherTitle"))

        form = CustomerIntakeForm(body)
        if not form.is_valid():
            return JsonResponse({"error": form_errors(form)}, status=400)

        try:
            customer = create_registration(form.cleaned_data)
        except DatabaseError:
            logger.exception("Error creating customer")
            return JsonResponse({"error": "Error creating customer"}, status=500)

        return JsonResponse(serialize_customer(customer), status=201)


class PaymentLogCreateView(StaffRequiredMixin, View):
    """Append a client-reported entry to the payment log."""

    permission_required = "confreg_registration.add_paymentlog"

    def post(self, request: HttpRequest) -> JsonResponse:  # noqa: D102
        try:
            body = parse_json_body(request)
        except ValueError as exc:
            return JsonResponse({"error": str(exc)}, status=400)

        form = PaymentLogForm(body)
        if not form.is_valid():
            return JsonResponse({"error": form_errors(form)}, status=400)

        try:
            log = form.save()
        except DatabaseError:
            logger.exception("Error creating payment log")
            return JsonResponse({"error": "Error creating payment log"}, status=500)

        return JsonResponse(
            {
                "id": log.pk,
                "content": log.content,
                "type": log.type,
                "customer_id": log.customer_id,
                "create_time": log.create_time.isoformat(),
            },
            status=201,
        )
