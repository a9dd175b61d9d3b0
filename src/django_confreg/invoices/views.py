"""Views for the invoices app: staff preview plus generate and send endpoints."""

import logging
import smtplib

from django.http import HttpRequest, HttpResponse, JsonResponse
from django.views import View
from django.views.generic import TemplateView

from django_confreg.features import FeatureRequiredMixin
from django_confreg.invoices.data import InvoiceData, sample_invoice_data
from django_confreg.invoices.mail import MailConfigurationError, send_invoice_email
from django_confreg.invoices.rendering import invoice_context, render_invoice_html, render_invoice_pdf
from django_confreg.jsonapi import parse_json_body
from django_confreg.permissions import StaffRequiredMixin

logger = logging.getLogger(__name__)


def _invoice_from_body(body: dict) -> InvoiceData:
    return InvoiceData.from_dict(body.get("invoiceData"))


class InvoicePreviewView(StaffRequiredMixin, FeatureRequiredMixin, TemplateView):
    """Staff page rendering a sample invoice with send and download actions."""

    required_feature = ("invoices", "manage_ui")
    template_name = "django_confreg/invoices/invoice_preview.html"

    def get_context_data(self, **kwargs: object) -> dict[str, object]:  # noqa: D102
        context = super().get_context_data(**kwargs)
        invoice = sample_invoice_data()
        context.update(invoice_context(invoice))
        context["invoice_json"] = invoice.to_dict()
        return context


class GenerateInvoiceView(StaffRequiredMixin, FeatureRequiredMixin, View):
    """Render posted invoice data as a PDF download or an HTML fragment."""

    required_feature = "invoices"

    def post(self, request: HttpRequest) -> HttpResponse:
        """Render ``invoiceData`` in the requested ``format`` (default ``"html"``).

        Returns:
            ``application/pdf`` attachment or ``text/html`` fragment; 400 for
            malformed invoice data or an unknown format.
        """
        try:
            body = parse_json_body(request)
            invoice = _invoice_from_body(body)
        except ValueError as exc:
            return JsonResponse({"error": str(exc)}, status=400)

        output = body.get("format", "html")
        if output == "pdf":
            response = HttpResponse(render_invoice_pdf(invoice), content_type="application/pdf")
            response["Content-Disposition"] = f'attachment; filename="invoice-{invoice.invoice_number}.pdf"'
            return response
        if output == "html":
            return HttpResponse(render_invoice_html(invoice), content_type="text/html; charset=utf-8")
        return JsonResponse({"error": f"Unsupported format: {output!r}"}, status=400)


class SendInvoiceView(StaffRequiredMixin, FeatureRequiredMixin, View):
    """Email posted invoice data to ``recipientEmail``."""

    required_feature = "invoices"

    def post(self, request: HttpRequest) -> JsonResponse:
        """Send the invoice and report the message id.

        Returns:
            ``{"success": true, "messageId": ...}``; 400 for bad input; 500
            with ``error`` and ``details`` when mail is misconfigured or
            delivery fails.
        """
        try:
            body = parse_json_body(request)
            invoice = _invoice_from_body(body)
        except ValueError as exc:
            return JsonResponse({"error": str(exc)}, status=400)

        recipient = str(body.get("recipientEmail") or "").strip()
        if not recipient:
            return JsonResponse({"error": "recipientEmail is required"}, status=400)

        try:
            message_id = send_invoice_email(invoice, recipient)
        except MailConfigurationError as exc:
            logger.error("Invoice email not sent: %s", exc)
            return JsonResponse({"error": "Mail configuration incomplete", "details": str(exc)}, status=500)
        except (OSError, smtplib.SMTPException) as exc:
            logger.exception("Error sending invoice %s", invoice.invoice_number)
            return JsonResponse({"error": "Failed to send invoice email", "details": str(exc)}, status=500)

        return JsonResponse({"success": True, "messageId": message_id})
