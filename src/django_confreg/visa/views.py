"""Views for the visa app.

Serves the three public request forms plus the JSON request and upload
endpoints used by external front-ends.
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
from django_confreg.visa.definitions import RequestKind, get_request_kind
from django_confreg.visa.forms import RequestApplicationForm, VisaRequestForm
from django_confreg.visa.models import VisaRequest
from django_confreg.visa.storage import StorageError, upload_file

logger = logging.getLogger(__name__)


@method_decorator(csrf_exempt, name="dispatch")
class VisaRequestCreateView(FeatureRequiredMixin, View):
    """JSON endpoint creating one visa or travel request."""

    required_feature = "visa_requests"

    def post(self, request: HttpRequest) -> JsonResponse:
        """Validate the camelCase JSON body and store the request.

        Returns:
            201 with ``{"id": ...}``, 400 with ``{"error": ...}`` on invalid
            input, or 500 when the database write fails.
        """
        try:
            body = parse_json_body(request)
        except ValueError as exc:
            return JsonResponse({"error": str(exc)}, status=400)

        form = VisaRequestForm.from_json(body)
        if not form.is_valid():
            return JsonResponse({"error": form_errors(form)}, status=400)

        try:
            visa_request = form.save()
        except DatabaseError:
            logger.exception("Error creating visa request")
            return JsonResponse({"error": "Internal Server Error"}, status=500)

        logger.info("Created visa request %s (type %s)", visa_request.pk, visa_request.type)
        return JsonResponse({"id": visa_request.pk}, status=201)


@method_decorator(csrf_exempt, name="dispatch")
class UploadView(FeatureRequiredMixin, View):
    """Store one multipart ``file`` field in object storage."""

    required_feature = "visa_requests"

    def post(self, request: HttpRequest) -> JsonResponse:
        """Upload the file under ``uploads/<epoch-ms>_<name>``.

        Returns:
            ``{"success": true, "fileKey": ..., "fileName": ...}``, 400 when
            no file was sent, or 500 when storage rejects the upload.
        """
        uploaded = request.FILES.get("file")
        if uploaded is None:
            return JsonResponse({"error": "No file uploaded"}, status=400)

        try:
            stored = upload_file(uploaded)
        except StorageError:
            return JsonResponse({"error": "Upload failed"}, status=500)

        return JsonResponse({"success": True, "fileKey": stored.key, "fileName": stored.name})


class RequestFormView(FeatureRequiredMixin, View):
    """Render and accept the public form for one request kind.

    The attachment, when the kind needs one, is uploaded before the request
    is saved so the stored record always points at an existing object.
    """

    required_feature = ("visa_requests", "public_ui")
    template_name = "django_confreg/visa/request_form.html"

    def get(self, request: HttpRequest, kind: str) -> HttpResponse:  # noqa: D102
        request_kind = get_request_kind(kind)
        return self._render(request, request_kind, RequestApplicationForm(kind=request_kind))

    def post(self, request: HttpRequest, kind: str) -> HttpResponse:  # noqa: D102
        request_kind = get_request_kind(kind)
        form = RequestApplicationForm(request.POST, request.FILES, kind=request_kind)
        if not form.is_valid():
            return self._render(request, request_kind, form)

        fields = form.to_request_fields()
        attachment = form.cleaned_data.get("attachment")
        try:
            if attachment is not None:
                stored = upload_file(attachment)
                fields.update(file_key=stored.key, file_name=stored.name)
            VisaRequest.objects.create(**fields)
        except (StorageError, DatabaseError):
            logger.exception("Error submitting %s request", kind)
            error = "Your request could not be submitted. Please try again later."
            return self._render(request, request_kind, form, error=error, status=500)

        return redirect(reverse("visa:submitted", kwargs={"kind": kind}))

    def _render(
        self,
        request: HttpRequest,
        kind: RequestKind,
        form: RequestApplicationForm,
        error: str = "",
        status: int = 200,
    ) -> HttpResponse:
        context = {"kind": kind, "form": form, "submission_error": error}
        return render(request, self.template_name, context, status=status)


class RequestSubmittedView(FeatureRequiredMixin, TemplateView):
    """Confirmation page after a request was stored."""

    required_feature = ("visa_requests", "public_ui")
    template_name = "django_confreg/visa/submitted.html"

    def get_context_data(self, **kwargs: object) -> dict[str, object]:  # noqa: D102
        context = super().get_context_data(**kwargs)
        context["kind"] = get_request_kind(str(self.kwargs["kind"]))
        return context
