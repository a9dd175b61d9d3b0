"""URL configuration for the invoices app.

Mount at the site root in the host project::

    urlpatterns = [
        path("", include("django_confreg.invoices.urls")),
    ]
"""

from django.urls import path

from django_confreg.invoices.views import GenerateInvoiceView, InvoicePreviewView, SendInvoiceView

app_name = "invoices"

urlpatterns = [
    path("invoices/preview/", InvoicePreviewView.as_view(), name="preview"),
    path("api/invoices/generate/", GenerateInvoiceView.as_view(), name="generate"),
    path("api/invoices/send/", SendInvoiceView.as_view(), name="send"),
]
