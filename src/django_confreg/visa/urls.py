"""URL configuration for the visa app.

Mount at the site root in the host project::

    urlpatterns = [
        path("", include("django_confreg.visa.urls")),
    ]
"""

from django.urls import path

from django_confreg.visa.views import RequestFormView, RequestSubmittedView, UploadView, VisaRequestCreateView

app_name = "visa"

urlpatterns = [
    path("visa/<slug:kind>/", RequestFormView.as_view(), name="request-form"),
    path("visa/<slug:kind>/submitted/", RequestSubmittedView.as_view(), name="submitted"),
    path("api/visa-requests/", VisaRequestCreateView.as_view(), name="request-create"),
    path("api/upload/", UploadView.as_view(), name="upload"),
]
