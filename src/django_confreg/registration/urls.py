"""URL configuration for the registration app.

Mount at the site root in the host project::

    urlpatterns = [
        path("", include("django_confreg.registration.urls")),
    ]
"""

from django.urls import path

from django_confreg.registration.views import (
    CustomerCreateView,
    PaymentLogCreateView,
    RegistrationCompleteView,
    RegistrationFormView,
)
from django_confreg.registration.webhooks import stripe_webhook

app_name = "registration"

urlpatterns = [
    path("register/<slug:form_slug>/", RegistrationFormView.as_view(), name="form"),
    path("register/<slug:form_slug>/complete/", RegistrationCompleteView.as_view(), name="complete"),
    path("api/customers/", CustomerCreateView.as_view(), name="customer-create"),
    path("api/payment-logs/", PaymentLogCreateView.as_view(), name="payment-log-create"),
    path("webhooks/stripe/", stripe_webhook, name="stripe-webhook"),
]
