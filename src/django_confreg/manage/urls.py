"""URL configuration for the management pages.

Mount under a staff prefix in the host project::

    urlpatterns = [
        path("manage/", include("django_confreg.manage.urls")),
    ]
"""

from django.urls import path

from django_confreg.manage.views import CustomerExportView, CustomerListAPIView, CustomerListView

app_name = "manage"

urlpatterns = [
    path("customers/", CustomerListView.as_view(), name="customer-list"),
    path("customers/api/", CustomerListAPIView.as_view(), name="customer-list-api"),
    path("customers/export/", CustomerExportView.as_view(), name="customer-export"),
]
