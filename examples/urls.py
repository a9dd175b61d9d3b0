"""URL configuration for the example development server."""

from django.contrib import admin
from django.contrib.auth import views as auth_views
from django.urls import include, path
from django.views.generic import RedirectView

urlpatterns = [
    path("", RedirectView.as_view(url="/register/raid/"), name="root"),
    path("admin/", admin.site.urls),
    path("accounts/login/", auth_views.LoginView.as_view(template_name="admin/login.html"), name="login"),
    path("accounts/logout/", auth_views.LogoutView.as_view(), name="logout"),
    path("manage/", include("django_confreg.manage.urls")),
    path("", include("django_confreg.registration.urls")),
    path("", include("django_confreg.visa.urls")),
    path("", include("django_confreg.invoices.urls")),
]
