"""Access control shared by the staff-only views."""

from django.contrib.auth.mixins import LoginRequiredMixin
from django.core.exceptions import PermissionDenied
from django.http import HttpRequest, HttpResponse


class StaffRequiredMixin(LoginRequiredMixin):
    """Restrict a view to superusers and holders of ``permission_required``.

    Anonymous users are sent to the login page by ``LoginRequiredMixin``;
    authenticated users without the permission get a 403.

    Raises:
        PermissionDenied: If the user is not authorized.
    """

    permission_required = "confreg_registration.view_customerinfo"

    def dispatch(self, request: HttpRequest, *args: str, **kwargs: str) -> HttpResponse:
        """Enforce authentication and the staff permission before dispatch."""
        if not request.user.is_authenticated:
            return self.handle_no_permission()  # type: ignore[return-value]

        if not (request.user.is_superuser or request.user.has_perm(self.permission_required)):
            raise PermissionDenied

        return super().dispatch(request, *args, **kwargs)  # type: ignore[misc]
