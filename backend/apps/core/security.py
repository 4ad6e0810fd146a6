"""
Core security - authentication classes for API.

This backend does not validate session tokens itself. A deployment must
install a session middleware ahead of the API that verifies the bearer token
with the identity provider and sets request.auth_context to an AuthContext
carrying the user, their Member record and the Organization they act in.
Without it every protected endpoint answers 401.
"""

from typing import TYPE_CHECKING

from django.http import HttpRequest
from ninja.errors import HttpError
from ninja.security import HttpBearer

from apps.core.auth import AuthContext

if TYPE_CHECKING:
    from apps.accounts.models import Member, User
    from apps.organizations.models import Organization


class BearerAuth(HttpBearer):
    """
    Bearer token authentication for API endpoints.

    Token validation and session resolution are performed by the session layer,
    which leaves the resolved AuthContext on request.auth_context. This class
    hands that context to Ninja (it becomes request.auth) and provides the
    OpenAPI security scheme documentation.
    """

    def authenticate(self, request: HttpRequest, token: str) -> AuthContext | None:
        """Return the resolved context, or None (triggers 401)."""
        if not token:
            return None
        context = getattr(request, "auth_context", None)
        if isinstance(context, AuthContext) and context.is_authenticated:
            return context
        return None


def get_auth_context(request: HttpRequest) -> tuple["User", "Member", "Organization"]:
    """
    Return (user, member, organization) for an authenticated request.

    Raises:
        HttpError 401: If request.auth is missing or incomplete
    """
    context = getattr(request, "auth", None)
    if not isinstance(context, AuthContext):
        raise HttpError(401, "Not authenticated")
    return context.require_auth()
