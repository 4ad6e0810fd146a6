"""
Shared pytest fixtures for all tests.

This module provides common fixtures used across multiple test modules.
Individual test modules can override these fixtures if needed.

Factories
---------
Import factories directly from their modules:

    from tests.accounts.factories import UserFactory, OrganizationFactory, MemberFactory
    from tests.clinic.factories import ClientFactory, PetFactory, AppointmentFactory

Example usage:

    @pytest.mark.django_db
    def test_something():
        org = OrganizationFactory.create()
        client = ClientFactory.create(organization=org, email="owner@example.com")
"""

from collections.abc import Callable
from typing import Any

import pytest
from django.test import Client, RequestFactory
from django.test.client import WSGIRequest  # type: ignore[attr-defined]

from apps.core.auth import AuthContext


def make_request_with_auth(request: "WSGIRequest", auth: AuthContext) -> "WSGIRequest":
    """
    Set auth on a request the way Ninja does after BearerAuth succeeds.

    Example:
        request = request_factory.post("/api/v1/sync/push")
        request = make_request_with_auth(request, AuthContext(user=user, member=member))
    """
    request.auth = auth  # type: ignore[attr-defined]
    return request


@pytest.fixture
def request_factory() -> RequestFactory:
    """
    Django request factory for unit testing views.

    Use this when you need to call an endpoint function directly without
    going through the full HTTP stack.
    """
    return RequestFactory()


@pytest.fixture
def api_client() -> Client:
    """
    Django test client for full HTTP request/response cycle tests.

    Example:
        def test_api_returns_200(api_client):
            response = api_client.get("/api/v1/health")
            assert response.status_code == 200
    """
    return Client()


@pytest.fixture
def member(db):
    """Create a vet member of a fresh practice."""
    from tests.accounts.factories import MemberFactory

    return MemberFactory.create(role="vet")


@pytest.fixture
def organization(member):
    """The practice the default member belongs to."""
    return member.organization


@pytest.fixture
def auth_context(member) -> AuthContext:
    """Fully authenticated context for the default member."""
    return AuthContext(user=member.user, member=member, organization=member.organization)


@pytest.fixture
def authenticated_request(
    request_factory: RequestFactory, auth_context: AuthContext
) -> Callable[..., "WSGIRequest"]:
    """
    Factory fixture for creating authenticated requests.

    Example:
        def test_endpoint(authenticated_request):
            request = authenticated_request(method="post", path="/api/v1/sync/push")
            result = my_endpoint(request)
    """

    def _make_request(
        method: str = "get",
        path: str = "/",
        data: dict | None = None,
        content_type: str = "application/json",
        auth: AuthContext | None = None,
    ) -> "WSGIRequest":
        method_func = getattr(request_factory, method.lower())
        kwargs: dict[str, Any] = {}
        if data is not None:
            kwargs["data"] = data
            kwargs["content_type"] = content_type
        return make_request_with_auth(method_func(path, **kwargs), auth or auth_context)

    return _make_request
