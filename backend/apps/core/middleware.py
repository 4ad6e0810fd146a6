"""
Core middleware.
"""

from collections.abc import Callable
from uuid import uuid4

from django.http import HttpRequest, HttpResponse

from apps.core.logging import bind_contextvars, clear_contextvars

CORRELATION_HEADER = "X-Correlation-ID"


class RequestContextMiddleware:
    """
    Binds a correlation id to every log event emitted while handling a request.

    Reuses the client's X-Correlation-ID when sent so a device's retry of the
    same push can be traced end to end, and echoes it on the response.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        correlation_id = request.headers.get(CORRELATION_HEADER) or str(uuid4())
        clear_contextvars()
        bind_contextvars(
            correlation_id=correlation_id,
            **{"http.method": request.method, "http.url_details.path": request.path},
        )
        try:
            response = self.get_response(request)
        finally:
            clear_contextvars()
        response[CORRELATION_HEADER] = correlation_id
        return response
