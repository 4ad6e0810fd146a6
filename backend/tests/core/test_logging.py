"""
Tests for structured logging configuration.
"""

import logging
import uuid

import pytest
import structlog
from django.http import HttpResponse
from structlog.contextvars import get_contextvars

from apps.core.logging import (
    _rename_correlation_id,
    _stringify_ids,
    bind_contextvars,
    clear_contextvars,
    configure_logging,
    get_logger,
)
from apps.core.middleware import RequestContextMiddleware


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_configure_logging_json_format(self):
        configure_logging(json_format=True, log_level="INFO")

        assert structlog.is_configured()
        assert logging.getLogger().level == logging.INFO

    def test_configure_logging_console_format(self):
        configure_logging(json_format=False, log_level="DEBUG")

        assert logging.getLogger().level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self):
        configure_logging(json_format=False, log_level="chatty")

        assert logging.getLogger().level == logging.INFO


class TestProcessors:
    def test_correlation_id_renamed_to_trace_id(self):
        event = _rename_correlation_id(None, "info", {"event": "x", "correlation_id": 42})

        assert event == {"event": "x", "trace_id": "42"}

    def test_uuid_ids_become_strings(self):
        entity_id = uuid.uuid4()

        event = _stringify_ids(None, "info", {"entity_id": entity_id, "organization.id": 3})

        assert event["entity_id"] == str(entity_id)
        assert event["organization.id"] == 3


class TestContextVars:
    """Tests for context variable binding."""

    def setup_method(self):
        clear_contextvars()

    def teardown_method(self):
        clear_contextvars()

    def test_bind_contextvars_with_dotted_keys(self):
        bind_contextvars(**{"usr.id": "user_123", "organization.id": "org_456"})

        ctx = get_contextvars()
        assert ctx.get("usr.id") == "user_123"
        assert ctx.get("organization.id") == "org_456"

    def test_clear_contextvars_removes_context(self):
        bind_contextvars(trace_id="abc123")
        clear_contextvars()

        assert get_contextvars() == {}


class TestLogOutput:
    def setup_method(self):
        clear_contextvars()
        configure_logging(json_format=True, log_level="DEBUG")

    def teardown_method(self):
        clear_contextvars()

    def test_events_reach_stdlib_handlers(self, caplog):
        logger = get_logger("test.json_output")

        with caplog.at_level(logging.DEBUG, logger="test.json_output"):
            logger.info("sync_push_completed", processed=2, failed=0)

        assert "sync_push_completed" in caplog.text


class TestRequestContextMiddleware:
    def setup_method(self):
        clear_contextvars()

    def test_binds_and_clears_correlation_id(self, request_factory):
        seen = {}

        def view(request):
            seen.update(get_contextvars())
            return HttpResponse("ok")

        request = request_factory.get("/api/v1/health", HTTP_X_CORRELATION_ID="trace-9")

        response = RequestContextMiddleware(view)(request)

        assert seen["correlation_id"] == "trace-9"
        assert seen["http.method"] == "GET"
        assert response["X-Correlation-ID"] == "trace-9"
        assert get_contextvars() == {}

    def test_generates_correlation_id_when_absent(self, request_factory):
        response = RequestContextMiddleware(lambda request: HttpResponse("ok"))(
            request_factory.get("/")
        )

        assert uuid.UUID(response["X-Correlation-ID"])

    def test_context_cleared_when_view_raises(self, request_factory):
        def view(request):
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            RequestContextMiddleware(view)(request_factory.get("/"))

        assert get_contextvars() == {}
