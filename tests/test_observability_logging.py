"""Tests for logging setup and request logging middleware."""

from __future__ import annotations

import json
import logging

import pytest
from fastapi.testclient import TestClient

from app.api import HandlerContext, RouteDefinition, create_api_application
from app.config import AppSettings
from app.observability import JSONFormatter, observability_configure_logging


class _FixedRuntimeInfo:
    """Runtime info stub for logging tests."""

    def runtime_machine_name(self) -> str:
        return "test-host"

    def runtime_os_version(self) -> str:
        return "Linux-test"

    def runtime_processor_count(self) -> int:
        return 1

    def runtime_working_set_bytes(self) -> int:
        return 1


@pytest.fixture
def _restore_root_logger():
    """Restore root handlers and level after each test."""

    original_handlers = list(logging.root.handlers)
    original_level = logging.root.level
    yield
    logging.root.handlers[:] = original_handlers
    logging.root.setLevel(original_level)


def test_observability_configure_logging_replaces_previous_handler(_restore_root_logger) -> None:
    """Install a single app handler even when called repeatedly."""

    observability_configure_logging(level="INFO", fmt="text")
    handler = observability_configure_logging(level="debug", fmt="json")

    app_handlers = [existing for existing in logging.root.handlers if existing.get_name() == "app-root"]
    assert app_handlers == [handler]
    assert isinstance(handler.formatter, JSONFormatter)
    assert logging.root.level == logging.DEBUG


def test_json_formatter_includes_request_fields() -> None:
    """Render request extras as top-level JSON keys.

    Returns:
        None: Assertions validate formatted JSON content.
    """

    record = logging.LogRecord("app.api", logging.INFO, __file__, 1, "GET /health -> 200", None, None)
    record.method = "GET"
    record.path = "/health"
    record.status_code = 200

    payload = json.loads(JSONFormatter().format(record))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "app.api"
    assert payload["message"] == "GET /health -> 200"
    assert payload["method"] == "GET"
    assert payload["path"] == "/health"
    assert payload["status_code"] == 200
    assert "duration_ms" not in payload


def test_request_logging_middleware_logs_each_request(caplog: pytest.LogCaptureFixture) -> None:
    """Log method, path and status for handled and unmatched requests."""

    client = TestClient(create_api_application(AppSettings(environment_name="Test"), _FixedRuntimeInfo()))

    with caplog.at_level(logging.INFO, logger="app.api"):
        client.get("/health")
        client.get("/nope")

    request_records = [record for record in caplog.records if record.name == "app.api"]
    assert [(record.path, record.status_code) for record in request_records] == [("/health", 200), ("/nope", 404)]
    assert all(record.duration_ms >= 0 for record in request_records)


def _handle_failure(context: HandlerContext) -> dict[str, object]:
    """Raise a deterministic handler error.

    Args:
        context: Request context.

    Returns:
        dict[str, object]: This handler does not return.

    Raises:
        RuntimeError: Always raised by this handler.
    """

    raise RuntimeError("handler failed")


def test_request_logging_middleware_logs_failed_request_as_server_error(
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Log one status-500 line when the handler raises.

    Returns:
        None: Assertions validate the logged failure record.

    Raises:
        AssertionError: Raised when the failed request is not logged.
    """

    routes = (RouteDefinition("GET", "/failure", "Failure", _handle_failure, lambda value: value, "test"),)
    application = create_api_application(AppSettings(environment_name="Test"), _FixedRuntimeInfo(), routes=routes)
    client = TestClient(application, raise_server_exceptions=False)

    with caplog.at_level(logging.INFO, logger="app.api"):
        response = client.get("/failure")

    request_records = [record for record in caplog.records if record.name == "app.api"]
    assert response.status_code == 500
    assert [(record.method, record.path, record.status_code) for record in request_records] == [
        ("GET", "/failure", 500)
    ]
    assert request_records[0].duration_ms >= 0
