from __future__ import annotations

import logging
from unittest.mock import patch

import pytest
import structlog

import dockerized_app.core.logging
from dockerized_app.core.logging import configure_logging


@pytest.fixture(autouse=True)
def reset_logging_state(monkeypatch: pytest.MonkeyPatch):
    """Ensure logging configuration state is reset before and after each test."""
    monkeypatch.setattr("dockerized_app.core.logging._LOGGING_CONFIGURED", False)
    structlog.reset_defaults()
    root_logger = logging.getLogger()
    original_handlers = root_logger.handlers[:]
    original_level = root_logger.level
    root_logger.handlers.clear()

    yield

    structlog.reset_defaults()
    root_logger.handlers.clear()
    for handler in original_handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(original_level)


def test_configure_logging_idempotency():
    """configure_logging only configures once."""
    with (
        patch(
            "dockerized_app.core.logging._configure_stdlib_logging"
        ) as mock_stdlib_config,
        patch("structlog.configure") as mock_structlog_config,
    ):
        configure_logging(debug=True)
        assert dockerized_app.core.logging._LOGGING_CONFIGURED is True
        mock_stdlib_config.assert_called_once_with(logging.DEBUG)
        mock_structlog_config.assert_called_once()

        mock_stdlib_config.reset_mock()
        mock_structlog_config.reset_mock()

        configure_logging(debug=False)
        mock_stdlib_config.assert_not_called()
        mock_structlog_config.assert_not_called()


@pytest.mark.parametrize(
    ("debug", "level"),
    [(True, logging.DEBUG), (False, logging.INFO)],
)
def test_configure_logging_sets_level(debug: bool, level: int):
    with (
        patch(
            "dockerized_app.core.logging._configure_stdlib_logging"
        ) as mock_stdlib_config,
        patch("structlog.make_filtering_bound_logger") as mock_make_filtering_logger,
        patch("structlog.configure") as mock_structlog_config,
    ):
        configure_logging(debug=debug)

        mock_stdlib_config.assert_called_once_with(level)
        mock_make_filtering_logger.assert_called_once_with(level)
        assert (
            mock_structlog_config.call_args[1]["wrapper_class"]
            == mock_make_filtering_logger.return_value
        )


def test_stdlib_logging_routed_to_single_stderr_handler():
    configure_logging(debug=False)

    root_logger = logging.getLogger()
    assert root_logger.level == logging.INFO
    assert len(root_logger.handlers) == 1
    assert isinstance(root_logger.handlers[0], logging.StreamHandler)


def test_json_renderer_used_outside_debug():
    processors = dockerized_app.core.logging._build_processors("svc", debug=False)

    assert isinstance(processors[-1], structlog.processors.JSONRenderer)
    assert structlog.processors.format_exc_info in processors


def test_console_renderer_used_in_debug():
    processors = dockerized_app.core.logging._build_processors("svc", debug=True)

    assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)


def test_service_name_added_to_every_event():
    add_service = dockerized_app.core.logging._AddService("dockerized-app")

    assert add_service(None, "info", {"event": "x"}) == {
        "event": "x",
        "service": "dockerized-app",
    }
    # An explicit value on the event wins.
    assert add_service(None, "info", {"service": "other"})["service"] == "other"


def test_httpx_request_logs_quieted():
    configure_logging(debug=False)
    assert logging.getLogger("httpx").level == logging.WARNING
