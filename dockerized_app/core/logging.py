"""Process-wide structured logging.

Production output is one JSON object per line; ``debug=True`` switches to
structlog's coloured console renderer. Every event carries the application
``service`` name plus the request context bound by
:class:`RequestLoggingMiddleware` (``request_id``, ``method``, ``path``), so
the bootstrap events (``settings_fetch_*``, ``bootstrap_*``) and per-request
events can be told apart in one stream.
"""

from __future__ import annotations

import logging
import sys
import time
import uuid
from typing import Awaitable, Callable, List

import structlog
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response
from structlog.types import EventDict, Processor, WrappedLogger

__all__: list[str] = [
    "REQUEST_ID_HEADER",
    "configure_logging",
    "RequestLoggingMiddleware",
]

REQUEST_ID_HEADER: str = "X-Request-ID"

_LOGGING_CONFIGURED: bool = False


class _AddService:
    """Stamp every event with the emitting application's name."""

    def __init__(self, service: str) -> None:
        self._service = service

    def __call__(
        self, logger: WrappedLogger, method_name: str, event_dict: EventDict
    ) -> EventDict:
        event_dict.setdefault("service", self._service)
        return event_dict


def _build_processors(service: str, debug: bool) -> List[Processor]:
    processors: List[Processor] = [
        structlog.contextvars.merge_contextvars,
        _AddService(service),
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if debug:
        processors.append(structlog.dev.ConsoleRenderer())
    else:
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    return processors


def _configure_stdlib_logging(level: int) -> None:
    """Send uvicorn and httpx records to *stderr* at *level*."""

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s %(message)s"))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    # httpx logs every request at INFO; the settings fetch already has its own events.
    logging.getLogger("httpx").setLevel(max(level, logging.WARNING))


def configure_logging(debug: bool = False, service: str = "dockerized-app") -> None:
    """Initialise `structlog` for the entire process.

    Only the first call takes effect.

    Parameters
    ----------
    debug:
        ``DEBUG`` level with console output when *True*; otherwise ``INFO``
        with JSON output.
    service:
        Value of the ``service`` key added to every event.
    """

    global _LOGGING_CONFIGURED

    if _LOGGING_CONFIGURED:
        return

    level: int = logging.DEBUG if debug else logging.INFO
    _configure_stdlib_logging(level)

    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
        processors=_build_processors(service, debug),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    _LOGGING_CONFIGURED = True


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Bind request context, time the request and echo its request id.

    A caller-supplied ``X-Request-ID`` is reused; otherwise a 32-char hex id
    is generated. Unhandled errors are logged with status 500 before they
    propagate to the server error handler.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )
        log = structlog.get_logger("http")
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            log.error("request_failed", status_code=500, duration_ms=_elapsed_ms(started))
            structlog.contextvars.clear_contextvars()
            raise

        log.info(
            "request_completed",
            status_code=response.status_code,
            duration_ms=_elapsed_ms(started),
        )
        structlog.contextvars.clear_contextvars()

        response.headers[REQUEST_ID_HEADER] = request_id
        return response


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)
