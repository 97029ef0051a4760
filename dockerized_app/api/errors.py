from __future__ import annotations

from http import HTTPStatus
from typing import Any, Dict

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from dockerized_app.core.exceptions import RouteNotFoundError

__all__: list[str] = ["add_exception_handlers"]

logger = structlog.get_logger("errors")


def _build_error_payload(
    code: str | int,
    message: str,
    request_id: str | None = None,
    extra: Dict[str, Any] | None = None,
) -> Dict[str, Any]:
    """Return a JSON-serialisable error envelope.

    Parameters
    ----------
    code:
        A machine-readable error code (snake_case) or HTTP status integer.
    message:
        Human-readable description (English, sentence-cased).
    request_id:
        Optional correlation ID injected by `RequestLoggingMiddleware`.
    extra:
        Optional additional payload (e.g. the unmatched path).
    """

    payload: Dict[str, Any] = {
        "error": {
            "code": code,
            "message": message,
            "request_id": request_id,
        }
    }
    if extra:
        payload["error"].update(extra)
    return payload


async def _http_exception_handler(
    request: Request,
    exc: StarletteHTTPException,
) -> JSONResponse:
    """Handle exceptions explicitly raised by the application/routers."""

    logger.warning(
        "http_exception",
        path=request.url.path,
        status_code=exc.status_code,
        detail=str(exc.detail),
    )

    payload = _build_error_payload(
        code=exc.status_code,
        message=str(exc.detail),
        request_id=request.headers.get("x-request-id"),
    )
    # FastAPI default schema compatibility: clients read ``detail``.
    payload["detail"] = str(exc.detail)

    return JSONResponse(status_code=exc.status_code, content=payload)


async def _route_not_found_handler(
    request: Request,
    exc: RouteNotFoundError,
) -> JSONResponse:
    """Unregistered view path – 404, no wildcard fallback."""

    logger.info("route_not_found", path=request.url.path)

    payload = _build_error_payload(
        code=HTTPStatus.NOT_FOUND.value,
        message=str(exc),
        request_id=request.headers.get("x-request-id"),
        extra={"path": exc.path},
    )
    payload["detail"] = str(exc)
    return JSONResponse(status_code=HTTPStatus.NOT_FOUND, content=payload)


async def _unhandled_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:  # noqa: D401 – FastAPI handler sig
    """Catch-all for unexpected errors – returns HTTP 500."""

    logger.exception(
        "unhandled_exception",
        path=request.url.path,
        error=str(exc),
    )

    payload = _build_error_payload(
        code="internal_server_error",
        message="An unexpected error occurred.",
        request_id=request.headers.get("x-request-id"),
    )
    return JSONResponse(
        status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
        content=payload,
    )


def add_exception_handlers(app: FastAPI) -> None:  # noqa: D401 – imperative
    """Register all global exception handlers on **app**."""

    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RouteNotFoundError, _route_not_found_handler)
    app.add_exception_handler(Exception, _unhandled_exception_handler)
