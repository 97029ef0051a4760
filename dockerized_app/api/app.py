"""dockerized-app ─ FastAPI application
=====================================

This module hosts the **production ASGI application**.

Usage
-----
Run locally with::

    uvicorn dockerized_app.api.app:app --reload

Startup fetches the runtime Settings from ``AppConfig.settings_endpoint``
inside the lifespan. Uvicorn does not accept connections until the lifespan
has yielded, so no page is ever rendered before Settings are in place; a
failed fetch aborts startup with :class:`ConfigFetchError`.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import httpx
import structlog
from fastapi import APIRouter, FastAPI

from dockerized_app.api.errors import add_exception_handlers
from dockerized_app.api.routes import admin as admin_router_module
from dockerized_app.api.routes import pages as pages_router_module
from dockerized_app.bootstrap import bootstrap
from dockerized_app.core.config import AppConfig, get_config
from dockerized_app.core.logging import RequestLoggingMiddleware, configure_logging

__all__: list[str] = ["app", "create_app"]

# ---------------------------------------------------------------------------
# Initialise *process-wide* logging before any logger instantiation.
# ---------------------------------------------------------------------------
default_config = get_config()
configure_logging(default_config.debug, service=default_config.app_title)
logger = structlog.get_logger(__name__)


def _register_routes(app_instance: FastAPI) -> None:
    """Include all routers. The page catch-all ``/{page}`` goes last."""
    routers: list[APIRouter] = [
        admin_router_module.router,
        pages_router_module.router,
    ]
    for router in routers:
        app_instance.include_router(router)


def create_app(
    config: Optional[AppConfig] = None,
    *,
    http_client: Optional[httpx.AsyncClient] = None,
) -> FastAPI:  # noqa: D401 – factory
    """Build and configure the FastAPI application.

    Args:
        config: Process configuration; defaults to :func:`get_config`.
        http_client: Client used for the Settings fetch. Tests inject one
            backed by ``httpx.MockTransport``.
    """

    app_config = config if config is not None else default_config

    @asynccontextmanager
    async def _lifespan(app_instance: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "fastapi_startup",
            commit_sha=app_config.commit_sha,
            settings_endpoint=app_config.settings_endpoint,
        )
        # Blocks startup; ConfigFetchError escapes and aborts it.
        app_instance.state.application = await bootstrap(
            app_config, http_client=http_client
        )
        yield
        app_instance.state.application = None
        logger.info("fastapi_shutdown")

    app_instance = FastAPI(
        title=app_config.app_title,
        version=app_config.app_version,
        debug=app_config.debug,
        docs_url="/docs",
        redoc_url=None,
        openapi_url="/openapi.json",
        lifespan=_lifespan,
    )
    app_instance.state.application = None

    # ------------------------------------------------------------------
    # Middleware – logging comes first so later handlers inherit context vars.
    # ------------------------------------------------------------------
    app_instance.add_middleware(RequestLoggingMiddleware)

    _register_routes(app_instance)
    add_exception_handlers(app_instance)

    return app_instance


# Instantiate once at import time.
app: FastAPI = create_app()
