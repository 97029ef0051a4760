"""Application bootstrap sequence.

Order matters and is enforced by ``await``:

1. build the :class:`SettingsStore` with default values;
2. run the :class:`SettingsInitializer` to completion;
3. only then construct the shell and views, handing them the resolved record.

A :class:`ConfigFetchError` in step 2 propagates to the caller and no view is
ever constructed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import httpx
import structlog

from dockerized_app.core.config import AppConfig
from dockerized_app.core.exceptions import ConfigFetchError
from dockerized_app.settings.initializer import SettingsInitializer
from dockerized_app.settings.store import SettingsStore
from dockerized_app.views.pages import AppShell
from dockerized_app.views.routing import ViewRouter, build_router

__all__: list[str] = ["Application", "bootstrap"]

logger = structlog.get_logger(__name__)


@dataclass
class Application:
    """Everything the HTTP layer needs once bootstrap has finished."""

    config: AppConfig
    store: SettingsStore
    shell: AppShell
    router: ViewRouter


async def bootstrap(
    config: AppConfig,
    *,
    http_client: Optional[httpx.AsyncClient] = None,
) -> Application:
    """Load Settings, then build the views that depend on them."""

    store = SettingsStore()
    initializer = SettingsInitializer(
        store,
        endpoint=config.settings_endpoint,
        http_client=http_client,
    )

    try:
        await initializer.initialize()
    except ConfigFetchError as exc:
        logger.error(
            "bootstrap_aborted",
            endpoint=exc.endpoint,
            status_code=exc.status_code,
        )
        raise

    settings = store.get()
    application = Application(
        config=config,
        store=store,
        shell=AppShell(config.app_title, settings),
        router=build_router(settings),
    )
    logger.info(
        "bootstrap_completed",
        title=config.app_title,
        routes=application.router.paths,
    )
    return application
