"""One-shot loader for the runtime :class:`Settings` record.

The initializer issues a single ``GET`` against the configuration resource,
parses the JSON body and writes the result into a :class:`SettingsStore`.
Every failure mode (transport error, non-2xx status, body that is not a
Settings-shaped JSON object) surfaces as :class:`ConfigFetchError`; nothing is
retried and the store keeps its previous value.
"""

from __future__ import annotations

from typing import Any, Optional

import httpx
import structlog
from pydantic import ValidationError

from dockerized_app.core.exceptions import ConfigFetchError
from dockerized_app.settings.models import Settings
from dockerized_app.settings.store import SettingsStore

__all__: list[str] = ["SettingsInitializer"]

logger = structlog.get_logger(__name__)


class SettingsInitializer:
    """Fetch Settings from ``endpoint`` and publish them to ``store``.

    Args:
        store: Destination of the fetched record.
        endpoint: Absolute URL of the configuration resource.
        http_client: Optional shared client. When omitted a short-lived client
            is opened for each :meth:`initialize` call.
    """

    def __init__(
        self,
        store: SettingsStore,
        *,
        endpoint: str,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._store = store
        self._endpoint = endpoint
        self._http_client = http_client

    @property
    def endpoint(self) -> str:
        return self._endpoint

    async def initialize(self) -> Settings:
        """Fetch, parse and store the Settings record.

        Returns:
            The record now held by the store.

        Raises:
            ConfigFetchError: If the resource could not be fetched or parsed.
        """

        logger.info("settings_fetch_started", endpoint=self._endpoint)

        try:
            if self._http_client is not None:
                settings = await self._fetch(self._http_client)
            else:
                # No timeout: the fetch is allowed to take as long as the server needs.
                async with httpx.AsyncClient(
                    timeout=None, follow_redirects=True
                ) as client:
                    settings = await self._fetch(client)
        except ConfigFetchError as exc:
            logger.error(
                "settings_fetch_failed",
                endpoint=self._endpoint,
                status_code=exc.status_code,
                error=str(exc),
            )
            raise

        self._store.set(settings)
        logger.info(
            "settings_initialized",
            endpoint=self._endpoint,
            base_url=settings.base_url,
        )
        return settings

    async def _fetch(self, client: httpx.AsyncClient) -> Settings:
        try:
            response = await client.get(
                self._endpoint, headers={"Accept": "application/json"}
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise ConfigFetchError(
                f"Configuration endpoint returned HTTP {exc.response.status_code}",
                endpoint=self._endpoint,
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            raise ConfigFetchError(
                f"Configuration endpoint unreachable: {exc}",
                endpoint=self._endpoint,
            ) from exc
        except httpx.InvalidURL as exc:
            # Not an HTTPError subclass; raised while building the request.
            raise ConfigFetchError(
                f"Configuration endpoint is not a valid URL: {exc}",
                endpoint=self._endpoint,
            ) from exc

        return self._parse(response)

    def _parse(self, response: httpx.Response) -> Settings:
        try:
            payload: Any = response.json()
        except ValueError as exc:  # json.JSONDecodeError and UnicodeDecodeError
            raise ConfigFetchError(
                "Configuration body is not valid JSON",
                endpoint=self._endpoint,
            ) from exc

        if not isinstance(payload, dict):
            raise ConfigFetchError(
                f"Configuration body must be a JSON object, got {type(payload).__name__}",
                endpoint=self._endpoint,
            )

        try:
            return Settings.model_validate(payload)
        except ValidationError as exc:
            raise ConfigFetchError(
                "Configuration body does not match the Settings shape",
                endpoint=self._endpoint,
            ) from exc
