from __future__ import annotations

import os
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__: list[str] = [
    "AppConfig",
    "DEFAULT_SETTINGS_PATH",
    "get_config",
]

DEFAULT_SETTINGS_PATH: str = "/assets/config/settings.json"


class AppConfig(BaseSettings):
    """
    Process configuration, loaded from environment variables.

    This is the *deployment* configuration of the server itself. The runtime
    :class:`~dockerized_app.settings.models.Settings` record (base URL etc.)
    is fetched over HTTP during bootstrap and is not part of this class.
    """

    debug: bool = False
    app_title: str = "dockerized-app"
    app_version: str = "0.1.0"
    commit_sha: Optional[str] = None

    # Where the configuration resource lives. ``settings_url`` wins when set.
    settings_origin: str = "http://localhost:8080"
    settings_path: str = DEFAULT_SETTINGS_PATH
    settings_url: Optional[str] = None

    host: str = "0.0.0.0"
    port: int = 8000

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("settings_origin")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("settings_path")
    @classmethod
    def _ensure_leading_slash(cls, v: str) -> str:
        return v if v.startswith("/") else f"/{v}"

    @field_validator("settings_url", mode="before")
    @classmethod
    def _empty_url_is_unset(cls, v: Optional[str]) -> Optional[str]:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def settings_endpoint(self) -> str:
        """Absolute URL of the configuration resource."""
        if self.settings_url:
            return self.settings_url
        return f"{self.settings_origin}{self.settings_path}"


_CACHED_CONFIG: Optional[AppConfig] = None


def get_config() -> AppConfig:  # noqa: D401 – accessor helper
    """Return a **singleton** AppConfig unless running under pytest.

    Tests manipulate the environment between cases, so a fresh instance is
    built whenever ``PYTEST_CURRENT_TEST`` is present.
    """

    global _CACHED_CONFIG  # noqa: PLW0603 – module-level singleton

    if "PYTEST_CURRENT_TEST" in os.environ:
        return AppConfig()

    if _CACHED_CONFIG is None:
        _CACHED_CONFIG = AppConfig()

    return _CACHED_CONFIG


def _clear_config_cache() -> None:  # noqa: D401 – helper for tests
    """Drop the cached AppConfig."""

    global _CACHED_CONFIG
    _CACHED_CONFIG = None


get_config.cache_clear = _clear_config_cache  # type: ignore[attr-defined]
