"""
Core Custom Exceptions

Domain-specific exceptions raised by the bootstrap path and the view router.

Defined Exceptions:
- `ConfigFetchError`: the configuration resource could not be retrieved or
  parsed. Transport failures, non-2xx statuses and malformed bodies are all
  reported through this one type.
- `RouteNotFoundError`: a path has no registered view.
- `SettingsTemplateError`: a settings template could not be rendered.
"""

from __future__ import annotations

from typing import Optional

__all__: list[str] = [
    "ConfigFetchError",
    "RouteNotFoundError",
    "SettingsTemplateError",
]


class ConfigFetchError(Exception):
    """
    Raised when the Settings record cannot be loaded from its endpoint.

    The original cause (``httpx`` error, JSON decode error, pydantic
    validation error) is chained via ``__cause__``. ``status_code`` is only
    set when the server answered with a non-success status.
    """

    def __init__(
        self,
        message: str,
        *,
        endpoint: str,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.endpoint = endpoint
        self.status_code = status_code


class RouteNotFoundError(LookupError):
    """Raised by the view router for a path with no registered route."""

    def __init__(self, path: str) -> None:
        super().__init__(f"No view registered for path '{path}'")
        self.path = path


class SettingsTemplateError(Exception):
    """Raised when a settings template cannot be turned into a JSON object."""

    pass
