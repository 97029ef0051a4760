from __future__ import annotations

# Re-export *AppConfig* model and lazy singleton accessor for ergonomic imports.
from .config import AppConfig, get_config  # noqa: F401

__all__: list[str] = [
    "AppConfig",
    "get_config",
]
