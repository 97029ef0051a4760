from __future__ import annotations

from .initializer import SettingsInitializer  # noqa: F401
from .models import Settings  # noqa: F401
from .store import SettingsStore  # noqa: F401

__all__: list[str] = [
    "Settings",
    "SettingsInitializer",
    "SettingsStore",
]
