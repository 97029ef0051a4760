from __future__ import annotations

from typing import Optional

from dockerized_app.settings.models import Settings

__all__: list[str] = ["SettingsStore"]


class SettingsStore:
    """Holder of the current :class:`Settings` record.

    One instance is built per application by the bootstrap sequence and passed
    explicitly to whoever needs it. ``set`` replaces the whole record; there is
    no subscription mechanism, so a reader that copied the value before a write
    keeps the old record.
    """

    def __init__(self, initial: Optional[Settings] = None) -> None:
        self._settings: Settings = initial if initial is not None else Settings()

    def get(self) -> Settings:
        return self._settings

    def set(self, new_settings: Settings) -> None:
        # Accepted as-is; shape checks belong to whoever produced the record.
        self._settings = new_settings
