from __future__ import annotations

from dockerized_app.settings.models import Settings
from dockerized_app.settings.store import SettingsStore


def test_store_starts_with_default_record() -> None:
    store = SettingsStore()
    assert store.get() == Settings()
    assert store.get().base_url == ""


def test_set_replaces_whole_record() -> None:
    store = SettingsStore(Settings(baseUrl="https://old.example.com", region="eu"))

    store.set(Settings(baseUrl="https://new.example.com"))

    # Replacement, not merge: the old extra key is gone.
    assert store.get().to_payload() == {"baseUrl": "https://new.example.com"}


def test_reader_holding_old_value_is_not_notified() -> None:
    store = SettingsStore()
    before = store.get()

    store.set(Settings(baseUrl="https://api.example.com"))

    assert before.base_url == ""
    assert store.get().base_url == "https://api.example.com"


def test_settings_reads_wire_name_only() -> None:
    assert Settings(baseUrl="b").base_url == "b"
    # The Python field name is not a wire key.
    assert Settings.model_validate({"base_url": "b"}).base_url == ""


def test_settings_payload_keeps_unknown_keys() -> None:
    body = {"baseUrl": "https://api.example.com", "featureFlags": {"beta": True}}
    assert Settings.model_validate(body).to_payload() == body
