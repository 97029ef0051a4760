from __future__ import annotations

import pytest

from dockerized_app.core.config import DEFAULT_SETTINGS_PATH, AppConfig, get_config


def test_config_default_values() -> None:
    """Defaults apply when no env vars are set."""
    get_config.cache_clear()
    config = get_config()

    assert config.debug is False
    assert config.app_title == "dockerized-app"
    assert config.app_version == "0.1.0"
    assert config.commit_sha is None
    assert config.settings_origin == "http://localhost:8080"
    assert config.settings_path == DEFAULT_SETTINGS_PATH
    assert config.settings_url is None
    assert config.port == 8000


def test_config_parsing_from_env_vars(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEBUG", "true")
    monkeypatch.setenv("APP_TITLE", "staging-app")
    monkeypatch.setenv("COMMIT_SHA", "testsha123env")
    monkeypatch.setenv("SETTINGS_ORIGIN", "https://cdn.example.com/")
    monkeypatch.setenv("PORT", "9000")

    config = get_config()

    assert config.debug is True
    assert config.app_title == "staging-app"
    assert config.commit_sha == "testsha123env"
    # Trailing slash is stripped so the path joins cleanly.
    assert config.settings_origin == "https://cdn.example.com"
    assert config.port == 9000


def test_settings_endpoint_joins_origin_and_path() -> None:
    config = AppConfig(settings_origin="http://web:80/", settings_path="cfg/app.json")
    assert config.settings_endpoint == "http://web:80/cfg/app.json"


def test_settings_endpoint_default_path() -> None:
    config = AppConfig(settings_origin="http://web")
    assert config.settings_endpoint == "http://web/assets/config/settings.json"


def test_settings_url_overrides_origin(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SETTINGS_ORIGIN", "http://ignored")
    monkeypatch.setenv("SETTINGS_URL", "https://config.example.com/prod.json")

    config = get_config()

    assert config.settings_endpoint == "https://config.example.com/prod.json"


def test_blank_settings_url_is_ignored(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SETTINGS_URL", "  ")
    config = get_config()
    assert config.settings_url is None
    assert config.settings_endpoint.endswith(DEFAULT_SETTINGS_PATH)


def test_get_config_returns_fresh_instance_under_pytest() -> None:
    assert get_config() is not get_config()


def test_get_config_caches_outside_pytest(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PYTEST_CURRENT_TEST", raising=False)
    get_config.cache_clear()
    try:
        assert get_config() is get_config()
    finally:
        get_config.cache_clear()
