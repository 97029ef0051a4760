# ruff: noqa: E402
from __future__ import annotations

import sys
from pathlib import Path

# Ensure repository root is first on sys.path
_repo_root: Path = Path(__file__).resolve().parent.parent  # tests/ -> repo root
if str(_repo_root) not in sys.path:
    sys.path.insert(0, str(_repo_root))

import pytest

from dockerized_app.core.config import AppConfig

CONFIG_ENDPOINT: str = "http://config.test/assets/config/settings.json"


@pytest.fixture(autouse=True)
def _disable_dotenv(monkeypatch: pytest.MonkeyPatch) -> None:
    """Prevent AppConfig from reading the developer *.env* file.

    Also clears the variables the configuration tests assert defaults for, so
    a developer shell cannot leak values into the suite.
    """

    monkeypatch.setitem(AppConfig.model_config, "env_file", None)
    for name in (
        "DEBUG",
        "APP_TITLE",
        "APP_VERSION",
        "COMMIT_SHA",
        "SETTINGS_ORIGIN",
        "SETTINGS_PATH",
        "SETTINGS_URL",
        "HOST",
        "PORT",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def app_config() -> AppConfig:
    """AppConfig pointing at the fake configuration server."""
    return AppConfig(settings_url=CONFIG_ENDPOINT, commit_sha="abc123")
