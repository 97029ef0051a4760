from __future__ import annotations

from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from dockerized_app.api.app import create_app
from dockerized_app.core.config import AppConfig
from tests.fakes import FakeSettingsServer, json_response

pytestmark = [pytest.mark.integration]

SETTINGS_BODY = {"baseUrl": "https://api.example.com", "apiVersion": "v2"}


@pytest.fixture
def client(app_config: AppConfig) -> Iterator[TestClient]:
    server = FakeSettingsServer(json_response(SETTINGS_BODY))
    with TestClient(create_app(app_config, http_client=server.client())) as test_client:
        yield test_client


def test_health_endpoint(client: TestClient) -> None:
    response = client.get("/v1/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "commit_sha": "abc123"}


def test_health_endpoint_without_commit_sha() -> None:
    config = AppConfig(settings_url="http://config.test/settings.json")
    server = FakeSettingsServer(json_response(SETTINGS_BODY))
    with TestClient(create_app(config, http_client=server.client())) as client:
        response = client.get("/v1/health")

    assert response.json() == {"status": "ok", "commit_sha": "unknown"}


def test_version_endpoint(client: TestClient) -> None:
    response = client.get("/v1/version")

    assert response.status_code == 200
    assert response.json() == {"version": "0.1.0", "commit_sha": "abc123"}


def test_settings_endpoint_returns_fetched_record(client: TestClient) -> None:
    response = client.get("/v1/settings")

    assert response.status_code == 200
    assert response.json() == SETTINGS_BODY
