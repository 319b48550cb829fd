"""Pytest fixtures: an application and a database per test, backed by a temporary SQLite file."""

import pytest
from fastapi.testclient import TestClient

from event_service_api.app.core.config import Settings
from event_service_api.app.core.db import Database
from event_service_api.app.main import create_app


@pytest.fixture
def settings(tmp_path):
    return Settings(database_url=str(tmp_path / "events.db"), log_level="WARNING")


@pytest.fixture
def client(settings):
    app = create_app(settings)
    # Entering the client runs the lifespan, which creates the schema.
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db(settings):
    database = Database.from_settings(settings)
    database.init_db()
    return database


@pytest.fixture
def make_event(client):
    def _make(slug="summer-summit", **overrides):
        payload = {
            "slug": slug,
            "name": "Summer Summit",
            "starts_on": "2025-09-01T09:00:00Z",
            "ends_on": "2025-09-03T18:00:00Z",
        }
        payload.update(overrides)
        response = client.post("/v1/event/", json=payload)
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _make


@pytest.fixture
def make_participant(client):
    def _make(email="jane.doe@example.com", keycloak_id="3f1c2b8e-7d4a-4f6e-9a51-2c9d8e7b6a10", **overrides):
        payload = {
            "keycloak_id": keycloak_id,
            "email": email,
            "first_name": "Jane",
            "last_name": "Doe",
        }
        payload.update(overrides)
        response = client.post("/v1/participant/", json=payload)
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _make


@pytest.fixture
def make_item(client):
    def _make(name="Opening keynote", **overrides):
        payload = {
            "start_date": "2025-09-01T10:00:00Z",
            "duration": 45,
            "name": name,
            "original_language": "en",
            "translated": False,
        }
        payload.update(overrides)
        response = client.post("/v1/item/", json=payload)
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _make
