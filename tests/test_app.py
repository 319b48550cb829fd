"""Application-level behaviour: health check, envelope for unknown routes, prefix setting."""

from fastapi.testclient import TestClient

from event_service_api.app.core.config import Settings
from event_service_api.app.main import create_app


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_unknown_route_uses_error_envelope(client):
    response = client.get("/v1/nothing-here")

    assert response.status_code == 404
    assert response.json() == {"error": "Not Found", "success": False}


def test_settings_and_database_on_app_state(settings):
    app = create_app(settings)

    assert app.state.settings is settings
    assert app.state.db.path == settings.database_url
    assert app.title == settings.project_name


def test_api_prefix_is_configurable(tmp_path):
    settings = Settings(database_url=str(tmp_path / "prefixed.db"), api_prefix="/api/v2")

    with TestClient(create_app(settings)) as client:
        assert client.get("/api/v2/events").status_code == 200
        assert client.get("/v1/events").status_code == 404
