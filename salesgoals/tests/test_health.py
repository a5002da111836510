"""
Tests for health and version endpoints
"""
from salesgoals.core.constants import DEFAULT_VERSION, SERVICE_NAME


def test_health_check(client):
    """Test health check endpoint"""
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": SERVICE_NAME}


def test_version(client, override_settings):
    """Test version endpoint falls back to the default version"""
    override_settings(APP_ENV="staging", VERSION=None)

    response = client.get("/api/v1/version")
    assert response.status_code == 200
    assert response.json() == {
        "service": SERVICE_NAME,
        "version": DEFAULT_VERSION,
        "env": "staging",
        "locale": "en",
    }


def test_version_from_settings(client, override_settings):
    """Test version endpoint reports the configured version"""
    override_settings(VERSION="abc1234", WEEKDAY_LOCALE="pt_BR")

    data = client.get("/api/v1/version").json()
    assert data["version"] == "abc1234"
    assert data["locale"] == "pt_BR"


def test_unknown_route_uses_error_envelope(client):
    """Test that 404s share the error envelope"""
    response = client.get("/api/v1/does-not-exist")
    assert response.status_code == 404

    data = response.json()
    assert data["error"] is True
    assert data["status_code"] == 404
    assert data["path"] == "/api/v1/does-not-exist"
