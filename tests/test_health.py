from datetime import datetime

from payu_bridge.main import create_app
from payu_bridge.utils.config import Settings


def test_health_endpoint(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "OK"
    assert payload["environment"] == "test"
    assert payload["frontendUrl"] == "http://localhost:5173"
    datetime.fromisoformat(payload["currentTime"].replace("Z", "+00:00"))


def test_production_uses_production_frontend(settings):
    production = settings.model_copy(update={"app_env": "production"})
    assert production.resolved_frontend_url == "https://vivarancreations.com"


def test_unknown_route_returns_json_404(client):
    response = client.get("/api/nope")
    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Endpoint not found"}


def test_salt_is_never_exposed(client, settings):
    body = client.get("/api/health").text
    assert settings.payu_merchant_salt.get_secret_value() not in body
    assert "testSalt" not in repr(settings)


def test_default_settings_use_sandbox_values():
    settings = Settings(_env_file=None)
    assert create_app(settings).state.settings.payu_base_url.startswith("https://")
