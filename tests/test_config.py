import pytest
from pydantic import ValidationError

from payu_bridge.utils.config import SANDBOX_MERCHANT_KEY, Settings


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("PAYU_MERCHANT_KEY", "liveKey")
    monkeypatch.setenv("PAYU_MERCHANT_SALT", "liveSalt")
    monkeypatch.setenv("FRONTEND_URL", "https://shop.example.com/")
    monkeypatch.setenv("APP_ENV", "staging")
    settings = Settings(_env_file=None)
    assert settings.payu_merchant_key == "liveKey"
    assert settings.payu_merchant_salt.get_secret_value() == "liveSalt"
    assert settings.resolved_frontend_url == "https://shop.example.com"
    assert settings.is_production is False


def test_sandbox_defaults(monkeypatch):
    for name in ("PAYU_MERCHANT_KEY", "PAYU_MERCHANT_SALT", "APP_ENV"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)
    assert settings.payu_merchant_key == SANDBOX_MERCHANT_KEY
    assert settings.app_env == "development"


def test_empty_salt_is_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, payu_merchant_salt="")


def test_empty_merchant_key_is_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, payu_merchant_key="  ")


def test_cors_allows_configured_origin(client):
    response = client.options(
        "/api/payment/initialize",
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "POST",
        },
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:5173"
    assert response.headers["access-control-allow-credentials"] == "true"
