import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr

from payu_bridge.main import create_app
from payu_bridge.utils.config import Settings

TEST_MERCHANT_KEY = "testKey"
TEST_MERCHANT_SALT = "testSalt"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        app_env="test",
        payu_merchant_key=TEST_MERCHANT_KEY,
        payu_merchant_salt=SecretStr(TEST_MERCHANT_SALT),
        payu_base_url="https://test.payu.in/_payment",
        frontend_url="http://localhost:5173",
    )


@pytest.fixture
def client(settings):
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def intent_payload() -> dict:
    return {
        "amount": "499",
        "planName": "Basic",
        "planType": "startup",
        "customerName": "Asha Rao",
        "customerEmail": "asha@example.com",
        "customerMobile": "+919876543210",
    }
