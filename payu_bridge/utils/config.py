from fastapi import Request
from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Public PayU sandbox credentials, only meant for local development.
SANDBOX_MERCHANT_KEY = "gtKFFx"
SANDBOX_MERCHANT_SALT = "eCwWELxi"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_env: str = "development"
    payu_merchant_key: str = SANDBOX_MERCHANT_KEY
    payu_merchant_salt: SecretStr = SecretStr(SANDBOX_MERCHANT_SALT)
    payu_base_url: str = "https://test.payu.in/_payment"
    frontend_url: str = "http://localhost:5173"
    production_frontend_url: str = "https://vivarancreations.com"
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
        "https://vivarancreations.com",
        "https://www.vivarancreations.com",
    ]
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 3001

    @field_validator("payu_merchant_key", "payu_base_url", "frontend_url", "production_frontend_url")
    @classmethod
    def validate_non_empty(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("PayU and frontend settings must be non-empty")
        return value

    @field_validator("payu_merchant_salt")
    @classmethod
    def validate_salt(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value():
            raise ValueError("PAYU_MERCHANT_SALT must be non-empty")
        return value

    @field_validator("frontend_url", "production_frontend_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @property
    def is_production(self) -> bool:
        return self.app_env.lower() == "production"

    @property
    def resolved_frontend_url(self) -> str:
        if self.is_production:
            return self.production_frontend_url
        return self.frontend_url


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
