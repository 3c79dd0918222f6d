from __future__ import annotations

import os
from decimal import Decimal
from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseAppSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    APP_NAME: str = "Sanhuu"
    ENV: str = "dev"
    JWT_SECRET: str = "change_me"
    CORS_ALLOW_ORIGINS: list[str] = ["*"]
    CORS_ALLOW_METHODS: list[str] = ["*"]
    CORS_ALLOW_HEADERS: list[str] = ["authorization", "x-client-info", "apikey", "content-type"]
    CORS_ALLOW_CREDENTIALS: bool = False
    HSTS_SECONDS: int = 31_536_000
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "plain"

    # Rate limiting (slowapi, in-memory storage)
    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT_DEFAULT: str = "120/minute"

    # Company tax profile fallbacks when a settings record leaves a rate empty
    DEFAULT_VAT_RATE: Decimal = Decimal("10")
    DEFAULT_INCOME_TAX_RATE: Decimal = Decimal("10")

    # Payroll schedule (percent of gross salary)
    PAYROLL_SOCIAL_INSURANCE_RATE: Decimal = Decimal("11.5")
    PAYROLL_HEALTH_INSURANCE_RATE: Decimal = Decimal("2")
    PAYROLL_PERSONAL_INCOME_TAX_RATE: Decimal = Decimal("10")
    PAYROLL_EMPLOYER_SOCIAL_INSURANCE_RATE: Decimal = Decimal("12.5")
    PAYROLL_EMPLOYER_HEALTH_INSURANCE_RATE: Decimal = Decimal("2")

    @model_validator(mode="after")
    def _validate_required_fields(self) -> BaseAppSettings:
        if self.ENV.lower() == "prod" and self.JWT_SECRET == "change_me":
            raise ValueError("Insecure default secrets in production: JWT_SECRET uses default placeholder")
        return self


class DevSettings(BaseAppSettings):
    ENV: str = "dev"


class TestSettings(BaseAppSettings):
    ENV: str = "test"
    JWT_SECRET: str = "test-secret-not-for-production-use"
    RATE_LIMIT_ENABLED: bool = False


class ProdSettings(BaseAppSettings):
    ENV: str = "prod"
    LOG_FORMAT: str = "json"


_ENV_TO_SETTINGS: dict[str, type[BaseAppSettings]] = {
    "dev": DevSettings,
    "development": DevSettings,
    "test": TestSettings,
    "testing": TestSettings,
    "prod": ProdSettings,
    "production": ProdSettings,
}


@lru_cache
def get_settings() -> BaseAppSettings:
    env_name = os.getenv("APP_ENV") or os.getenv("ENV") or "dev"
    env = env_name.lower()
    settings_cls = _ENV_TO_SETTINGS.get(env, DevSettings)
    return settings_cls()


settings = get_settings()
