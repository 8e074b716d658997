from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = Field(default="Vendor Plan Compliance", alias="APP_NAME")
    database_url: str = Field(alias="DATABASE_URL")
    grace_period_days: int | None = Field(default=None, ge=0, alias="GRACE_PERIOD_DAYS")
    authorizenet_mode: str = Field(default="sandbox", alias="AUTHORIZENET_MODE")
    authorizenet_api_login_id: str | None = Field(default=None, alias="AUTHORIZENET_API_LOGIN_ID")
    authorizenet_transaction_key: str | None = Field(default=None, alias="AUTHORIZENET_TRANSACTION_KEY")
    billing_timeout_seconds: int = Field(default=10, alias="BILLING_TIMEOUT_SECONDS")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    admin_token: str | None = Field(default=None, alias="ADMIN_TOKEN")


@lru_cache
def get_settings() -> Settings:
    return Settings()
