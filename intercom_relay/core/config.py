from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from intercom_relay.clients.intercom import IntercomConfig

PACKAGE_ROOT = Path(__file__).resolve().parents[1]
PROJECT_ROOT = PACKAGE_ROOT.parent


class Settings(BaseSettings):
    app_name: str = "Intercom Relay"
    app_env: str = "development"
    app_debug: bool = False
    api_prefix: str = "/api"
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"
    cors_origins: str = "http://localhost:3000"

    intercom_access_token: str = ""
    ticket_type_id: str = "1"
    intercom_api_url: str = "https://api.intercom.io"
    intercom_version: str = "2.9"
    intercom_timeout: float | None = None

    model_config = SettingsConfigDict(
        env_file=PROJECT_ROOT / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    @property
    def cors_origins_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def intercom_config(self) -> IntercomConfig:
        return IntercomConfig(
            base_url=self.intercom_api_url,
            access_token=self.intercom_access_token,
            version=self.intercom_version,
            timeout=self.intercom_timeout,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
