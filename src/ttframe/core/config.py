"""Frame service runtime configuration definitions."""

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from env and .env files."""

    app_name: str = "ThunderTrack"
    environment: str = Field(default="dev", pattern="^(dev|test|prod)$")
    log_level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")

    # When unset, the base URL is derived from the request host.
    public_base_url: str | None = None
    # Mini app landing page; falls back to the base URL.
    app_url: str | None = None

    embed_version: str = "1"
    button_title: str = "View details"
    splash_image_path: str = "/icons/Icon-192.png"
    splash_background_color: str = Field(default="#1a1a2e", pattern="^#[0-9a-fA-F]{6}$")

    image_cache_max_age: int = Field(default=3600, gt=0)
    page_cache_max_age: int = Field(default=300, gt=0)

    model_config = SettingsConfigDict(env_file=".env", env_prefix="TTFRAME_")

    @field_validator("public_base_url", "app_url")
    @classmethod
    def _validate_url(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        value = value.strip()
        if not value.startswith(("http://", "https://")):
            raise ValueError("URL must start with http:// or https://")
        return value

    @model_validator(mode="after")
    def _normalize_urls(self) -> "Settings":
        if self.public_base_url:
            self.public_base_url = self.public_base_url.rstrip("/")
        if self.app_url:
            self.app_url = self.app_url.rstrip("/")
        if not self.splash_image_path.startswith("/"):
            self.splash_image_path = f"/{self.splash_image_path}"
        return self
