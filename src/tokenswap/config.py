"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ======================
    # Price Feed
    # ======================
    price_feed_url: str = Field(
        default="",
        description="Token price document (http(s) URL or local path; empty = bundled prices)",
    )
    price_feed_timeout: Optional[float] = Field(
        default=None, description="Price feed request timeout in seconds (unset = no timeout)"
    )

    # ======================
    # Display
    # ======================
    display_decimals: int = Field(
        default=4, ge=0, le=18, description="Fractional digits shown for converted amounts"
    )

    # ======================
    # API
    # ======================
    api_host: str = Field(default="0.0.0.0", description="API server host")
    api_port: int = Field(default=8000, description="API server port")

    # ======================
    # Environment
    # ======================
    environment: str = Field(default="development", description="Runtime environment")
    debug: bool = Field(default=True, description="Enable debug mode")

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    @property
    def price_feed_kind(self) -> str:
        """Which feed implementation the configured URL selects."""
        url = self.price_feed_url.strip()
        if not url:
            return "static"
        if url.lower().startswith(("http://", "https://")):
            return "http"
        return "file"

    def get_safe_dict(self) -> dict:
        """Return settings dict with credentials redacted."""
        return {
            "environment": self.environment,
            "debug": self.debug,
            "api_host": self.api_host,
            "api_port": self.api_port,
            "price_feed": {
                "kind": self.price_feed_kind,
                "url": self._redact_url(self.price_feed_url) or "(bundled)",
                "timeout": self.price_feed_timeout,
            },
            "display_decimals": self.display_decimals,
        }

    @staticmethod
    def _redact_url(url: str) -> str:
        """Redact credentials embedded in a feed URL."""
        if "://" in url and "@" in url:
            proto, rest = url.split("://", 1)
            if "@" in rest:
                creds, host = rest.rsplit("@", 1)
                if ":" in creds:
                    user, _ = creds.split(":", 1)
                    return f"{proto}://{user}:***@{host}"
        return url


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
