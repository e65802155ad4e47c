"""Configuration for the CRM stand-in.

Reads environment variables (and an optional ``.env`` file) for the portal
and app identifiers stamped on webhook events, the webhook target, and the
canned OAuth payloads.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from hubspot_mock.core.constants import DEFAULT_ID_SEED


class Settings(BaseSettings):
    """Runtime configuration loaded from environment."""

    HOST: str = Field(default="0.0.0.0", description="Interface the HTTP server binds to.")
    PORT: int = Field(default=8000, ge=0, le=65535, description="Port the HTTP server binds to.")

    CUSTOMER_ID: int = Field(
        default=62515, description="Portal (hub) id reported in webhook events and OAuth payloads."
    )
    APP_ID: int = Field(default=1234, description="Application id stamped on every webhook event.")

    WEBHOOK_URL: str = Field(
        default="",
        description="Endpoint receiving creation/propertyChange events. Empty disables webhooks.",
    )
    WEBHOOK_TIMEOUT: float = Field(
        default=10.0, gt=0, description="Seconds to wait for the webhook endpoint."
    )

    ID_SEED: int = Field(
        default=DEFAULT_ID_SEED, ge=1, description="First id issued for every resource type."
    )

    # =========================================================================
    # CANNED OAUTH PAYLOADS
    # =========================================================================
    OAUTH_ACCESS_TOKEN: str = Field(default="access-token")
    OAUTH_REFRESH_TOKEN: str = Field(default="refresh-token")
    OAUTH_EXPIRES_IN: int = Field(default=999999)
    OAUTH_AUTHORIZATION_CODE: str = Field(
        default="code-to-exchange", description="Code appended to authorize redirects."
    )
    OAUTH_HUB_DOMAIN: str = Field(default="ReplaceWithHubDomainHere")

    # =========================================================================
    # OBSERVABILITY
    # =========================================================================
    LOG_LEVEL: str = Field(default="INFO", description="Root log level.")
    LOG_JSON: bool = Field(default=False, description="Emit JSON logs instead of pretty lines.")

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @model_validator(mode="after")
    def _validate_log_level(self) -> "Settings":
        level = self.LOG_LEVEL.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"LOG_LEVEL must be a standard level name, got '{self.LOG_LEVEL}'")
        self.LOG_LEVEL = level
        return self

    @property
    def webhooks_enabled(self) -> bool:
        """Check if a webhook destination is configured."""
        return bool(self.WEBHOOK_URL.strip())


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached settings instance."""

    return Settings()  # type: ignore[arg-type]


settings = get_settings()
