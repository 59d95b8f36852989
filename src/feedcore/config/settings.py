"""Configuration management using pydantic-settings.

Supports environment variables and .env file loading.
"""

from pathlib import Path

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from feedcore.models.options import FetchOptions, ProxyType


class Settings(BaseSettings):
    """Application configuration.

    Reason: Using pydantic-settings for type-safe config management,
    supporting environment variable override for different deployment environments.
    """

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),  # .env.local overrides .env
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = "INFO"
    log_json: bool = False  # Set True in production for structured logs

    # HTTP transport
    fetch_timeout: int = Field(
        default=30,
        ge=0,
        description="Request timeout in seconds (0 disables the timeout)",
    )
    user_agent: str = "feedcore/0.1"
    ssl_verify: bool = True

    # Proxy
    proxy: str | None = Field(
        default=None,
        description="Proxy address, e.g. proxy.local:3128",
    )
    proxy_auth: SecretStr | None = Field(
        default=None,
        description="Proxy credentials as user:password",
    )
    proxy_type: ProxyType = ProxyType.HTTP

    # Cookie persistence
    cookie_cache: Path | None = Field(
        default=None,
        description="Mozilla-format cookie jar read before and written after each fetch",
    )

    def fetch_options(self) -> FetchOptions:
        """Build transport options from these settings."""
        return FetchOptions(
            timeout=self.fetch_timeout,
            user_agent=self.user_agent,
            proxy=self.proxy or "",
            proxy_auth=self.proxy_auth.get_secret_value() if self.proxy_auth else "",
            proxy_type=self.proxy_type,
            ssl_verify=self.ssl_verify,
        )


# Global singleton instance
settings = Settings()
