from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    app_name: str = Field(
        default="OGP Verification Service",
        description="Application name",
    )
    version: str = Field(default="1.0", description="Reported service version")
    request_timeout: float = Field(
        default=10.0,
        description="Timeout in seconds for the outbound page fetch",
    )
    user_agent: str = Field(
        default="OGP-Verification-Service/1.0",
        description="User-Agent sent with every outbound fetch",
    )
    rate_limit_requests: int = Field(
        default=10,
        description="Requests allowed per client within one window",
    )
    rate_limit_window: float = Field(
        default=60.0,
        description="Length of a rate window in seconds",
    )
    rate_limit_sweep_interval: float = Field(
        default=0.0,
        description="Seconds between sweeps of expired windows; 0 disables sweeping",
    )
    strict_address_check: bool = Field(
        default=False,
        description="Also reject IP literals in private or reserved ranges",
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed by the CORS middleware",
    )
    log_level: str = Field(default="INFO", description="Log level for ogp_api")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,  # Allow both REQUEST_TIMEOUT and request_timeout
        extra="ignore",  # Ignore extra environment variables
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
