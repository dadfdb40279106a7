from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings loaded from environment variables.

    All settings can be configured via ``ROYALE_*`` environment variables or a
    .env file in the working directory.
    """

    # RoyaleAPI credentials
    api_token: str = ""
    base_url: str = "https://api.royaleapi.com"

    # HTTP client settings
    timeout: float = 10.0  # Request timeout in seconds

    # Rate limit headers sent by the service
    ratelimit_remaining_header: str = "x-ratelimit-remaining"
    ratelimit_retry_after_header: str = "x-ratelimit-retry-after"
    # Epoch-millisecond reset header used by older API revisions (empty = ignored)
    ratelimit_reset_header: str = ""

    # Logging settings
    log_level: str = "INFO"
    log_format: str = "text"  # text | json

    @field_validator("timeout")
    @classmethod
    def validate_timeout_positive(cls, v: float) -> float:
        """Validate timeout values are positive."""
        if v <= 0:
            raise ValueError("Timeout values must be positive")
        return v

    @field_validator("ratelimit_remaining_header", "ratelimit_retry_after_header")
    @classmethod
    def validate_header_name(cls, v: str) -> str:
        """Validate rate limit header names are not blank."""
        v = v.strip().lower()
        if not v:
            raise ValueError("Rate limit header names must not be empty")
        return v

    @field_validator("ratelimit_reset_header")
    @classmethod
    def normalize_reset_header(cls, v: str) -> str:
        return v.strip().lower()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("text", "json"):
            raise ValueError("log_format must be one of: text, json")
        return v

    model_config = SettingsConfigDict(env_file=".env", env_prefix="ROYALE_", extra="ignore")


# Global settings instance
settings = Settings()
