"""12-factor configuration adapter using environment variables."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from octranspo_api.adapters.octranspo_api.constants import API_URL_PREFIX


class AppConfig(BaseSettings):
    """Client configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Credentials issued by the OC Transpo developer portal
    octranspo_app_id: str = Field(default="", description="Application ID (appID)")
    octranspo_api_key: str = Field(default="", description="API key (apiKey)")

    octranspo_api_url: str = Field(
        default=API_URL_PREFIX,
        description="Base address of the API, ending with a slash",
    )

    # Rate limiting configuration
    # The default daily quota is 10,000 calls; 0.11572/s spreads that over 24h.
    rate_limit_per_second: float | None = Field(
        default=None,
        description="Steady request rate per connection (unset for no limit)",
    )
    rate_limit_burst: int = Field(
        default=1,
        description="Number of requests allowed back to back before throttling",
    )

    request_timeout_seconds: float = Field(
        default=10.0, description="Timeout for a single API request in seconds"
    )

    @field_validator("rate_limit_per_second")
    @classmethod
    def validate_rate_limit(cls, v: float | None) -> float | None:
        """Validate the rate is positive when set."""
        if v is not None and v <= 0:
            raise ValueError("rate_limit_per_second must be positive")
        return v

    @field_validator("rate_limit_burst")
    @classmethod
    def validate_burst(cls, v: int) -> int:
        """Validate the burst size is at least 1."""
        if v < 1:
            raise ValueError("rate_limit_burst must be at least 1")
        return v

    @field_validator("request_timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Validate the timeout is positive."""
        if v <= 0:
            raise ValueError("request_timeout_seconds must be positive")
        return v

    @field_validator("octranspo_api_url")
    @classmethod
    def validate_api_url(cls, v: str) -> str:
        """Ensure the base URL ends with a slash so endpoint names can be appended."""
        return v if v.endswith("/") else f"{v}/"

    def has_credentials(self) -> bool:
        """Return True when both the application ID and API key are set."""
        return bool(self.octranspo_app_id and self.octranspo_api_key)
