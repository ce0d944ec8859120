"""Settings loaded from environment variables.

Uses Pydantic Settings for automatic env var loading. All variables share
the ``CIO_`` prefix:

    CIO_SITE_ID=abc123 CIO_API_KEY=... CIO_REGION=eu
"""

from typing import Optional

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cio_tracker.core.config.enums import Region


class Settings(BaseSettings):
    """Tracking client configuration.

    Credentials are optional here so the package imports cleanly without
    them; ``TrackingClient.from_settings`` rejects missing values.
    """

    model_config = SettingsConfigDict(
        env_prefix="CIO_",
        env_file=".env",
        extra="ignore",
        case_sensitive=False,
    )

    SITE_ID: Optional[str] = Field(None, description="Customer.io site (account) id")
    API_KEY: Optional[SecretStr] = Field(None, description="Customer.io Track API key")
    REGION: Region = Field(Region.US, description="Data center region")
    TRACK_URL: Optional[str] = Field(
        None, description="Explicit Track API base URL, overrides the region default"
    )
    TIMEOUT_SECONDS: float = Field(10.0, gt=0, description="Per-request timeout")
    LOG_LEVEL: str = Field("INFO", description="Log level for the cio_tracker logger")

    @field_validator("TRACK_URL")
    @classmethod
    def ensure_trailing_slash(cls, v: Optional[str]) -> Optional[str]:
        # Relative request paths are joined onto the base URL
        if v and not v.endswith("/"):
            return v + "/"
        return v

    @property
    def track_url(self) -> str:
        """Resolved Track API base URL."""
        return self.TRACK_URL or self.REGION.track_url
