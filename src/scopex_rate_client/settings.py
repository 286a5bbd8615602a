"""Settings for the rate fetch step."""

import math

from pydantic import BaseModel, Field, field_validator

DEFAULT_RATE_URL = "https://v2.scopex.dev/misc/rate"
DEFAULT_USER_AGENT = "Maestro-Automation"


class RateClientSettings(BaseModel):
    """Where and how to request the rate.

    Attributes:
        rate_url: Endpoint returning ``{"data": {"rate": <number>}}``
        user_agent: Value sent in the ``User-Agent`` header
        timeout_seconds: Request timeout; None leaves the HTTP client's default
    """

    model_config = {"frozen": True}

    rate_url: str = Field(default=DEFAULT_RATE_URL, description="Rate endpoint URL")
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT, description="User-Agent header value"
    )
    timeout_seconds: float | None = Field(
        default=None, description="Request timeout in seconds"
    )

    @field_validator("timeout_seconds")  # type: ignore[misc]
    @classmethod
    def validate_timeout(cls, v: float | None) -> float | None:
        """Ensure the timeout is positive if provided."""
        if v is not None and not (math.isfinite(v) and v > 0):
            raise ValueError("Timeout must be positive")
        return v

    @property
    def headers(self) -> dict[str, str]:
        """Request headers sent with every fetch."""
        return {
            "Content-Type": "application/json",
            "User-Agent": self.user_agent,
        }
