"""Configuration utilities for environment-based setup."""

import os

from dotenv import load_dotenv
from pydantic import ValidationError

from scopex_rate_client.exceptions import ConfigurationException
from scopex_rate_client.fetcher import RateFetcher
from scopex_rate_client.http import HttpClient
from scopex_rate_client.settings import (
    DEFAULT_RATE_URL,
    DEFAULT_USER_AGENT,
    RateClientSettings,
)

RATE_URL_ENV = "SCOPEX_RATE_URL"
USER_AGENT_ENV = "SCOPEX_RATE_USER_AGENT"
TIMEOUT_ENV = "SCOPEX_RATE_TIMEOUT"


def load_environment() -> None:
    """Load environment variables from .env file if it exists."""
    load_dotenv()


def load_settings() -> RateClientSettings:
    """Build settings from the environment.

    Reads ``SCOPEX_RATE_URL``, ``SCOPEX_RATE_USER_AGENT`` and
    ``SCOPEX_RATE_TIMEOUT``; unset or empty variables keep their defaults.

    Returns:
        Validated RateClientSettings

    Raises:
        ConfigurationException: If the timeout is not a positive number
    """
    load_environment()

    rate_url = os.getenv(RATE_URL_ENV) or DEFAULT_RATE_URL
    user_agent = os.getenv(USER_AGENT_ENV) or DEFAULT_USER_AGENT

    raw_timeout = os.getenv(TIMEOUT_ENV)
    timeout: float | None = None
    if raw_timeout:
        try:
            timeout = float(raw_timeout)
        except ValueError as e:
            raise ConfigurationException(
                f"{TIMEOUT_ENV} must be a number of seconds, got '{raw_timeout}'",
                config_key=TIMEOUT_ENV,
                config_value=raw_timeout,
            ) from e

    try:
        return RateClientSettings(
            rate_url=rate_url, user_agent=user_agent, timeout_seconds=timeout
        )
    except ValidationError as e:
        raise ConfigurationException(
            f"Invalid rate client configuration: {e}",
            config_key=TIMEOUT_ENV,
            config_value=raw_timeout,
        ) from e


def create_rate_fetcher(
    settings: RateClientSettings | None = None,
    http_client: HttpClient | None = None,
) -> RateFetcher:
    """Create a RateFetcher with environment-based configuration.

    Args:
        settings: Explicit settings (if None, loads from the environment)
        http_client: HTTP client to use (if None, uses ``requests``)

    Returns:
        Configured RateFetcher

    Raises:
        ConfigurationException: If environment values are invalid
    """
    if settings is None:
        settings = load_settings()

    return RateFetcher(http_client=http_client, settings=settings)
