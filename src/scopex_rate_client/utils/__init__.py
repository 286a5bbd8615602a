"""Utility functions for configuration."""

from .config import create_rate_fetcher, load_environment, load_settings

__all__ = [
    "load_environment",
    "load_settings",
    "create_rate_fetcher",
]
