"""Shared pytest configuration and fixtures for the test suite."""

from collections.abc import Callable
from typing import Any
from unittest.mock import Mock

import pytest

from scopex_rate_client.http import HttpResponse
from scopex_rate_client.settings import RateClientSettings

RATE_BODY = '{"data": {"rate": 83.45}}'


class RecordingOutput:
    """Output slot that remembers every write to ``current_rate``."""

    def __init__(self) -> None:
        self.writes: list[Any] = []

    @property
    def current_rate(self) -> Any:
        return self.writes[-1] if self.writes else None

    @current_rate.setter
    def current_rate(self, value: Any) -> None:
        self.writes.append(value)


@pytest.fixture
def make_http_client() -> Callable[..., Mock]:
    """Build a mock HTTP client answering with the given status and body."""

    def _make(status: int = 200, body: str = RATE_BODY) -> Mock:
        client = Mock()
        client.get.return_value = HttpResponse(status=status, body=body)
        return client

    return _make


@pytest.fixture
def mock_logger() -> Mock:
    """Mock logger exposing ``info`` and ``error``."""
    return Mock()


@pytest.fixture
def recording_output() -> RecordingOutput:
    """Output slot that records each assignment."""
    return RecordingOutput()


@pytest.fixture
def default_settings() -> RateClientSettings:
    """Settings pointing at the production endpoint."""
    return RateClientSettings()


# Pytest configuration
pytest_plugins: list[str] = []
