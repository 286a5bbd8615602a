"""Custom exceptions for the ScopeX rate client."""

from typing import Any


class RateClientException(Exception):
    """Base exception for the ScopeX rate client.

    All custom exceptions in this package should inherit from this base class.
    """

    pass


class RateFetchException(RateClientException):
    """Raised when the rate endpoint does not answer with a 2xx response.

    Attributes:
        url: The URL that was requested
        status: The HTTP status code, if a response was received
        original_error: The original exception, if any
    """

    def __init__(
        self,
        message: str,
        url: str | None = None,
        status: int | None = None,
        original_error: Exception | None = None,
    ):
        super().__init__(message)
        self.url = url
        self.status = status
        self.original_error = original_error


class RateTransportException(RateFetchException):
    """Raised when the request fails before any response is received.

    This exception is raised when:
    - The connection cannot be established
    - The request times out
    - The HTTP client raises any other transport-level error
    """

    pass


class RatePayloadException(RateClientException):
    """Raised when the response body cannot be decoded into a rate.

    This exception is raised when:
    - The body is not valid JSON
    - The JSON is not an object
    - ``data`` or ``data.rate`` has the wrong type

    Attributes:
        body: The raw response body that failed to decode
        validation_errors: List of validation error details
    """

    def __init__(
        self,
        message: str,
        body: str | None = None,
        validation_errors: list[dict[str, Any]] | None = None,
    ):
        super().__init__(message)
        self.body = body
        self.validation_errors = validation_errors or []


class ConfigurationException(RateClientException):
    """Raised when configuration errors occur.

    Attributes:
        config_key: The configuration key that caused the error
        config_value: The invalid configuration value
    """

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        config_value: str | None = None,
    ):
        super().__init__(message)
        self.config_key = config_key
        self.config_value = config_value
