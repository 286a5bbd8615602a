"""Response models and result types for a single rate fetch."""

import math
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from scopex_rate_client.exceptions import (
    RateClientException,
    RateFetchException,
    RatePayloadException,
    RateTransportException,
)


class RateData(BaseModel):
    """The ``data`` object of a rate response.

    Attributes:
        rate: Current exchange rate, or None when the field is absent
    """

    rate: float | None = Field(
        default=None, description="Current exchange rate as a finite number"
    )

    @field_validator("rate", mode="before")  # type: ignore[misc]
    @classmethod
    def validate_rate(cls, v: Any) -> float | None:
        """Accept JSON numbers only; reject booleans, strings and non-finite values."""
        if v is None:
            return None
        if isinstance(v, bool) or not isinstance(v, int | float):
            raise ValueError("Rate must be a JSON number")
        try:
            rate = float(v)
        except OverflowError as e:
            raise ValueError("Rate must be finite") from e
        if not math.isfinite(rate):
            raise ValueError("Rate must be finite")
        return rate


class RateResponse(BaseModel):
    """Deserialized body of ``GET /misc/rate``.

    Only ``data.rate`` is consumed; every other field is ignored. A missing
    or null ``data`` object is a valid response with no rate.

    Example:
        ```python
        from scopex_rate_client.models import RateResponse

        response = RateResponse.model_validate({"data": {"rate": 83.45}})
        print(response.rate)  # 83.45
        ```
    """

    data: RateData | None = Field(
        default=None, description="Envelope holding the rate field"
    )

    @property
    def rate(self) -> float | None:
        """The nested ``data.rate`` value, or None if either level is absent."""
        if self.data is None:
            return None
        return self.data.rate


class FailureKind(str, Enum):
    """Why a fetch produced no rate."""

    HTTP_STATUS = "http_status"
    TRANSPORT = "transport"
    PAYLOAD = "payload"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True)
class RateOk:
    """Successful fetch. ``rate`` is None when the payload carried no rate."""

    rate: float | None

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> float | None:
        return self.rate


@dataclass(frozen=True)
class RateErr:
    """Failed fetch.

    Args:
        kind: Failure category.
        reason: Human-readable description of what went wrong.
        status: HTTP status code when a response was received.
        url: The URL that was requested.
        error: The exception caught while fetching, if any.
    """

    kind: FailureKind
    reason: str
    status: int | None = None
    url: str | None = None
    error: Exception | None = field(default=None, compare=False, repr=False)

    @property
    def ok(self) -> bool:
        return False

    @property
    def rate(self) -> None:
        """Failed fetches never carry a rate."""
        return None

    def unwrap(self) -> float | None:
        """Raise the exception matching this failure.

        The exception caught during the fetch is re-raised as is when it
        belongs to this package, so its context attributes survive.

        Raises:
            RatePayloadException: For payload failures
            RateTransportException: For transport failures
            RateFetchException: For HTTP status and unexpected failures
        """
        if isinstance(self.error, RateClientException):
            raise self.error
        if self.kind is FailureKind.PAYLOAD:
            raise RatePayloadException(self.reason)
        if self.kind is FailureKind.TRANSPORT:
            raise RateTransportException(
                self.reason, url=self.url, original_error=self.error
            )
        raise RateFetchException(
            self.reason, url=self.url, status=self.status, original_error=self.error
        ) from self.error


RateResult = RateOk | RateErr


def decode_rate_payload(
    body: str, json_decoder: Callable[[str], Any]
) -> RateOk:
    """Decode a response body into a ``RateOk``.

    Args:
        body: Raw response text
        json_decoder: Callable turning text into Python objects (e.g. ``json.loads``)

    Returns:
        RateOk holding the rate, or None if ``data`` or ``data.rate`` is absent

    Raises:
        RatePayloadException: If the body is not JSON or has the wrong shape
    """
    try:
        payload = json_decoder(body)
    except (ValueError, TypeError) as e:
        raise RatePayloadException(
            f"Response body is not valid JSON: {e}", body=body
        ) from e

    try:
        response = RateResponse.model_validate(payload)
    except ValidationError as e:
        raise RatePayloadException(
            f"Unexpected rate payload shape: {e.error_count()} error(s)",
            body=body,
            validation_errors=[dict(err) for err in e.errors()],
        ) from e

    return RateOk(rate=response.rate)
