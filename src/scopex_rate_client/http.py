"""HTTP binding used by the rate fetcher.

The fetcher only needs ``get(url, headers, timeout)`` returning an object
with ``ok``, ``status`` and ``body``. ``RequestsHttpClient`` provides that on
top of ``requests``; tests and host environments can pass any object with
the same shape.
"""

import logging
from dataclasses import dataclass
from typing import Protocol

import requests

from scopex_rate_client.exceptions import RateTransportException

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HttpResponse:
    """Minimal view of an HTTP response.

    Args:
        status: HTTP status code.
        body: Response body decoded as text.
    """

    status: int
    body: str

    @property
    def ok(self) -> bool:
        """True for 2xx status codes."""
        return 200 <= self.status < 300


class HttpClient(Protocol):
    """Anything that can perform a GET and return an ``HttpResponse``-like object."""

    def get(
        self, url: str, headers: dict[str, str], timeout: float | None = None
    ) -> HttpResponse: ...


class RequestsHttpClient:
    """``HttpClient`` backed by ``requests``.

    Attributes:
        session: Optional ``requests.Session`` to reuse connections; when None
            each call goes through ``requests.get``
    """

    def __init__(self, session: requests.Session | None = None) -> None:
        self.session = session

    def get(
        self, url: str, headers: dict[str, str], timeout: float | None = None
    ) -> HttpResponse:
        """Perform a GET request.

        Args:
            url: Absolute URL to request
            headers: Request headers
            timeout: Seconds to wait, or None for no timeout

        Returns:
            HttpResponse with the status code and body text

        Raises:
            RateTransportException: If ``requests`` fails before a response arrives
        """
        getter = self.session.get if self.session is not None else requests.get
        logger.debug("GET %s", url)
        try:
            response = getter(url, headers=headers, timeout=timeout)
        except requests.RequestException as e:
            raise RateTransportException(
                f"Request to {url} failed: {e}", url=url, original_error=e
            ) from e

        return HttpResponse(status=response.status_code, body=response.text)
