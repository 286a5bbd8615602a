"""Fetch the current ScopeX exchange rate for an automation workflow step."""

import json
import logging
from collections.abc import Callable
from typing import Any, Protocol

from scopex_rate_client.exceptions import RatePayloadException, RateTransportException
from scopex_rate_client.http import HttpClient, RequestsHttpClient
from scopex_rate_client.models import (
    FailureKind,
    RateErr,
    RateResult,
    decode_rate_payload,
)
from scopex_rate_client.settings import RateClientSettings


class SupportsCurrentRate(Protocol):
    """Any output object with an assignable ``current_rate`` attribute."""

    current_rate: float | None


class RateFetcher:
    """Single-attempt rate fetcher that never raises.

    Every failure (non-2xx status, bad payload, transport error, anything
    unexpected) is logged and turned into a ``RateErr`` whose ``rate`` is None.
    Nothing is retried and no state is kept between calls.

    Attributes:
        http_client: Object performing the GET request
        json_decoder: Callable decoding the response body
        logger: Logger receiving ``info`` and ``error`` diagnostics
        settings: URL, User-Agent and timeout to use

    Example:
        ```python
        from scopex_rate_client import RateFetcher, StepOutput

        output = StepOutput()
        RateFetcher().run(output)
        print(output.current_rate)  # e.g. 83.45, or None on failure
        ```
    """

    def __init__(
        self,
        http_client: HttpClient | None = None,
        json_decoder: Callable[[str], Any] = json.loads,
        logger: logging.Logger | None = None,
        settings: RateClientSettings | None = None,
    ) -> None:
        self.http_client = http_client or RequestsHttpClient()
        self.json_decoder = json_decoder
        self.logger = logger or logging.getLogger(__name__)
        self.settings = settings or RateClientSettings()

    def fetch(self) -> RateResult:
        """Request the rate once.

        Returns:
            RateOk with the rate (None if the payload has no ``data.rate``), or
            RateErr describing the failure
        """
        url = self.settings.rate_url
        try:
            self.logger.info("Fetching exchange rate from API...")
            response = self.http_client.get(
                url,
                headers=self.settings.headers,
                timeout=self.settings.timeout_seconds,
            )

            if not response.ok:
                self.logger.error(
                    "API request failed with status: %s", response.status
                )
                return RateErr(
                    kind=FailureKind.HTTP_STATUS,
                    reason=f"API request failed with status: {response.status}",
                    status=response.status,
                    url=url,
                )

            result = decode_rate_payload(response.body, self.json_decoder)
            self.logger.info("Exchange rate fetched: %s", result.rate)
            return result

        except RatePayloadException as e:
            self.logger.error("Error decoding rate payload: %s", e)
            return RateErr(
                kind=FailureKind.PAYLOAD, reason=str(e), url=url, error=e
            )
        except RateTransportException as e:
            self.logger.error("Error fetching rate: %s", e)
            return RateErr(
                kind=FailureKind.TRANSPORT, reason=str(e), url=url, error=e
            )
        except Exception as e:
            self.logger.error("Error fetching rate: %s", e, exc_info=True)
            return RateErr(
                kind=FailureKind.UNEXPECTED, reason=str(e), url=url, error=e
            )

    def run(self, output: SupportsCurrentRate) -> None:
        """Fetch the rate and write it to ``output.current_rate``."""
        output.current_rate = self.fetch().rate


def fetch_rate(
    http_client: HttpClient,
    json_decoder: Callable[[str], Any],
    logger: logging.Logger,
    settings: RateClientSettings | None = None,
) -> float | None:
    """Fetch the rate with explicitly supplied dependencies.

    Returns:
        The rate, or None if it could not be obtained
    """
    fetcher = RateFetcher(
        http_client=http_client,
        json_decoder=json_decoder,
        logger=logger,
        settings=settings,
    )
    return fetcher.fetch().rate
