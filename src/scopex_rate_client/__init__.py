"""ScopeX Rate Client - fetch the current exchange rate for automation workflows."""

__version__ = "0.1.0"

# Custom exceptions
from .exceptions import (
    ConfigurationException,
    RateClientException,
    RateFetchException,
    RatePayloadException,
    RateTransportException,
)

# Core fetcher
from .fetcher import RateFetcher, fetch_rate
from .http import HttpResponse, RequestsHttpClient
from .models import FailureKind, RateErr, RateOk, RateResponse, RateResult
from .output import StepOutput
from .settings import RateClientSettings
from .step import run_step

# Configuration utilities
from .utils import create_rate_fetcher, load_environment, load_settings

__all__ = [
    "__version__",
    "RateFetcher",
    "fetch_rate",
    "run_step",
    "HttpResponse",
    "RequestsHttpClient",
    "RateResponse",
    "RateOk",
    "RateErr",
    "RateResult",
    "FailureKind",
    "StepOutput",
    "RateClientSettings",
    "load_environment",
    "load_settings",
    "create_rate_fetcher",
    # Exceptions
    "RateClientException",
    "RateFetchException",
    "RateTransportException",
    "RatePayloadException",
    "ConfigurationException",
]
