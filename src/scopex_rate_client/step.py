"""Run the rate fetch as a standalone workflow step."""

import json
import logging
import sys

from scopex_rate_client.exceptions import ConfigurationException
from scopex_rate_client.fetcher import SupportsCurrentRate
from scopex_rate_client.output import StepOutput
from scopex_rate_client.settings import RateClientSettings
from scopex_rate_client.utils.config import create_rate_fetcher, load_settings

logger = logging.getLogger(__name__)


def run_step(
    output: SupportsCurrentRate | None = None,
    settings: RateClientSettings | None = None,
) -> SupportsCurrentRate:
    """Fetch the rate once and publish it to ``output``.

    Invalid environment configuration is logged and yields a None rate,
    like any other failure.

    Args:
        output: Slot to write into (a new StepOutput if None)
        settings: Explicit settings (if None, loads from the environment)

    Returns:
        The output object, with ``current_rate`` written exactly once
    """
    if output is None:
        output = StepOutput()

    try:
        fetcher = create_rate_fetcher(settings=settings)
    except ConfigurationException as e:
        logger.error("Invalid configuration for %s: %s", e.config_key, e)
        output.current_rate = None
        return output

    fetcher.run(output)
    return output


def main() -> None:
    """Print ``{"currentRate": ...}`` to stdout; diagnostics go to stderr."""
    logging.basicConfig(
        level=logging.INFO,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    output = run_step(StepOutput())
    print(json.dumps(output.to_dict()))
