"""Waiting for DNS changes to become visible before hostname binding.

Azure DNS accepts a record immediately, but App Service validates custom
hostnames against public resolution, which converges later. The poll mode
asks App Service until it sees the records, backing off exponentially and
giving up after a timeout. The fixed mode sleeps a set interval and lets
the bind call find out.
"""

from __future__ import annotations
import time
from typing import Callable

from .errors import PropagationTimeoutError
from .utils import get_logger

logger = get_logger()


def wait_fixed(seconds: int) -> None:
    """Sleep unconditionally for seconds."""
    logger.info(f"Waiting {seconds}s for DNS record entries to propagate...")
    time.sleep(seconds)


def wait_for_propagation(
    probe: Callable[[], bool],
    timeout: int,
    initial_delay: int,
    max_delay: int,
    description: str = "DNS records",
) -> int:
    """
    Poll probe with exponential backoff until it returns True.

    The first probe happens after initial_delay. The delay doubles after each
    negative answer, capped at max_delay (never below 1s), and the final sleep is shortened so
    the total never exceeds timeout.

    Returns:
        Number of probes made.

    Raises:
        PropagationTimeoutError: if probe never returned True within timeout.
    """
    deadline = time.monotonic() + timeout
    delay = max(initial_delay, 0)
    attempts = 0

    logger.info(
        f"Waiting for {description} to propagate",
        extra={"timeout_seconds": timeout, "initial_delay_seconds": initial_delay},
    )

    while True:
        remaining = deadline - time.monotonic()
        if remaining <= 0:
            break
        time.sleep(min(delay, remaining))

        attempts += 1
        if probe():
            logger.info(f"{description} visible after {attempts} check(s)")
            return attempts

        logger.info(f"{description} not visible yet (check {attempts})")
        delay = min(max(delay * 2, 1), max(max_delay, 1))

    raise PropagationTimeoutError(
        f"{description} not visible after {timeout}s ({attempts} checks)"
    )
