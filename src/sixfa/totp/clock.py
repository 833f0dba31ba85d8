"""Wall-clock helpers for token generation."""

import time
import logging

from .generator import validate_window

logger = logging.getLogger(__name__)


def current_unix_time():
    """
    Get the current time as whole seconds since the Unix epoch.

    Returns:
        int: Seconds since 1970-01-01T00:00:00Z

    Raises:
        RuntimeError: If the system clock reports a time before the epoch.
            This is an environment problem and is not retried.
    """
    now = time.time()
    if now < 0:
        logger.critical("System clock is set before the Unix epoch")
        raise RuntimeError(f"System clock reports a time before the Unix epoch: {now}")
    return int(now)


def seconds_remaining(window, now=None):
    """
    Get seconds until the token for the current window changes.

    Args:
        window (int): Window size in seconds
        now (int, optional): Timestamp to measure from, defaults to the current time

    Returns:
        int: Seconds remaining, between 1 and window
    """
    validate_window(window)
    if now is None:
        now = current_unix_time()
    return window - (now % window)
