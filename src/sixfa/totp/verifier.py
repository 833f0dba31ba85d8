"""
sixfa Token Verifier

Checks a compound token against the tokens producible around a point in time.
Clock drift is tolerated by regenerating the token at neighbouring windows:
offset 0 first, then +1, -1, +2, -2 and so on up to allowed_windows - 1.

A mismatch is an ordinary False result. Only invalid parameters raise.
"""

import logging

from cryptography.hazmat.primitives import constant_time

from .generator import MAX_TIME, generate_combined_token, time_counter
from .seeds import SeedSet

logger = logging.getLogger(__name__)

# Every unit currently resolves to seconds. The parameter is kept so callers
# can pass it through, but it has no effect on the time steps.
UNIT_SECONDS = 's'
MAX_ALLOWED_WINDOWS = 2 ** 32 - 1


def unit_multiplier(unit):
    """Seconds per window unit. Always 1, whatever unit is given."""
    return 1


def validate_allowed_windows(allowed_windows):
    """
    Check that a drift tolerance is an integer within 32 bits.

    Values of 1 or less all mean "current window only".

    Raises:
        ValueError: If allowed_windows is not an integer or is too large
    """
    if isinstance(allowed_windows, bool) or not isinstance(allowed_windows, int):
        raise ValueError(f"Allowed windows must be an integer, got {allowed_windows!r}")
    if allowed_windows > MAX_ALLOWED_WINDOWS:
        raise ValueError(f"Allowed windows must fit in 32 bits, got {allowed_windows}")


def step_offsets(allowed_windows):
    """
    Yield the window offsets to try, in order.

    Offsets are produced lazily so a match in the current window returns
    without building the rest of the range.

    Args:
        allowed_windows (int): Number of windows accepted on each side,
            counting the current one. 0 and 1 both mean "current window only".

    Yields:
        int: 0, then 1, -1, 2, -2, ..., n-1, -(n-1)

    Raises:
        ValueError: If allowed_windows is invalid (see validate_allowed_windows)
    """
    validate_allowed_windows(allowed_windows)
    yield 0
    for i in range(1, allowed_windows):
        yield i
        yield -i


def verify_combined_token(seeds, time, token, window, allowed_windows=1, unit=UNIT_SECONDS):
    """
    Verify a compound token, allowing for clock drift.

    Args:
        seeds (SeedSet or iterable): The six seeds the token was generated from,
            in the same order
        time (int): Current time in seconds since the Unix epoch
        token (str): Compound token to check
        window (int): Window size in seconds
        allowed_windows (int): Drift tolerance in windows (see step_offsets)
        unit (str): Time unit marker. Accepted for compatibility; it does not
            change the behaviour

    Returns:
        bool: True if any candidate in the drift range matches exactly

    Raises:
        ValueError: If window or time is invalid, allowed_windows is not
            an integer, or there are not six seeds
        TypeError: If a seed is neither str nor bytes
    """
    seeds = SeedSet.coerce(seeds)
    time_counter(time, window)
    validate_allowed_windows(allowed_windows)

    if not isinstance(token, str):
        logger.debug("Rejecting non-string token of type %s", type(token).__name__)
        return False
    try:
        expected = token.encode('ascii')
    except UnicodeEncodeError:
        logger.debug("Rejecting token with non-ASCII characters")
        return False

    step = window * unit_multiplier(unit)
    for offset in step_offsets(allowed_windows):
        candidate_time = time + offset * step
        if candidate_time < 0 or candidate_time > MAX_TIME:
            logger.debug("Skipping unreachable window offset %d", offset)
            continue
        candidate = generate_combined_token(seeds, candidate_time, window)
        if constant_time.bytes_eq(candidate.encode('ascii'), expected):
            logger.debug("Token matched at window offset %d", offset)
            return True

    logger.debug("Token did not match within %d allowed window(s)", max(allowed_windows, 1))
    return False
