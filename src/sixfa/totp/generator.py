"""
sixfa Token Generator

Derives time-based one-time codes from seeds:
- RFC 4226 dynamic truncation (HMAC-SHA1, 6 digits) via PyOTP
- RFC 6238 time counter: floor(time / window)
- Compound tokens: six per-seed codes joined with '-'

Every function here is a pure function of its arguments. Nothing is cached and
no module state is read, so callers may generate from any number of threads.
"""

import base64
import binascii
import hashlib
import logging

import pyotp

from .seeds import SeedSet, seed_bytes

logger = logging.getLogger(__name__)

TOKEN_DIGITS = 6
TOKEN_SEPARATOR = '-'
MAX_TIME = 2 ** 64 - 1


def validate_window(window):
    """
    Check that a window size can be used as a counter divisor.

    Raises:
        ValueError: If window is not a positive integer within 64 bits
    """
    if isinstance(window, bool) or not isinstance(window, int):
        raise ValueError(f"Window must be an integer number of seconds, got {window!r}")
    if window <= 0:
        raise ValueError(f"Window must be greater than zero, got {window}")
    if window > MAX_TIME:
        raise ValueError(f"Window must fit in 64 bits, got {window}")


def validate_time(time):
    """
    Check that a timestamp is an unsigned 64-bit count of seconds.

    Raises:
        ValueError: If time is negative, too large or not an integer
    """
    if isinstance(time, bool) or not isinstance(time, int):
        raise ValueError(f"Time must be an integer number of seconds, got {time!r}")
    if time < 0 or time > MAX_TIME:
        raise ValueError(f"Time must be between 0 and {MAX_TIME}, got {time}")


def time_counter(time, window):
    """
    Compute the TOTP counter for a timestamp.

    Args:
        time (int): Seconds since the Unix epoch
        window (int): Window size in seconds

    Returns:
        int: floor(time / window)

    Raises:
        ValueError: If window or time is invalid. Checked before dividing.
    """
    validate_window(window)
    validate_time(time)
    return time // window


def _hotp_for_seed(seed):
    # PyOTP takes base32 secrets; encoding the raw seed hands hmac the exact
    # key bytes back, including the empty key.
    secret = base64.b32encode(seed).decode('ascii')
    return pyotp.HOTP(secret, digits=TOKEN_DIGITS, digest=hashlib.sha1)


def generate_token(seed, time, window):
    """
    Generate the 6-digit code for a single seed.

    Args:
        seed (bytes or str): Secret key for the HMAC. Strings are UTF-8 encoded.
        time (int): Seconds since the Unix epoch
        window (int): Window size in seconds, must be greater than zero

    Returns:
        str: Zero-padded 6-digit code

    Raises:
        ValueError: If window or time is invalid
        RuntimeError: If the HMAC cannot be keyed with the seed
    """
    counter = time_counter(time, window)
    seed = seed_bytes(seed)
    try:
        return _hotp_for_seed(seed).at(counter)
    except (TypeError, binascii.Error) as e:
        # hmac accepts keys of any length, so this is a bug rather than bad input
        raise RuntimeError(f"Could not initialise HMAC key: {e}") from e


def generate_combined_token(seeds, time, window):
    """
    Generate a compound token from six seeds.

    Args:
        seeds (SeedSet or iterable): Exactly six seeds, in order
        time (int): Seconds since the Unix epoch
        window (int): Window size in seconds

    Returns:
        str: Six 6-digit codes joined with '-', e.g. '671251-223724-...'

    Raises:
        ValueError: If window/time is invalid or there are not six seeds
        TypeError: If a seed is neither str nor bytes
    """
    seeds = SeedSet.coerce(seeds)
    # Validate once up front so a bad window fails before any hashing
    time_counter(time, window)
    return TOKEN_SEPARATOR.join(generate_token(seed, time, window) for seed in seeds)
