"""
sixfa: compound time-based one-time passcodes

Six independent TOTP streams, one per seed, joined into a single token:

    >>> from sixfa import generate_combined_token, verify_combined_token
    >>> seeds = ["a", "b", "c", "d", "e", "f"]
    >>> generate_combined_token(seeds, 1700000000, 30)
    '671251-223724-690512-154754-590474-457655'
"""

from .config import APP_VERSION as __version__
from .totp import (
    SeedSet,
    SEED_COUNT,
    TOKEN_DIGITS,
    TOKEN_SEPARATOR,
    generate_token,
    generate_combined_token,
    step_offsets,
    verify_combined_token,
    current_unix_time,
    seconds_remaining,
)

__all__ = [
    'SeedSet',
    'SEED_COUNT',
    'TOKEN_DIGITS',
    'TOKEN_SEPARATOR',
    'generate_token',
    'generate_combined_token',
    'step_offsets',
    'verify_combined_token',
    'current_unix_time',
    'seconds_remaining',
]
