"""
Compound TOTP core for sixfa
"""

from .seeds import SeedSet, SEED_COUNT
from .generator import (
    TOKEN_DIGITS,
    TOKEN_SEPARATOR,
    generate_token,
    generate_combined_token,
)
from .verifier import step_offsets, verify_combined_token
from .clock import current_unix_time, seconds_remaining

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
