"""
Seed List Adapter

Entry points for callers that hold seeds as a plain list of any length, such as
foreign-language bindings or the command line. The list is mapped onto the six
seed slots and the call is handed to the core unchanged.

Mapping rules:
- Seeds fill slots 0-5 in the order given
- Missing trailing slots become empty seeds
- Seeds beyond the sixth are ignored
"""

import logging

from .config import DEFAULT_UNIT
from .totp import SEED_COUNT, SeedSet, generate_combined_token, verify_combined_token

logger = logging.getLogger(__name__)


def pad_seeds(seeds):
    """
    Map a variable-length seed list onto exactly six slots.

    Args:
        seeds (iterable): str or bytes seeds, any number of them

    Returns:
        SeedSet: The first six seeds, padded with empty seeds
    """
    seeds = list(seeds)
    if len(seeds) > SEED_COUNT:
        logger.warning(f"Ignoring {len(seeds) - SEED_COUNT} seed(s) beyond the first {SEED_COUNT}")
    elif len(seeds) < SEED_COUNT:
        logger.debug(f"Padding {SEED_COUNT - len(seeds)} empty seed slot(s)")
    slots = seeds[:SEED_COUNT] + [''] * (SEED_COUNT - len(seeds))
    return SeedSet(slots)


def generate_from_list(seeds, time, window):
    """Generate a compound token from a seed list of any length."""
    return generate_combined_token(pad_seeds(seeds), time, window)


def verify_from_list(seeds, time, token, window, allowed_windows=1, unit=DEFAULT_UNIT):
    """Verify a compound token against a seed list of any length."""
    return verify_combined_token(pad_seeds(seeds), time, token, window, allowed_windows, unit)
