"""
Seed Set

A compound token is built from exactly six seeds, and the position of each seed
decides where its sub-token lands in the result. SeedSet makes that arity and
ordering explicit: it can only be constructed from six seeds and it never
changes afterwards.

Seeds are secret key material. SeedSet keeps them as bytes and hides them from
str()/repr() so they don't leak into logs or tracebacks.
"""

SEED_COUNT = 6


def seed_bytes(seed, index=0):
    """Normalise one seed to bytes. Strings are encoded as UTF-8."""
    if isinstance(seed, (bytes, bytearray, memoryview)):
        return bytes(seed)
    if isinstance(seed, str):
        return seed.encode('utf-8')
    raise TypeError(
        f"Seed {index} must be str or bytes, not {type(seed).__name__}"
    )


class SeedSet:
    """
    Ordered, immutable collection of exactly six seeds.

    Args:
        seeds: Iterable of six str or bytes values. Strings are encoded as UTF-8.

    Raises:
        ValueError: If the iterable does not hold exactly six seeds
        TypeError: If a seed is neither str nor bytes
    """

    __slots__ = ('_seeds',)

    def __init__(self, seeds):
        if isinstance(seeds, (str, bytes, bytearray)):
            raise TypeError("Seeds must be an iterable of six seeds, not a single seed")
        seeds = tuple(seed_bytes(seed, i) for i, seed in enumerate(seeds))
        if len(seeds) != SEED_COUNT:
            raise ValueError(f"Exactly {SEED_COUNT} seeds are required, got {len(seeds)}")
        object.__setattr__(self, '_seeds', seeds)

    @classmethod
    def coerce(cls, seeds):
        """Return seeds unchanged if already a SeedSet, otherwise build one."""
        if isinstance(seeds, cls):
            return seeds
        return cls(seeds)

    def __setattr__(self, name, value):
        raise AttributeError("SeedSet is immutable")

    def __iter__(self):
        return iter(self._seeds)

    def __len__(self):
        return SEED_COUNT

    def __getitem__(self, index):
        return self._seeds[index]

    def __eq__(self, other):
        if not isinstance(other, SeedSet):
            return NotImplemented
        return self._seeds == other._seeds

    def __hash__(self):
        return hash(self._seeds)

    def replace(self, index, seed):
        """
        Return a new SeedSet with the seed at index swapped out.

        Args:
            index (int): Slot to replace (0-5)
            seed (str or bytes): New seed for that slot

        Returns:
            SeedSet: A new instance; this one is left untouched
        """
        seeds = list(self._seeds)
        seeds[index] = seed_bytes(seed, index)
        return SeedSet(seeds)

    def __str__(self):
        return "-".join("****" if seed else "" for seed in self._seeds)

    def __repr__(self):
        lengths = ", ".join(str(len(seed)) for seed in self._seeds)
        return f"<SeedSet of lengths ({lengths})>"
