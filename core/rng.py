"""Seedable RNG for dealing shares.

Use set_seed(n) for reproducible documents.
Default (no seed) uses os.urandom.
"""

import os
import random as _random


class DeterministicRNG:
    """Seeded PRNG wrapper. When seed is None, uses os.urandom."""

    def __init__(self, seed=None):
        self._seed = seed
        if seed is not None:
            self._rng = _random.Random(seed)
        else:
            self._rng = None

    def randbelow(self, n: int) -> int:
        if self._rng is not None:
            return self._rng.randrange(n)
        nbytes = max(16, (n.bit_length() + 7) // 8 + 8)
        return int.from_bytes(os.urandom(nbytes), 'big') % n

    def randrange(self, start: int, stop: int) -> int:
        return start + self.randbelow(stop - start)


_global_rng = DeterministicRNG(seed=None)


def set_seed(seed: int | None):
    """Set global seed. None = os-level randomness."""
    global _global_rng
    _global_rng = DeterministicRNG(seed=seed)


def randbelow(n: int) -> int:
    return _global_rng.randbelow(n)


def randrange(start: int, stop: int) -> int:
    return _global_rng.randrange(start, stop)
