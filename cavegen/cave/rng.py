"""Deterministic random stream shared by every stochastic generation step."""
from __future__ import annotations

import hashlib
import random
from typing import Union

SeedLike = Union[int, str]

SEED_MODULUS = 2**63 - 1


def coerce_seed(seed: SeedLike) -> int:
    """Convert a seed (int or str) into a stable non-negative integer.

    ASCII integer strings (optional leading sign) keep their numeric value so
    ``"42"`` and ``42``, or ``"-42"`` and ``-42``, give the same cave. Any
    other string, including non-ASCII digits, is hashed with SHA-256; unlike
    ``hash()`` this does not change between interpreter runs.
    """
    if isinstance(seed, bool):
        raise TypeError("seed must be int or str")
    if isinstance(seed, int):
        return seed % SEED_MODULUS
    if isinstance(seed, str):
        s = seed.strip()
        digits = s[1:] if s[:1] in ("+", "-") else s
        if digits.isascii() and digits.isdigit():
            return int(s) % SEED_MODULUS
        h = hashlib.sha256(s.encode("utf-8")).digest()
        return int.from_bytes(h[:8], "big") % SEED_MODULUS
    raise TypeError("seed must be int or str")


def random_seed() -> str:
    """Fresh seed for ``use_random_seed`` mode, kept as a string like user seeds."""
    return str(random.randint(1, 999))


class SeededRandom:
    """Integer stream derived from a seed; same seed, same sequence."""

    def __init__(self, seed: SeedLike):
        self.seed = seed
        self._rng = random.Random(coerce_seed(seed))

    def next(self, lo: int = 0, hi: int = 100) -> int:
        """Return an integer in ``[lo, hi)``."""
        if hi <= lo:
            raise ValueError(f"empty range [{lo},{hi})")
        return self._rng.randrange(lo, hi)


__all__ = ["SeededRandom", "coerce_seed", "random_seed", "SeedLike"]
