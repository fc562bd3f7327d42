"""Uniform integer random numbers used by the noise components."""

from __future__ import annotations

import random

_rng = random.Random()


def random_range(low: int, high: int) -> int:
    """Return a random integer in the half-open range ``[low, high)``."""
    if high <= low:
        raise ValueError(f"empty range [{low}, {high})")
    return _rng.randrange(low, high)