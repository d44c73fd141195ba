"""Random values used to simulate network conditions."""

from __future__ import annotations

import random


def gen_range_f32(lower: float, upper: float) -> float:
    """Return a random float in the half-open range [lower, upper)."""
    if not lower < upper:
        raise ValueError(f"empty range: {lower}..{upper}")
    value = lower + random.random() * (upper - lower)
    return min(value, upper) if value < upper else lower


def gen_range_u32(lower: int, upper: int) -> int:
    """Return a random integer in the half-open range [lower, upper)."""
    if lower < 0:
        raise ValueError(f"lower bound must not be negative, got {lower}")
    if not lower < upper:
        raise ValueError(f"empty range: {lower}..{upper}")
    return random.randrange(lower, upper)


def gen_bool() -> bool:
    """Return True or False with equal chance."""
    return random.random() < 0.5