"""Random integer generation for sample data."""

from __future__ import annotations

import random
import sys

__all__ = ["random_int", "random_ints"]


def random_int() -> int:
    """Return a random non-negative integer below ``sys.maxsize``."""
    return random.randrange(sys.maxsize)


def random_ints(n: int) -> list[int]:
    """Return a list of ``n`` random integers.

    Raises ValueError when ``n`` is negative.
    """
    if n < 0:
        raise ValueError(f"cannot generate a negative amount of integers: {n}")
    return [random_int() for _ in range(n)]