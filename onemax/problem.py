"""The OneMax objective and small helpers for bit-vector solutions."""

from __future__ import annotations

import random
from collections.abc import Sequence


def one_max(solution: Sequence[int]) -> int:
    """Return the number of ones in ``solution``."""
    return sum(solution)


def random_solution(bit: int, rng: random.Random) -> list[int]:
    """Return a uniformly random bit vector of length ``bit``."""
    if bit < 0:
        raise ValueError(f"bit must not be negative, got {bit}")
    return [rng.randrange(2) for _ in range(bit)]


def flip(solution: Sequence[int], index: int) -> list[int]:
    """Return a copy of ``solution`` with the bit at ``index`` inverted."""
    flipped = list(solution)
    flipped[index] = 1 - flipped[index]
    return flipped