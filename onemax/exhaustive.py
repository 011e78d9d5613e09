"""Exhaustive search over every bit vector of a given length."""

from __future__ import annotations

import sys
import time
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TextIO

from .problem import one_max

MAX_BITS = 64
DEFAULT_TIME_LIMIT = 30 * 60.0


@dataclass(frozen=True)
class SearchResult:
    """Outcome of an exhaustive search."""

    best_value: int
    best_solution: list[int] | None
    evaluations: int


def solution_from_index(index: int, bit: int) -> list[int]:
    """Return the bits of ``index``, least significant first, as a vector of length ``bit``."""
    return [(index >> b) & 1 for b in range(bit)]


def format_solution(solution: Sequence[int]) -> str:
    """Render a solution with its most significant bit first."""
    return "".join(str(b) for b in reversed(solution))


def exhaustive_search(
    bit: int,
    time_limit: float = DEFAULT_TIME_LIMIT,
    out: TextIO | None = None,
) -> SearchResult:
    """Evaluate every solution of length ``bit`` until done or ``time_limit`` seconds pass."""
    if not 0 <= bit <= MAX_BITS:
        raise ValueError(f"bit must be between 0 and {MAX_BITS}, got {bit}")
    out = out if out is not None else sys.stdout

    total = (1 << bit) - 1 if bit == MAX_BITS else 1 << bit
    start = time.monotonic()

    best_value = -1
    best_solution: list[int] | None = None
    count = 0

    while count < total:
        if time.monotonic() - start >= time_limit:
            break
        solution = solution_from_index(count, bit)
        value = one_max(solution)
        count += 1
        if value > best_value:
            best_value = value
            best_solution = solution
            print(
                f"[Evaluation count = {count}] Found better: {value} → "
                f"{format_solution(solution)}",
                file=out,
            )

    shown = format_solution(best_solution) if best_solution is not None else ""
    print(f"Best Value : {best_value} Best Solution : {shown}", file=out)
    return SearchResult(best_value, best_solution, count)