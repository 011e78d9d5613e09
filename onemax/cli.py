"""Command line entry point that runs one of the OneMax solvers."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from typing import TextIO

from .annealing import SimulatedAnnealing
from .exhaustive import exhaustive_search
from .genetic import GeneticAlgorithm
from .hill_climbing import HillClimbing
from .tabu import TabuSearch

CHOOSE_MESSAGE = "Choose Algorithm ( ES / HC / SA / GA / TB )"
RETRY_MESSAGE = "Please retype and make sure the form is number."
_DIGITS = frozenset("0123456789")


def is_num(text: str) -> bool:
    """Return whether ``text`` is a non-empty string of ASCII digits."""
    return bool(text) and all(char in _DIGITS for char in text)


def prompt_int(
    prompt: str,
    input_func: Callable[[], str] | None = None,
    out: TextIO | None = None,
) -> int:
    """Ask with ``prompt`` until the answer is a non-negative integer, and return it."""
    read = input_func if input_func is not None else input
    out = out if out is not None else sys.stdout
    while True:
        out.write(prompt)
        out.flush()
        answer = read()
        if is_num(answer):
            return int(answer)
        print(RETRY_MESSAGE, file=out)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="onemax", description="Solve the OneMax problem with a chosen search algorithm."
    )
    parser.add_argument("bit", type=int, help="length of the bit vector")
    parser.add_argument("run", type=int, help="number of independent runs")
    parser.add_argument("iter", type=int, help="evaluations or generations per run")
    parser.add_argument("pop_size", type=int, help="population size for GA")
    parser.add_argument("algorithm", help="ES, HC, SA, GA or TB (any case)")
    parser.add_argument(
        "-d", "--directory", default=".", help="where record and plot files are written"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the arguments, run the chosen algorithm and return an exit status."""
    args = _parser().parse_args(argv)
    algorithm = args.algorithm.upper()
    try:
        if algorithm == "ES":
            exhaustive_search(args.bit)
        elif algorithm == "HC":
            HillClimbing(args.bit, args.run, args.iter).run(args.directory)
        elif algorithm == "SA":
            SimulatedAnnealing(args.bit, args.run, args.iter).run(args.directory)
        elif algorithm == "GA":
            GeneticAlgorithm(args.bit, args.run, args.iter, args.pop_size).run(args.directory)
        elif algorithm == "TB":
            tabu_size = prompt_int("Please type tabu_size = ")
            tweak_num = prompt_int("Please type tweak_num = ")
            TabuSearch(args.bit, args.run, args.iter, tabu_size, tweak_num).run(args.directory)
        else:
            print(CHOOSE_MESSAGE)
    except ValueError as exc:
        print(f"onemax: {exc}", file=sys.stderr)
        return 1
    return 0