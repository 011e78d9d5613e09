"""Single-bit-flip hill climbing on OneMax."""

from __future__ import annotations

import random
import sys
from collections.abc import Sequence
from os import PathLike
from pathlib import Path
from typing import TextIO

from .output import write_plot, write_record
from .problem import flip, one_max, random_solution


class HillClimbing:
    """Hill climber that accepts a random one-bit neighbour only when it is strictly better."""

    def __init__(
        self,
        bit: int,
        runs: int,
        max_evaluations: int,
        rng: random.Random | None = None,
        out: TextIO | None = None,
    ) -> None:
        if bit < 1:
            raise ValueError(f"bit must be at least 1, got {bit}")
        if runs < 1:
            raise ValueError(f"runs must be at least 1, got {runs}")
        if max_evaluations < 0:
            raise ValueError(f"max_evaluations must not be negative, got {max_evaluations}")
        self.bit = bit
        self.runs = runs
        self.max_evaluations = max_evaluations
        self.rng = rng if rng is not None else random.Random()
        self.out = out if out is not None else sys.stdout

    def neighbor(self, solution: Sequence[int]) -> list[int]:
        """Return a copy of ``solution`` with one random bit flipped."""
        return flip(solution, self.rng.randrange(self.bit))

    def run_once(self) -> tuple[list[int], list[int]]:
        """Climb once; return the best solution and the best value after each evaluation."""
        best_solution = random_solution(self.bit, self.rng)
        best_value = one_max(best_solution)
        record: list[int] = []

        for evaluations in range(1, self.max_evaluations + 1):
            candidate = self.neighbor(best_solution)
            value = one_max(candidate)
            if value > best_value:
                best_value = value
                best_solution = candidate
                print(f"Evaluation count : {evaluations} New Best : {best_value}", file=self.out)
            record.append(best_value)

        print(f"[ Best value ] : {best_value}", file=self.out)
        return best_solution, record

    def run(self, directory: str | PathLike[str] = ".") -> list[float]:
        """Run all climbs, write records and a plot script, and return the average curve."""
        target = Path(directory)
        print(
            f"Bit : {self.bit} Run : {self.runs} Mnfes : {self.max_evaluations} "
            "Algorithm : HillClimbing",
            file=self.out,
        )
        totals = [0] * self.max_evaluations

        for run_number in range(1, self.runs + 1):
            print(f"\n---------------- Run : {run_number} ----------------", file=self.out)
            _, record = self.run_once()
            write_record(target / f"values_of_run_{run_number}_HC.txt", record)
            totals = [total + value for total, value in zip(totals, record)]

        averages = [total / self.runs for total in totals]
        write_record(target / "values_average_HC.txt", averages)
        write_plot(
            target / "plot_HC.plt",
            image="result_OneMax_HillClimbing.png",
            title="Average Convergence with HillClimbing on OneMax",
            xlabel="Iteration",
            ylabel="Average Value",
            xmax=self.max_evaluations,
            ymax=self.bit,
            data_file="values_average_HC.txt",
            legend="Average with HillClimbing",
        )
        return averages