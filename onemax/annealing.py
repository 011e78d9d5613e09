"""Simulated annealing with reheating on OneMax."""

from __future__ import annotations

import math
import random
from collections.abc import Sequence
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

from .output import write_plot, write_record
from .problem import one_max, random_solution

MAX_FLIPS = 3


@dataclass(frozen=True)
class AnnealingSchedule:
    """Temperature settings: start, cooling and reheating factors, floor and stall limit."""

    initial_temperature: float = 10000.0
    cool_rate: float = 0.9799
    reheat_rate: float = 1.1
    min_temperature: float = 1e-15
    stuck_limit: int = 50

    def cool(self, temperature: float) -> float:
        """Return the temperature after one cooling step."""
        return temperature * self.cool_rate

    def reheat(self, temperature: float) -> float:
        """Return the temperature after one reheating step."""
        return temperature * self.reheat_rate


class SimulatedAnnealing:
    """Annealer that flips one to three distinct bits per move and reheats when it stalls."""

    def __init__(
        self,
        bit: int,
        runs: int,
        iterations: int,
        rng: random.Random | None = None,
        schedule: AnnealingSchedule | None = None,
    ) -> None:
        if bit < 1:
            raise ValueError(f"bit must be at least 1, got {bit}")
        if runs < 1:
            raise ValueError(f"runs must be at least 1, got {runs}")
        if iterations < 0:
            raise ValueError(f"iterations must not be negative, got {iterations}")
        self.bit = bit
        self.runs = runs
        self.iterations = iterations
        self.rng = rng if rng is not None else random.Random()
        self.schedule = schedule if schedule is not None else AnnealingSchedule()

    def neighbor(self, solution: Sequence[int]) -> list[int]:
        """Return a copy of ``solution`` with one to three distinct random bits flipped."""
        flips = min(1 + self.rng.randrange(MAX_FLIPS), self.bit)
        candidate = list(solution)
        for index in self.rng.sample(range(self.bit), flips):
            candidate[index] = 1 - candidate[index]
        return candidate

    def _accepts(self, difference: float, temperature: float) -> bool:
        if difference > 0:
            return True
        return math.exp(difference / temperature) > self.rng.random()

    def run_once(self) -> tuple[list[int], list[float]]:
        """Anneal once; return the best solution and the best value per iteration.

        Iterations left over when the temperature falls to its floor are recorded as zero.
        """
        schedule = self.schedule
        temperature = schedule.initial_temperature
        solution = random_solution(self.bit, self.rng)
        value = one_max(solution)
        best_solution, best_value = solution, value
        record = [0.0] * self.iterations
        stuck = 0

        for step in range(self.iterations):
            if temperature <= schedule.min_temperature:
                break
            candidate = self.neighbor(solution)
            candidate_value = one_max(candidate)
            difference = candidate_value - value

            if self._accepts(difference, temperature):
                solution, value = candidate, candidate_value
                if value > best_value:
                    best_solution, best_value = solution, value

            if difference <= 0:
                stuck += 1

            if stuck >= schedule.stuck_limit:
                temperature = schedule.reheat(temperature)
                stuck = 0
            else:
                temperature = schedule.cool(temperature)

            record[step] = float(best_value)

        return best_solution, record

    def run(self, directory: str | PathLike[str] = ".") -> list[float]:
        """Run every anneal, write records and a plot script, and return the average curve."""
        target = Path(directory)
        averages = [0.0] * self.iterations

        for run_number in range(1, self.runs + 1):
            _, record = self.run_once()
            averages = [total + value / self.runs for total, value in zip(averages, record)]
            write_record(target / f"values_of_run_{run_number}_SA.txt", record)

        write_record(target / "values_average_SA.txt", averages)
        write_plot(
            target / "plot_SA.plt",
            image="result_OneMax_SimulatedAnnealing.png",
            title="Average Convergence with SimulatedAnnealing on OneMax",
            xlabel="Iteration",
            ylabel="Average Value",
            xmax=self.iterations,
            ymax=self.bit,
            data_file="values_average_SA.txt",
            legend="Average with SimulatedAnnealing",
        )
        return averages