"""Tabu search with single-bit tweaks on OneMax."""

from __future__ import annotations

import random
from collections import deque
from collections.abc import Sequence
from os import PathLike
from pathlib import Path

from .output import write_plot, write_record
from .problem import flip, one_max, random_solution


class TabuSearch:
    """Tabu search that keeps a bounded list of recently visited solutions."""

    def __init__(
        self,
        bit: int,
        runs: int,
        max_evaluations: int,
        tabu_size: int,
        tweak_num: int,
        rng: random.Random | None = None,
    ) -> None:
        if bit < 1:
            raise ValueError(f"bit must be at least 1, got {bit}")
        if runs < 1:
            raise ValueError(f"runs must be at least 1, got {runs}")
        if max_evaluations < 0:
            raise ValueError(f"max_evaluations must not be negative, got {max_evaluations}")
        if tabu_size < 0:
            raise ValueError(f"tabu_size must not be negative, got {tabu_size}")
        if tweak_num < 1:
            raise ValueError(f"tweak_num must be at least 1, got {tweak_num}")
        self.bit = bit
        self.runs = runs
        self.max_evaluations = max_evaluations
        self.tabu_size = tabu_size
        self.tweak_num = tweak_num
        self.rng = rng if rng is not None else random.Random()

    def tweak(self, solution: Sequence[int]) -> list[int]:
        """Return a copy of ``solution`` with one random bit flipped."""
        return flip(solution, self.rng.randrange(self.bit))

    def run_once(self) -> tuple[list[int], list[int]]:
        """Search once; return the best solution and the best fitness after each evaluation."""
        solution = random_solution(self.bit, self.rng)
        best_solution = solution
        best_fit = one_max(solution)
        record = [0] * self.max_evaluations
        evaluations = 0

        def evaluate(candidate: list[int]) -> int:
            nonlocal best_solution, best_fit, evaluations
            fit = one_max(candidate)
            if fit > best_fit:
                best_solution, best_fit = candidate, fit
            if evaluations < self.max_evaluations:
                record[evaluations] = best_fit
            evaluations += 1
            return fit

        tabu: deque[list[int]] = deque()
        while evaluations < self.max_evaluations:
            if len(tabu) > self.tabu_size:
                tabu.popleft()

            current = self.tweak(solution)
            for _ in range(self.tweak_num):
                trial = self.tweak(current)
                if trial not in tabu:
                    trial_fit = evaluate(trial)
                    current_fit = evaluate(current)
                    if trial_fit > current_fit or current in tabu:
                        current = trial

            if current not in tabu:
                solution = current
                tabu.append(current)

        return best_solution, record

    def _suffix(self) -> str:
        return f"{self.bit}bit_size{self.tabu_size}_tweak{self.tweak_num}"

    def run(self, directory: str | PathLike[str] = ".") -> list[float]:
        """Run every search, write records and a plot script, and return the average curve."""
        target = Path(directory)
        suffix = self._suffix()
        totals = [0] * self.max_evaluations

        for run_number in range(1, self.runs + 1):
            _, record = self.run_once()
            write_record(target / f"fitness_of_run_{run_number}_TB_{suffix}.txt", record)
            totals = [total + value for total, value in zip(totals, record)]

        averages = [total / self.runs for total in totals]
        average_name = f"fitness_average_TB_{suffix}.txt"
        write_record(target / average_name, averages)
        write_plot(
            target / "plot_TB.plt",
            image=f"result_OneMax_TB_{suffix}.png",
            title="Average Convergence with TabuSearch on OneMax",
            xlabel="Evaluation times",
            ylabel="Average Fitness",
            xmax=self.max_evaluations,
            ymax=self.bit,
            data_file=average_name,
            legend="Average with TB",
        )
        return averages