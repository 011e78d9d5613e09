"""Genetic algorithm with elitism and adaptive mutation on OneMax."""

from __future__ import annotations

import random
import sys
from collections.abc import Sequence
from os import PathLike
from pathlib import Path
from typing import TextIO

from .output import write_plot, write_record
from .problem import one_max, random_solution


class GeneticAlgorithm:
    """Generational GA that keeps the best parent and lowers its mutation rate over time."""

    TOURNAMENT_PLAYERS = 3
    CROSS_RATE = 0.4
    BASE_MUTATION_RATE = 0.0301
    MUTATION_DECAY = 15e-7
    # Generations started before this many evaluations use roulette selection and
    # uniform crossover; later ones use tournament selection and mask crossover.
    EARLY_PHASE_EVALUATIONS = 0

    def __init__(
        self,
        bit: int,
        runs: int,
        generations: int,
        pop_size: int,
        rng: random.Random | None = None,
        out: TextIO | None = None,
    ) -> None:
        if bit < 1:
            raise ValueError(f"bit must be at least 1, got {bit}")
        if runs < 1:
            raise ValueError(f"runs must be at least 1, got {runs}")
        if generations < 0:
            raise ValueError(f"generations must not be negative, got {generations}")
        if pop_size < 2:
            raise ValueError(f"pop_size must be at least 2, got {pop_size}")
        self.bit = bit
        self.runs = runs
        self.generations = generations
        self.pop_size = pop_size
        self.rng = rng if rng is not None else random.Random()
        self.out = out if out is not None else sys.stdout

    @property
    def max_evaluations(self) -> int:
        """Number of evaluations in one run."""
        return self.generations * self.pop_size

    def select_roulette(
        self, population: Sequence[Sequence[int]], fitness: Sequence[float]
    ) -> tuple[list[int], list[int]]:
        """Pick two distinct parents with probability proportional to their fitness."""
        if sum(1 for value in fitness if value > 0) < 2:
            raise ValueError("roulette selection needs two individuals with positive fitness")
        total = sum(fitness)

        def spin() -> int:
            point = self.rng.random()
            accumulated = 0.0
            for index, value in enumerate(fitness):
                accumulated += value / total
                if accumulated > point:
                    return index
            return len(fitness) - 1

        first = spin()
        second = spin()
        while first == second:
            first = spin()
        return list(population[first]), list(population[second])

    def _tournament(self, population: Sequence[Sequence[int]]) -> list[int]:
        best_index = self.rng.randrange(len(population))
        best_score = one_max(population[best_index])
        for _ in range(self.TOURNAMENT_PLAYERS):
            index = self.rng.randrange(len(population))
            score = one_max(population[index])
            if score > best_score:
                best_index, best_score = index, score
        return list(population[best_index])

    def select_tournament(
        self, population: Sequence[Sequence[int]]
    ) -> tuple[list[int], list[int]]:
        """Pick two parents by tournament; they differ unless every individual is the same."""
        first = self._tournament(population)
        second = self._tournament(population)
        if all(individual == population[0] for individual in population):
            return first, second
        while first == second:
            first = self._tournament(population)
        return first, second

    def crossover_uniform(
        self, parent1: Sequence[int], parent2: Sequence[int]
    ) -> tuple[list[int], list[int]]:
        """Swap each bit between the parents with probability ``CROSS_RATE``."""
        child1: list[int] = []
        child2: list[int] = []
        for a, b in zip(parent1, parent2):
            if self.rng.random() < self.CROSS_RATE:
                a, b = b, a
            child1.append(a)
            child2.append(b)
        return child1, child2

    def crossover_mask(
        self, parent1: Sequence[int], parent2: Sequence[int]
    ) -> tuple[list[int], list[int]]:
        """Build two complementary children from a random binary mask."""
        mask = [self.rng.randrange(2) for _ in parent1]
        child1 = [a if m else b for m, a, b in zip(mask, parent1, parent2)]
        child2 = [b if m else a for m, a, b in zip(mask, parent1, parent2)]
        return child1, child2

    def mutate(self, child: Sequence[int], evaluations: int) -> list[int]:
        """Return a copy of ``child`` with bits flipped at a rate that falls with ``evaluations``."""
        rate = self.BASE_MUTATION_RATE - evaluations * self.MUTATION_DECAY
        return [1 - b if self.rng.random() < rate else b for b in child]

    def _breed(
        self, population: list[list[int]], fitness: list[int], evaluations: int
    ) -> list[list[int]]:
        early = evaluations < self.EARLY_PHASE_EVALUATIONS
        children: list[list[int]] = []
        while len(children) < self.pop_size:
            if early:
                parent1, parent2 = self.select_roulette(population, fitness)
                child1, child2 = self.crossover_uniform(parent1, parent2)
            else:
                parent1, parent2 = self.select_tournament(population)
                child1, child2 = self.crossover_mask(parent1, parent2)
            children.append(self.mutate(child1, evaluations))
            children.append(self.mutate(child2, evaluations))
        del children[self.pop_size:]
        elite = fitness.index(max(fitness))
        children[0] = list(population[elite])
        return children

    def run_once(self) -> tuple[int, list[int]]:
        """Evolve once; return the best final fitness and the fitness of every evaluation."""
        population = [random_solution(self.bit, self.rng) for _ in range(self.pop_size)]
        fitness = [one_max(individual) for individual in population]
        history: list[int] = []
        best = 0
        evaluations = 0

        while evaluations < self.max_evaluations:
            population = self._breed(population, fitness, evaluations)
            fitness = [one_max(child) for child in population]
            evaluations += len(population)
            history.extend(fitness)
            best = max(fitness)

        return best, history

    def run(self, directory: str | PathLike[str] = ".") -> list[float]:
        """Run every evolution, write records and a plot script, and return the average curve."""
        target = Path(directory)
        averages = [0.0] * self.max_evaluations

        for run_number in range(1, self.runs + 1):
            best, history = self.run_once()
            write_record(target / f"fitness_of_run_{run_number}_GA.txt", history)
            averages = [total + value / self.runs for total, value in zip(averages, history)]
            print(best, file=self.out)

        write_record(target / "fitness_average_GA.txt", averages)
        write_plot(
            target / "plot_GA.plt",
            image="results_OneMax_GeneticAlgo.png",
            title="Average Convergence with GeneticAlgo on OneMax",
            xlabel="Evaluation",
            ylabel="Average Fitness",
            xmax=self.max_evaluations,
            ymax=self.bit,
            data_file="fitness_average_GA.txt",
            legend="Average with GeneticAlgo.png",
        )
        return averages