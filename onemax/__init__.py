"""Exhaustive search, hill climbing, simulated annealing, tabu search and a genetic algorithm on OneMax."""

__version__ = "0.1.0"