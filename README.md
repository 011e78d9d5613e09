# onemax

Five search algorithms applied to the OneMax problem. The goal is a bit string
with as many ones as possible, so a solution's fitness is its count of ones.

- **ES**: exhaustive search over every bit string
- **HC**: hill climbing that flips one random bit and keeps the result only if it is strictly better
- **SA**: simulated annealing that flips one to three distinct bits per move, cools the temperature and reheats it after 50 moves that did not improve
- **TB**: tabu search with single-bit tweaks and a bounded tabu list
- **GA**: a genetic algorithm with tournament selection, mask crossover, a mutation rate that falls as evaluations grow, and elitism

## Installation

```
pip install .
```

## Usage

```
onemax BIT RUN ITER POP_SIZE ALGORITHM [-d DIRECTORY]
```

- `BIT`: length of the bit string
- `RUN`: number of independent runs
- `ITER`: evaluations per run. For SA it is the number of iterations, and for GA the number of generations.
- `POP_SIZE`: population size. Only GA uses it, but it must always be given.
- `ALGORITHM`: one of `ES`, `HC`, `SA`, `GA` or `TB`, in any letter case
- `-d`, `--directory`: where record and plot files go (default: the current directory)

Example:

```
onemax 100 30 1000 20 GA
```

If the algorithm name is not recognised, the command prints
`Choose Algorithm ( ES / HC / SA / GA / TB )`. If a setting is out of range
(for example `BIT` below 1, or a GA population below 2), it prints an error to
standard error and exits with status 1.

With `TB`, the command then asks for `tabu_size` and `tweak_num`. It asks
again until it receives a whole number.

Exhaustive search handles up to 64 bits. It prints every new best solution as
it finds it, most significant bit first, then the overall best. It stops after
30 minutes and writes no files.

The other algorithms write the following into the directory:

- a record for each run, for example `values_of_run_1_HC.txt`, `values_of_run_1_SA.txt`,
  `fitness_of_run_1_GA.txt` or `fitness_of_run_1_TB_<bit>bit_size<tabu_size>_tweak<tweak_num>.txt`.
  Each line holds a 1-based index and a value.
- a record of the average over all runs (`values_average_HC.txt`, `values_average_SA.txt`,
  `fitness_average_GA.txt`, `fitness_average_TB_...txt`)
- a gnuplot script (`plot_HC.plt`, `plot_SA.plt`, `plot_GA.plt`, `plot_TB.plt`) that plots the average record as a PNG

Two records differ from the others:

- HC and TB record the best value found so far after each evaluation.
- GA records the fitness of every individual it evaluates, and prints each run's best final fitness.
- SA records the best value per iteration. If the temperature drops to its floor before the run ends, the remaining iterations are recorded as 0.

## Library use

Each algorithm can be used from Python. The classes take a `random.Random`
instance, so runs can be repeated:

```python
import random
from onemax.hill_climbing import HillClimbing

hc = HillClimbing(bit=50, runs=5, max_evaluations=500, rng=random.Random(1))
averages = hc.run(".")
```

- `onemax.hill_climbing.HillClimbing`
- `onemax.annealing.SimulatedAnnealing`, with `onemax.annealing.AnnealingSchedule` to set the temperature settings
- `onemax.tabu.TabuSearch`
- `onemax.genetic.GeneticAlgorithm`

Each class has two methods:

- `run_once()` performs a single run in memory. It writes no files.
- `run(directory)` performs every run, writes the records and the plot script, and returns the average curve.

`HillClimbing` and `GeneticAlgorithm` also accept an `out` stream for their
progress output, which goes to standard output by default.

`onemax.exhaustive.exhaustive_search(bit, time_limit, out)` returns a
`SearchResult` with the best value, the best solution and the number of
evaluations.

`onemax.problem.one_max` returns the fitness of a solution. `onemax.output`
holds the writers for records and gnuplot scripts.

## What it does not do

The package does not draw charts itself. It writes gnuplot scripts, which you
run with gnuplot separately to get the PNG images.

## Tests

```
pip install .[test]
pytest
```