import random

import pytest

from onemax.problem import one_max
from onemax.tabu import TabuSearch


def make(bit=20, runs=2, evaluations=200, tabu_size=5, tweak_num=3, seed=1):
    return TabuSearch(bit, runs, evaluations, tabu_size, tweak_num, random.Random(seed))


def test_tweak_flips_exactly_one_bit():
    search = make()
    base = [0, 1] * 10
    for _ in range(100):
        candidate = search.tweak(base)
        assert sum(a != b for a, b in zip(base, candidate)) == 1
    assert base == [0, 1] * 10


def test_run_once_record_is_nondecreasing_and_bounded():
    search = make(bit=30, evaluations=400)
    best, record = search.run_once()
    assert len(record) == 400
    assert all(a <= b for a, b in zip(record, record[1:]))
    assert all(0 <= v <= 30 for v in record)
    assert record[-1] == one_max(best)


def test_run_once_reaches_optimum_on_small_problem():
    search = make(bit=10, evaluations=2000, tabu_size=3, tweak_num=5)
    best, record = search.run_once()
    assert best == [1] * 10
    assert record[-1] == 10


def test_run_once_is_reproducible_with_same_seed():
    best, record = make(seed=9).run_once()
    other_best, other_record = make(seed=9).run_once()
    assert len(record) == 200
    assert record[-1] == one_max(best)
    assert best == other_best
    assert record == other_record


def test_zero_evaluations_gives_empty_record():
    _, record = make(evaluations=0).run_once()
    assert record == []


@pytest.mark.parametrize(
    "bit, runs, evaluations, tabu_size, tweak_num",
    [(0, 1, 10, 1, 1), (5, 0, 10, 1, 1), (5, 1, -1, 1, 1), (5, 1, 10, -1, 1), (5, 1, 10, 1, 0)],
)
def test_invalid_arguments_raise(bit, runs, evaluations, tabu_size, tweak_num):
    with pytest.raises(ValueError):
        TabuSearch(bit, runs, evaluations, tabu_size, tweak_num)


def test_run_writes_records_and_plot(tmp_path):
    search = make(bit=16, runs=2, evaluations=60, tabu_size=4, tweak_num=2)
    averages = search.run(tmp_path)
    assert len(averages) == 60
    assert all(0 <= v <= 16 for v in averages)
    for run_number in (1, 2):
        path = tmp_path / f"fitness_of_run_{run_number}_TB_16bit_size4_tweak2.txt"
        lines = path.read_text().splitlines()
        assert len(lines) == 60
        assert all("." not in line for line in lines)
    average_path = tmp_path / "fitness_average_TB_16bit_size4_tweak2.txt"
    assert len(average_path.read_text().splitlines()) == 60
    plot = (tmp_path / "plot_TB.plt").read_text()
    assert "set output 'result_OneMax_TB_16bit_size4_tweak2.png'" in plot
    assert "set xlabel 'Evaluation times'" in plot
    assert "plot 'fitness_average_TB_16bit_size4_tweak2.txt' using 1:2" in plot


def test_run_average_is_mean_of_runs(tmp_path):
    search = make(bit=12, runs=2, evaluations=40, seed=4)
    averages = search.run(tmp_path)
    first = [int(line.split()[1]) for line in (tmp_path / "fitness_of_run_1_TB_12bit_size5_tweak3.txt").read_text().splitlines()]
    second = [int(line.split()[1]) for line in (tmp_path / "fitness_of_run_2_TB_12bit_size5_tweak3.txt").read_text().splitlines()]
    for avg, a, b in zip(averages, first, second):
        assert avg == pytest.approx((a + b) / 2)