import random

import pytest

from onemax.problem import flip, one_max, random_solution


def test_one_max_all_ones_equals_length():
    assert one_max([1] * 12) == 12


def test_one_max_all_zeros_is_zero():
    assert one_max([0] * 9) == 0


def test_one_max_counts_ones_in_mixed_vector():
    solution = [1, 0, 1, 1, 0]
    assert one_max(solution) == solution.count(1)


def test_random_solution_has_requested_length_and_bits():
    rng = random.Random(3)
    solution = random_solution(40, rng)
    assert len(solution) == 40
    assert set(solution) <= {0, 1}


def test_random_solution_is_reproducible_with_seed():
    first = random_solution(30, random.Random(7))
    second = random_solution(30, random.Random(7))
    assert len(first) == 30
    assert set(first) <= {0, 1}
    assert first == second


def test_random_solution_rejects_negative_length():
    with pytest.raises(ValueError):
        random_solution(-1, random.Random(0))


def test_flip_changes_exactly_one_bit():
    original = [0, 1, 0, 1]
    flipped = flip(original, 2)
    differing = [i for i, (a, b) in enumerate(zip(original, flipped)) if a != b]
    assert differing == [2]
    assert original == [0, 1, 0, 1]


def test_flip_twice_restores_solution():
    original = [1, 1, 0, 0, 1]
    assert flip(flip(original, 4), 4) == original


def test_flip_out_of_range_raises():
    with pytest.raises(IndexError):
        flip([0, 1], 5)