import itertools

import pytest
from hypothesis import given
from hypothesis import strategies as st

from classicalgos.optimal_merge import EXAMPLE_SIZES, main, optimal_merge_cost


def test_example_cost():
    assert optimal_merge_cost(EXAMPLE_SIZES) == 205


def test_single_file_costs_nothing():
    assert optimal_merge_cost([42]) == 0


def test_two_files_cost_their_sum():
    assert optimal_merge_cost([7, 11]) == 7 + 11


def test_empty_rejected():
    with pytest.raises(ValueError):
        optimal_merge_cost([])


def test_does_not_mutate_input():
    sizes = [5, 1, 3]
    optimal_merge_cost(sizes)
    assert sizes == [5, 1, 3]


@given(st.lists(st.integers(0, 1000), min_size=2, max_size=12))
def test_cost_at_least_total_size(sizes):
    assert optimal_merge_cost(sizes) >= sum(sizes)


@given(st.lists(st.integers(0, 1000), min_size=1, max_size=12), st.randoms())
def test_order_independent(sizes, rng):
    shuffled = list(sizes)
    rng.shuffle(shuffled)
    assert optimal_merge_cost(shuffled) == optimal_merge_cost(sizes)


@given(st.lists(st.integers(0, 1000), min_size=1, max_size=12))
def test_not_worse_than_sequential_merging(sizes):
    running = list(itertools.accumulate(sizes))
    sequential = sum(running[1:])
    assert optimal_merge_cost(sizes) <= sequential


def test_main_example(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "File sizes: 20 30 10 5 30 "
    assert lines[1].endswith("optimal merge pattern is 205")