from hypothesis import given
from hypothesis import strategies as st

from classicalgos.merge_sort import EXAMPLE, main, merge, merge_sort


def test_merge_two_sorted_lists():
    assert merge([1, 4, 9], [2, 3, 10]) == [1, 2, 3, 4, 9, 10]


def test_merge_with_empty_side():
    assert merge([], [1, 2]) == [1, 2]
    assert merge([3, 4], []) == [3, 4]
    assert merge([], []) == []


def test_merge_prefers_left_on_ties():
    result = merge([1, 2], [1.0, 2.0])
    assert [repr(value) for value in result] == ["1", "1.0", "2", "2.0"]


def test_example_sorted():
    assert merge_sort(EXAMPLE) == sorted(EXAMPLE)


def test_does_not_modify_input():
    data = [3, 1, 2]
    merge_sort(data)
    assert data == [3, 1, 2]


def test_trivial_inputs():
    assert merge_sort([]) == []
    assert merge_sort([5]) == [5]


@given(st.lists(st.integers()))
def test_matches_builtin_sort(values):
    assert merge_sort(values) == sorted(values)


@given(st.lists(st.integers(0, 5)), st.lists(st.integers(0, 5)))
def test_merge_of_sorted_is_sorted(a, b):
    assert merge(sorted(a), sorted(b)) == sorted(a + b)


def test_main_default(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Original array (representing a chunk of data):"
    assert out[1] == "70 50 30 10 20 40 60 "
    assert out[3] == "Sorted array (representing the sorted chunk):"
    assert out[4] == "".join(f"{v} " for v in sorted(EXAMPLE))


def test_main_with_values(capsys):
    assert main(["3", "1", "2"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[-1] == "1 2 3 "