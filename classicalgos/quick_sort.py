"""In-place quick sort with Lomuto partitioning."""

from __future__ import annotations

import argparse
from collections.abc import MutableSequence, Sequence
from typing import Any


def partition(values: MutableSequence[Any], low: int, high: int) -> int:
    """Partition ``values[low:high + 1]`` around its last element; return its new index."""
    pivot = values[high]
    store = low
    for j in range(low, high):
        if values[j] <= pivot:
            values[store], values[j] = values[j], values[store]
            store += 1
    values[store], values[high] = values[high], values[store]
    return store


def quick_sort(values: MutableSequence[Any]) -> None:
    """Sort ``values`` in place in ascending order."""
    pending = [(0, len(values) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot_index = partition(values, low, high)
            pending.append((low, pivot_index - 1))
            pending.append((pivot_index + 1, high))


EXAMPLE = (10, 7, 8, 9, 1, 5)


def _line(values: Sequence[int]) -> str:
    return "".join(f"{v} " for v in values)


def main(argv: Sequence[str] | None = None) -> int:
    """Sort the given integers, or the example array, and print both arrays."""
    parser = argparse.ArgumentParser(description="Quick sort a list of integers.")
    parser.add_argument("values", nargs="*", type=int, help="integers to sort")
    args = parser.parse_args(argv)
    data = args.values or list(EXAMPLE)

    print("Original array: " + _line(data))
    quick_sort(data)
    print("Sorted array: " + _line(data))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())