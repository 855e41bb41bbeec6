"""Top-down merge sort."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from typing import Any

_END = object()


def merge(left: Iterable[Any], right: Iterable[Any]) -> list[Any]:
    """Merge two ascending iterables into one ascending list, left first on ties."""
    left_iter, right_iter = iter(left), iter(right)
    merged: list[Any] = []
    a = next(left_iter, _END)
    b = next(right_iter, _END)
    while a is not _END and b is not _END:
        if a <= b:
            merged.append(a)
            a = next(left_iter, _END)
        else:
            merged.append(b)
            b = next(right_iter, _END)
    if a is not _END:
        merged.append(a)
        merged.extend(left_iter)
    if b is not _END:
        merged.append(b)
        merged.extend(right_iter)
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new list holding ``values`` in stable ascending order."""
    items = list(values)
    if len(items) <= 1:
        return items
    split = (len(items) + 1) // 2
    return merge(merge_sort(items[:split]), merge_sort(items[split:]))


EXAMPLE = (70, 50, 30, 10, 20, 40, 60)


def _line(values: Iterable[int]) -> str:
    return "".join(f"{v} " for v in values)


def main(argv: Sequence[str] | None = None) -> int:
    """Sort the given integers, or the example chunk, and print both arrays."""
    parser = argparse.ArgumentParser(description="Merge sort a list of integers.")
    parser.add_argument("values", nargs="*", type=int, help="integers to sort")
    args = parser.parse_args(argv)
    data = args.values or list(EXAMPLE)

    print("Original array (representing a chunk of data):")
    print(_line(data))
    print()
    print("Sorted array (representing the sorted chunk):")
    print(_line(merge_sort(data)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())