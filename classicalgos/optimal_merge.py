"""Optimal merge pattern: cheapest order for merging sorted files pairwise."""

from __future__ import annotations

import argparse
import heapq
from collections.abc import Iterable, Sequence


def optimal_merge_cost(sizes: Iterable[int]) -> int:
    """Return the total record moves when always merging the two smallest files."""
    heap = list(sizes)
    if not heap:
        raise ValueError("at least one file size is required")
    heapq.heapify(heap)
    total = 0
    while len(heap) > 1:
        merged = heapq.heappop(heap) + heapq.heappop(heap)
        total += merged
        heapq.heappush(heap, merged)
    return total


EXAMPLE_SIZES = (20, 30, 10, 5, 30)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the optimal merge cost for the given file sizes or the example."""
    parser = argparse.ArgumentParser(
        description="Compute the optimal merge pattern cost for file sizes."
    )
    parser.add_argument("sizes", nargs="*", type=int, help="file sizes")
    args = parser.parse_args(argv)
    sizes = args.sizes or list(EXAMPLE_SIZES)

    print("File sizes: " + "".join(f"{size} " for size in sizes))
    cost = optimal_merge_cost(sizes)
    print(
        "Minimum number of record moves (comparisons) for optimal merge pattern "
        f"is {cost}"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())