"""Binary search over a sorted index of product IDs."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

PRODUCT_IDS: tuple[int, ...] = (101, 205, 312, 450, 567, 601, 720, 899, 945, 1024)


def binary_search(ids: Sequence[int], target: int) -> int | None:
    """Return the index of ``target`` in the ascending sequence ``ids``, or None."""
    low, high = 0, len(ids) - 1
    while low <= high:
        mid = low + (high - low) // 2
        value = ids[mid]
        if value == target:
            return mid
        if target < value:
            high = mid - 1
        else:
            low = mid + 1
    return None


def main(argv: Sequence[str] | None = None) -> int:
    """Look up a product ID given on the command line or read from standard input."""
    parser = argparse.ArgumentParser(
        description="Search the sorted product index for a product ID."
    )
    parser.add_argument(
        "target", nargs="?", help="product ID to look up; prompted for when omitted"
    )
    args = parser.parse_args(argv)

    print("Available Product IDs: " + "".join(f"{pid} " for pid in PRODUCT_IDS))
    print()
    if args.target is None:
        try:
            raw = input("Enter the Product ID to search for: ")
        except EOFError:
            print("error: no product ID given", file=sys.stderr)
            return 1
    else:
        raw = args.target

    try:
        target = int(raw.strip())
    except ValueError:
        print(f"error: not a product ID: {raw!r}", file=sys.stderr)
        return 1

    index = binary_search(PRODUCT_IDS, target)
    print()
    print("Output:")
    if index is not None:
        print(
            f"Product ID {target} found at index {index} (database record {index + 1})."
        )
    else:
        print(f"Product ID {target} not found in the inventory.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())