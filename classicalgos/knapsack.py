"""Greedy solution of the fractional knapsack problem."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Item:
    """An item with a value and a positive weight."""

    value: float
    weight: float
    ratio: float = field(init=False)

    def __post_init__(self) -> None:
        if self.weight <= 0:
            raise ValueError("item weight must be positive")
        object.__setattr__(self, "ratio", self.value / self.weight)


@dataclass(frozen=True)
class LoadStep:
    """One item loaded, numbered by its 1-based position in ratio order."""

    item: int
    weight: float
    value: float
    fraction: float
    full: bool


@dataclass(frozen=True)
class KnapsackResult:
    """The loading plan together with the loaded weight and value."""

    steps: list[LoadStep]
    total_weight: float
    total_value: float


def fractional_knapsack(capacity: float, items: Iterable[Item]) -> KnapsackResult:
    """Load items in descending value-to-weight order, splitting the last one."""
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    ordered = sorted(items, key=lambda item: item.ratio, reverse=True)

    steps: list[LoadStep] = []
    current_weight = 0.0
    total_value = 0.0
    for number, item in enumerate(ordered, start=1):
        if current_weight + item.weight <= capacity:
            current_weight += item.weight
            total_value += item.value
            steps.append(LoadStep(number, item.weight, item.value, 1.0, True))
        else:
            remaining = capacity - current_weight
            fraction = remaining / item.weight
            gained = fraction * item.value
            current_weight += remaining
            total_value += gained
            steps.append(LoadStep(number, remaining, gained, fraction, False))
            break

    return KnapsackResult(steps, current_weight, total_value)


def _render(result: KnapsackResult) -> str:
    lines = ["Loading Plan:"]
    for step in result.steps:
        if step.full:
            lines.append(
                f"  Loaded full Item {step.item} "
                f"(Weight: {step.weight:.2f}, Value: {step.value:.2f})"
            )
        else:
            lines.append(
                f"  Loaded {step.fraction * 100:.2f}% of Item {step.item} "
                f"(Weight: {step.weight:.2f}, Value: {step.value:.2f})"
            )
    lines.append("")
    lines.append(f"Total Weight Loaded: {result.total_weight:.2f}")
    lines.append(f"Maximum Total Value: {result.total_value:.2f}")
    return "\n".join(lines)


EXAMPLE_ITEMS: tuple[Item, ...] = (Item(60, 10), Item(100, 20), Item(120, 30))
EXAMPLE_CAPACITY = 50.0


def main(argv: Sequence[str] | None = None) -> int:
    """Print the loading plan for the example items."""
    parser = argparse.ArgumentParser(
        description="Solve the fractional knapsack problem for the example items."
    )
    parser.add_argument(
        "--capacity", type=float, default=EXAMPLE_CAPACITY, help="knapsack capacity"
    )
    args = parser.parse_args(argv)
    try:
        result = fractional_knapsack(args.capacity, EXAMPLE_ITEMS)
    except ValueError as exc:
        parser.error(str(exc))
    print(_render(result))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())