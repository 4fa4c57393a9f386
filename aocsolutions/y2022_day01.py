"""Calorie counting: sum of the largest elf totals."""

from __future__ import annotations

import argparse
import heapq
from pathlib import Path

MAX_ELVES = 3


def _closed_totals(text: str):
    """Yield each group's total; a group counts once a blank line closes it."""
    total = 0
    for line in text.splitlines():
        if line == "":
            yield total
            total = 0
        else:
            total += int(line)


def sum_of_top(text: str, count: int = MAX_ELVES) -> int:
    """Sum the ``count`` largest group totals, padding with zeros."""
    return sum(heapq.nlargest(count, _closed_totals(text)))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Sum the largest calorie totals.")
    parser.add_argument("path", nargs="?", default="data/input.txt")
    parser.add_argument("--top", type=int, default=MAX_ELVES)
    args = parser.parse_args(argv)
    text = Path(args.path).read_text()
    print(f"Max: {sum_of_top(text, args.top)}")