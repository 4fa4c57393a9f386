"""Gear ratios: part numbers next to symbols in an engine schematic."""

from __future__ import annotations

import argparse
import re
from collections import defaultdict
from collections.abc import Iterator, Sequence

from aocsolutions.matrix import has_adjacent, to_grid
from aocsolutions.runner import run

_NUMBER = re.compile(r"[0-9]+")
_DIGITS = frozenset("0123456789")


def _numbers(text: str) -> Iterator[tuple[int, int, str]]:
    """Yield ``(row, start column, digits)`` for every number in the schematic."""
    for row_index, line in enumerate(text.splitlines()):
        for match in _NUMBER.finditer(line):
            yield row_index, match.start(), match.group()


def _neighbours(height: int, width: int, row: int, column: int) -> Iterator[tuple[int, int]]:
    for r in range(max(row - 1, 0), min(row + 1, height - 1) + 1):
        for c in range(max(column - 1, 0), min(column + 1, width - 1) + 1):
            if (r, c) != (row, column):
                yield r, c


def solve_part_1(text: str) -> int:
    """Sum the numbers that touch a symbol, diagonals included."""
    symbols = [[not (char in _DIGITS or char == ".") for char in row] for row in to_grid(text)]
    return sum(
        int(number)
        for row, start, number in _numbers(text)
        if any(has_adjacent(symbols, row, column) for column in range(start, start + len(number)))
    )


def _first_gear(
    gears: Sequence[Sequence[bool]], row: int, start: int, length: int
) -> tuple[int, int] | None:
    height, width = len(gears), len(gears[0])
    for column in range(start, start + length):
        for r, c in _neighbours(height, width, row, column):
            if gears[r][c]:
                return r, c
    return None


def solve_part_2(text: str) -> int:
    """Sum the products of number pairs that share exactly one ``*``.

    Each number is attached to the first ``*`` found next to it.
    """
    gears = [[char == "*" for char in row] for row in to_grid(text)]
    parts: dict[tuple[int, int], list[int]] = defaultdict(list)
    for row, start, number in _numbers(text):
        gear = _first_gear(gears, row, start, len(number))
        if gear is not None:
            parts[gear].append(int(number))
    return sum(first * second for first, second in (p for p in parts.values() if len(p) == 2))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Sum engine part numbers.")
    parser.add_argument("data_dir", nargs="?", default="data")
    args = parser.parse_args(argv)
    run(solve_part_1, solve_part_2, args.data_dir)