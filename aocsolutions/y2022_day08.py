"""Treetop tree house: visible trees and scenic scores in a height grid."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path


def parse_data(text: str) -> list[list[int]]:
    """Read a grid of single-digit tree heights."""
    return [[int(char) for char in line] for line in text.splitlines()]


def _check_grid(grid: Sequence[Sequence[int]], min_rows: int) -> None:
    if len(grid) < min_rows or not grid[0]:
        raise ValueError(f"grid needs at least {min_rows} rows and one column")
    if any(len(row) != len(grid[0]) for row in grid):
        raise ValueError("grid rows differ in length")


def _visible_along_rows(rows: Sequence[Sequence[int]], reverse: bool) -> set[tuple[int, int]]:
    """Interior trees taller than every tree between them and one row edge."""
    visible = set()
    for row_index, row in enumerate(rows[1:-1], start=1):
        interior = list(enumerate(row[1:-1], start=1))
        if reverse:
            interior.reverse()
            highest = row[-1]
        else:
            highest = row[0]
        for column_index, height in interior:
            if height > highest:
                highest = height
                visible.add((row_index, column_index))
    return visible


def solve_part_1(grid: Sequence[Sequence[int]]) -> int:
    """Count the trees visible from outside the grid."""
    _check_grid(grid, 2)
    height, width = len(grid), len(grid[0])
    columns = [list(column) for column in zip(*grid)]
    visible = _visible_along_rows(grid, False) | _visible_along_rows(grid, True)
    for reverse in (False, True):
        visible |= {(r, c) for c, r in _visible_along_rows(columns, reverse)}
    return width * 2 + (height - 2) * 2 + len(visible)


def viewing_distance(row: Sequence[int], index: int, increase: bool) -> int:
    """Trees seen from ``row[index]`` towards the end or the start of the row."""
    height = row[index]
    trees = row[index + 1:] if increase else reversed(row[:index])
    distance = 0
    for tree in trees:
        distance += 1
        if tree >= height:
            break
    return distance


def solve_part_2(grid: Sequence[Sequence[int]]) -> int:
    """Highest scenic score of any tree in the grid."""
    _check_grid(grid, 1)
    columns = [list(column) for column in zip(*grid)]
    return max(
        (
            viewing_distance(row, c, False)
            * viewing_distance(row, c, True)
            * viewing_distance(columns[c], r, False)
            * viewing_distance(columns[c], r, True)
            for r, row in enumerate(grid)
            for c in range(len(row))
        ),
        default=0,
    )


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Survey the tree grid.")
    parser.add_argument("path", nargs="?", default="data/input.txt")
    args = parser.parse_args(argv)
    grid = parse_data(Path(args.path).read_text())
    print(f"Part 1 - Solution: {solve_part_1(grid)}")
    print(f"Part 2 - Solution: {solve_part_2(grid)}")