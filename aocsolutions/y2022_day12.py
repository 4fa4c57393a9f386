"""Hill climbing: shortest routes over a height map, searched from the goal."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from pathlib import Path

Position = tuple[int, int]
Step = tuple[int, int, str]


def parse_data(text: str) -> tuple[list[list[str]], Position, Position]:
    """Read the height map and the positions of ``S`` and ``E``."""
    grid: list[list[str]] = []
    start: Position = (0, 0)
    end: Position = (0, 0)
    for row_index, line in enumerate(text.splitlines()):
        for column_index, char in enumerate(line):
            if char == "S":
                start = (row_index, column_index)
            elif char == "E":
                end = (row_index, column_index)
        grid.append(list(line))
    return grid, start, end


def _valid_neighbours(grid: Sequence[Sequence[str]], step: Step) -> Iterable[Step]:
    """Neighbours one may have come from, walking backwards from the goal."""
    row, column, char = step
    current = ord("z" if char == "E" else char)
    for r, c in ((row, column - 1), (row, column + 1), (row - 1, column), (row + 1, column)):
        if 0 <= r < len(grid) and 0 <= c < len(grid[0]):
            neighbour = grid[r][c]
            destination = ord("a" if neighbour == "S" else neighbour)
            if destination - current >= -1:
                yield r, c, neighbour


def find_path(
    grid: Sequence[Sequence[str]],
    start_position: Position,
    start_char: str,
    end_char: str,
) -> list[Step]:
    """Shortest path from ``start_position`` to any cell holding ``end_char``.

    Returns the steps including both ends, or an empty list when no path exists.
    """
    first: Step = (start_position[0], start_position[1], start_char)
    paths: list[list[Step]] = [[first]]
    visited = {first}
    while paths:
        extended: list[list[Step]] = []
        for path in paths:
            for step in _valid_neighbours(grid, path[-1]):
                if step in visited:
                    continue
                visited.add(step)
                new_path = [*path, step]
                if step[2] == end_char:
                    return new_path
                extended.append(new_path)
        paths = extended
    return []


def visualize(grid: Sequence[Sequence[str]], path: Iterable[Sequence]) -> str:
    """Draw the grid with only the cells on ``path`` shown, others as ``.``."""
    on_path = {(step[0], step[1]) for step in path}
    width = len(grid[0]) if grid else 0
    return "\n".join(
        "".join(
            grid[r][c] if (r, c) in on_path else "."
            for c in range(width)
        )
        for r in range(len(grid))
    )


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Find the shortest climb.")
    parser.add_argument("path", nargs="?", default="data/input.txt")
    args = parser.parse_args(argv)
    grid, start, end = parse_data(Path(args.path).read_text())
    print(f"Start: {start}")
    print(f"End: {end}")
    for part, target in ((1, "S"), (2, "a")):
        path = find_path(grid, end, "E", target)
        if not path:
            print("WARNING: Impossible to find path from start to finish!")
            continue
        print(f"Part {part} - Solution: {len(path) - 1}")
        print(visualize(grid, path))