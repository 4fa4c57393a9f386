"""Regolith reservoir: sand pouring into a cave of rock paths."""

from __future__ import annotations

import argparse
import math
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Point:
    """A position in the cave; ``y`` grows downwards."""

    x: int
    y: int


START_POINT = Point(500, 0)

AIR = "."
ROCK = "#"
SAND = "o"
SOURCE = "+"


def _parse_point(text: str) -> Point:
    x, y = text.split(",")
    return Point(int(x), int(y))


def parse_input(text: str) -> list[list[Point]]:
    """Read one rock path per line, such as ``498,4 -> 498,6 -> 496,6``."""
    return [
        [_parse_point(part) for part in line.split(" -> ")]
        for line in text.splitlines()
    ]


def find_grid_dimensions(
    paths: Sequence[Sequence[Point]], start_point: Point
) -> tuple[int, int, int, int]:
    """Bounds ``(min_x, max_x, min_y, max_y)`` of all points and the start.

    The maxima are never below zero.
    """
    points = [point for path in paths for point in path]
    points.append(start_point)
    return (
        min(point.x for point in points),
        max(0, max(point.x for point in points)),
        min(point.y for point in points),
        max(0, max(point.y for point in points)),
    )


def create_grid(
    start_point: Point,
    min_x: int,
    max_x: int,
    min_y: int,
    max_y: int,
    paths: Sequence[Sequence[Point]],
) -> list[list[str]]:
    """Grid of air with the sand source and the rock paths drawn in.

    Only horizontal and vertical segments are drawn.
    """
    width = max_x - min_x + 1
    height = max_y - min_y + 1
    if width <= 0 or height <= 0:
        raise ValueError("grid bounds are empty")
    grid = [[AIR] * width for _ in range(height)]

    def mark(x: int, y: int, char: str) -> None:
        column, row = x - min_x, y - min_y
        if not (0 <= column < width and 0 <= row < height):
            raise ValueError(f"point ({x}, {y}) lies outside the grid")
        grid[row][column] = char

    mark(start_point.x, start_point.y, SOURCE)
    for path in paths:
        if path:
            mark(path[0].x, path[0].y, ROCK)
        for previous, point in zip(path, path[1:]):
            if previous.x == point.x and previous.y != point.y:
                for y in range(min(previous.y, point.y), max(previous.y, point.y) + 1):
                    mark(point.x, y, ROCK)
            elif previous.y == point.y and previous.x != point.x:
                for x in range(min(previous.x, point.x), max(previous.x, point.x) + 1):
                    mark(x, point.y, ROCK)
    return grid


def simulate(
    grid: list[list[str]], start_point: Point, min_x: int, min_y: int, part: int
) -> int:
    """Pour sand into ``grid`` (changed in place) and count the grains.

    Part 1 stops when a grain would leave the grid and counts the grains at
    rest; part 2 stops when the source is blocked, counting the blocking grain.
    """
    if part not in (1, 2):
        raise ValueError(f"invalid part: {part}")
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")
    height, width = len(grid), len(grid[0])
    source_x, source_y = start_point.x - min_x, start_point.y - min_y
    if not (0 <= source_x < width and 0 <= source_y < height):
        raise ValueError("start point lies outside the grid")

    settled = 0
    while True:
        x, y = source_x, source_y
        while True:
            below = y + 1 < height
            if below and grid[y + 1][x] == AIR:
                y += 1
            elif below and x > 0 and grid[y + 1][x - 1] == AIR:
                y += 1
                x -= 1
            elif below and x + 1 < width and grid[y + 1][x + 1] == AIR:
                y += 1
                x += 1
            elif part == 1 and (x == 0 or x == width - 1 or y == height - 1):
                return settled
            elif part == 2 and grid[y][x] == SOURCE:
                return settled + 1
            elif grid[y][x] == AIR:
                grid[y][x] = SAND
                break
            else:
                raise RuntimeError(f"sand cannot come to rest at ({x}, {y})")
        settled += 1


def _render(grid: Sequence[Sequence[str]], min_x: int) -> str:
    header = "    " + "".join(
        str(int(math.fmod(column + min_x, 10))) for column in range(len(grid[0]))
    )
    rows = [f"{index:03} " + "".join(row) for index, row in enumerate(grid)]
    return "\n".join([header, *rows])


def _part_1_grid(text: str) -> tuple[list[list[str]], int, int]:
    paths = parse_input(text)
    min_x, max_x, min_y, max_y = find_grid_dimensions(paths, START_POINT)
    return create_grid(START_POINT, min_x, max_x, min_y, max_y, paths), min_x, min_y


def solve_part_1(text: str) -> int:
    """Grains of sand at rest before sand starts falling into the abyss."""
    grid, min_x, min_y = _part_1_grid(text)
    return simulate(grid, START_POINT, min_x, min_y, 1)


def solve_part_2(text: str) -> int:
    """Grains of sand until the source is blocked, with a floor below the cave."""
    paths = parse_input(text)
    min_x, max_x, min_y, max_y = find_grid_dimensions(paths, START_POINT)
    # A wide grid stands in for the infinite floor.
    enlarged_min_x = min_x - max_x * 4
    enlarged_max_x = max_x + max_x * 4
    floor = max_y + 2
    grid = create_grid(START_POINT, enlarged_min_x, enlarged_max_x, min_y, floor, paths)
    grid[-1] = [ROCK] * len(grid[-1])
    return simulate(grid, START_POINT, enlarged_min_x, min_y, 2)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Pour sand into the cave.")
    parser.add_argument("path", nargs="?", default="data/input.txt")
    args = parser.parse_args(argv)
    text = Path(args.path).read_text()
    grid, min_x, min_y = _part_1_grid(text)
    part_1 = simulate(grid, START_POINT, min_x, min_y, 1)
    print(_render(grid, min_x))
    print(f"Part 1 - Solution: {part_1}")
    print(f"Part 2 - Solution: {solve_part_2(text)}")