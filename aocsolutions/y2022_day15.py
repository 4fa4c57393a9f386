"""Beacon exclusion zone: sensor coverage and the hidden distress beacon."""

from __future__ import annotations

import argparse
import re
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

TUNING_MULTIPLIER = 4_000_000
SOLUTION_ROW = 2_000_000
SOLUTION_SPACE_SIZE = 4_000_000

_NUMBER = re.compile(r"-?\d+")


@dataclass(frozen=True)
class Point:
    """A grid position."""

    x: int
    y: int


def _parse_line(line: str) -> tuple[Point, Point]:
    numbers = [int(value) for value in _NUMBER.findall(line)]
    if len(numbers) != 4:
        raise ValueError(f"expected four coordinates in {line!r}")
    sensor_x, sensor_y, beacon_x, beacon_y = numbers
    return Point(sensor_x, sensor_y), Point(beacon_x, beacon_y)


def parse_input(text: str) -> list[tuple[Point, Point]]:
    """Read ``(sensor, closest beacon)`` pairs, one per line."""
    return [_parse_line(line) for line in text.splitlines()]


def manhattan_distance(point_1: Point, point_2: Point) -> int:
    """Sum of the absolute differences of the coordinates."""
    return abs(point_1.x - point_2.x) + abs(point_1.y - point_2.y)


def solve_part_1(data: Sequence[tuple[Point, Point]], solution_row: int) -> int:
    """Positions on ``solution_row`` where no beacon can be."""
    intervals = []
    beacons = set()
    for sensor, beacon in data:
        if beacon.y == solution_row:
            beacons.add(beacon.x)
        reach = manhattan_distance(sensor, beacon) - abs(solution_row - sensor.y)
        if reach >= 0:
            intervals.append((sensor.x - reach, sensor.x + reach))

    covered = 0
    current_end = None
    for start, end in sorted(intervals):
        if current_end is None or start > current_end:
            covered += end - start + 1
            current_end = end
        elif end > current_end:
            covered += end - current_end
            current_end = end
    return covered - len(beacons)


def solve_part_2(data: Sequence[tuple[Point, Point]], solution_space_size: int) -> int:
    """Tuning frequency of the one uncovered position, or 0 if none is found.

    Only positions just outside each sensor's range are examined.
    """
    sensors = [
        (sensor.x, sensor.y, manhattan_distance(sensor, beacon)) for sensor, beacon in data
    ]

    def uncovered(x: int, y: int) -> bool:
        return all(abs(sx - x) + abs(sy - y) > reach for sx, sy, reach in sensors)

    for sensor_x, sensor_y, distance in sensors:
        left_x = max(0, sensor_x - distance - 1)
        right_x = min(solution_space_size, sensor_x + distance + 1)
        for x in range(left_x, right_x + 1):
            unused = distance - abs(x - sensor_x)
            for y in (sensor_y + unused + 1, sensor_y - unused - 1):
                if 0 <= y <= solution_space_size and uncovered(x, y):
                    return x * TUNING_MULTIPLIER + y
    return 0


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Locate the distress beacon.")
    parser.add_argument("path", nargs="?", default="data/input.txt")
    parser.add_argument("--row", type=int, default=SOLUTION_ROW)
    parser.add_argument("--size", type=int, default=SOLUTION_SPACE_SIZE)
    args = parser.parse_args(argv)
    data = parse_input(Path(args.path).read_text())
    print(f"Part 1 - Solution: {solve_part_1(data, args.row)}")
    print(f"Part 2 - Solution: {solve_part_2(data, args.size)}")