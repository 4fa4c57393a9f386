"""Wait for it: ways to beat the boat race records."""

from __future__ import annotations

import argparse
import math

from aocsolutions.arith import is_integer, solve_quadratic
from aocsolutions.runner import run
from aocsolutions.strings import remove_whitespace


def race_options(time: int, distance: int) -> int:
    """Number of whole button-hold times that travel further than ``distance``."""
    roots = solve_quadratic(-1.0, float(time), -float(distance))
    if roots is None:
        raise ValueError(f"no way to reach {distance} in time {time}")
    low, high = roots
    if is_integer(low):
        low += 1.0
    if is_integer(high):
        high -= 1.0
    first = max(0, math.ceil(low))
    last = max(0, math.floor(high))
    count = last - first + 1
    if count < 0:
        raise ValueError(f"no way to beat {distance} in time {time}")
    return count


def _two_values(text: str) -> list[str]:
    """The text after the colon on the first two lines."""
    lines = text.splitlines()
    values = []
    for line in lines[:2]:
        _, sep, rest = line.partition(":")
        if not sep:
            raise ValueError(f"no colon in line: {line!r}")
        values.append(rest)
    if len(values) < 2:
        raise ValueError("expected a line of times and a line of distances")
    return values


def parse_races(text: str) -> tuple[list[int], list[int]]:
    """Read the times and record distances of several races."""
    times, distances = ([int(number) for number in value.split()] for value in _two_values(text))
    return times, distances


def parse_single_race(text: str) -> tuple[int, int]:
    """Read one race, ignoring the spaces between digits."""
    time, distance = (int(remove_whitespace(value)) for value in _two_values(text))
    return time, distance


def solve_part_1(text: str) -> int:
    """Product of the ways to win each race."""
    times, distances = parse_races(text)
    return math.prod(race_options(time, distance) for time, distance in zip(times, distances))


def solve_part_2(text: str) -> int:
    """Ways to win the single long race."""
    return race_options(*parse_single_race(text))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Count ways to win boat races.")
    parser.add_argument("data_dir", nargs="?", default="data")
    args = parser.parse_args(argv)
    run(solve_part_1, solve_part_2, args.data_dir)