"""Cube conundrum: which games fit a bag of cubes, and the fewest cubes needed."""

from __future__ import annotations

import argparse
import math
from collections.abc import Iterable

from aocsolutions.runner import run

BAG = {"red": 12, "green": 13, "blue": 14}


def parse_line(line: str) -> list[dict[str, int]]:
    """Read the draws of a game line such as ``Game 1: 3 blue, 4 red; 2 green``."""
    _, sep, draws = line.partition(":")
    if not sep:
        raise ValueError(f"no colon in line: {line!r}")
    result = []
    for part in draws.split(";"):
        draw: dict[str, int] = {}
        for pair in part.split(","):
            number, sep, colour = pair.strip().partition(" ")
            if not sep:
                raise ValueError(f"malformed draw: {pair!r}")
            draw[colour.strip()] = int(number.strip())
        result.append(draw)
    return result


def _possible(draws: Iterable[dict[str, int]]) -> bool:
    for draw in draws:
        for colour, number in draw.items():
            if colour not in BAG:
                raise ValueError(f"unknown colour: {colour!r}")
            if BAG[colour] < number:
                return False
    return True


def solve_part_1(text: str) -> int:
    """Sum the positions (from 1) of the games possible with the bag's cubes."""
    return sum(
        index
        for index, line in enumerate(text.splitlines(), start=1)
        if _possible(parse_line(line))
    )


def _power(draws: Iterable[dict[str, int]]) -> int:
    maxima = dict.fromkeys(BAG, 0)
    for draw in draws:
        for colour, number in draw.items():
            if colour in maxima:
                maxima[colour] = max(maxima[colour], number)
    return math.prod(maxima.values())


def solve_part_2(text: str) -> int:
    """Sum over games of the product of the fewest red, green and blue cubes."""
    return sum(_power(parse_line(line)) for line in text.splitlines())


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Check cube games.")
    parser.add_argument("data_dir", nargs="?", default="data")
    args = parser.parse_args(argv)
    run(solve_part_1, solve_part_2, args.data_dir)