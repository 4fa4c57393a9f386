"""Scratchcards: points for winning numbers and cards won as copies."""

from __future__ import annotations

import argparse
from collections.abc import Iterable

from aocsolutions.runner import run


def parse_line(line: str) -> tuple[list[int], list[int]]:
    """Read ``Card 1: 41 48 | 83 86`` into the winning numbers and the numbers held."""
    _, sep, body = line.partition(":")
    if not sep:
        raise ValueError(f"no colon in line: {line!r}")
    lists = body.split("|")
    if len(lists) < 2:
        raise ValueError(f"no '|' in line: {line!r}")
    winning, numbers = ([int(number) for number in part.split()] for part in lists[:2])
    return winning, numbers


def count_winning_numbers(winning_numbers: Iterable[int], numbers: Iterable[int]) -> int:
    """How many of the winning numbers appear among the numbers held."""
    held = set(numbers)
    return sum(1 for number in winning_numbers if number in held)


def _matches(text: str) -> list[int]:
    return [count_winning_numbers(*parse_line(line)) for line in text.splitlines()]


def solve_part_1(text: str) -> int:
    """Sum the card points: 1 for the first match, doubled for each further one."""
    return sum(2 ** (count - 1) for count in _matches(text) if count > 0)


def solve_part_2(text: str) -> int:
    """Total number of cards once every won copy has been counted."""
    cards: dict[int, int] = {}
    for index, count in enumerate(_matches(text)):
        copies = cards.setdefault(index, 1)
        for offset in range(1, count + 1):
            cards[index + offset] = cards.get(index + offset, 1) + copies
    return sum(cards.values())


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Score scratchcards.")
    parser.add_argument("data_dir", nargs="?", default="data")
    args = parser.parse_args(argv)
    run(solve_part_1, solve_part_2, args.data_dir)