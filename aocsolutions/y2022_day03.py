"""Rucksack reorganisation: priorities of shared items."""

from __future__ import annotations

import argparse
import string
from pathlib import Path

_PRIORITIES = {char: index for index, char in enumerate(string.ascii_letters, start=1)}


def priority(char: str) -> int:
    """Priority of an item: a-z are 1-26, A-Z are 27-52."""
    return _PRIORITIES[char]


def solve_part_1(text: str) -> int:
    """Sum the priorities of items found in both halves of each line."""
    total = 0
    for line in text.splitlines():
        half = len(line) // 2
        first, second = line[:half], line[half:]
        total += sum(priority(char) for char in set(first) if char in second)
    return total


def solve_part_2(text: str) -> int:
    """Sum the priorities of items shared by each group of three lines."""
    lines = iter(text.splitlines())
    total = 0
    for first, second, third in zip(lines, lines, lines):
        total += sum(priority(char) for char in set(first) if char in second and char in third)
    return total


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Sum rucksack priorities.")
    parser.add_argument("path", nargs="?", default="data/input.txt")
    args = parser.parse_args(argv)
    text = Path(args.path).read_text()
    print(f"Part 1 - Priorities: {solve_part_1(text)}")
    print(f"Part 2 - Priorities: {solve_part_2(text)}")