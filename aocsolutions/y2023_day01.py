"""Trebuchet calibration: first and last digits of each line."""

from __future__ import annotations

import argparse
from pathlib import Path

_DIGITS = "0123456789"
_WORDS = ("one", "two", "three", "four", "five", "six", "seven", "eight", "nine")


def _first_digit(text: str) -> int | None:
    return next((int(char) for char in text if char in _DIGITS), None)


def replace_numbers(line: str) -> str:
    """Insert the digit into every spelled-out number, keeping overlapping words."""
    for value, word in enumerate(_WORDS, start=1):
        line = line.replace(word, f"{word}{value}{word}")
    return line


def _calibration(line: str) -> int:
    first = _first_digit(line)
    if first is None:
        return 0
    last = _first_digit(line[::-1])
    return first * 10 + last


def solve_part_1(text: str) -> int:
    """Sum of the two-digit values made of each line's first and last digit."""
    return sum(_calibration(line) for line in text.splitlines())


def solve_part_2(text: str) -> int:
    """As part 1, with spelled-out numbers counting as digits."""
    return sum(_calibration(replace_numbers(line)) for line in text.splitlines())


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Sum calibration values.")
    parser.add_argument("path", nargs="?", default="data/input.txt")
    parser.add_argument("--second", help="input for part 2; defaults to PATH")
    args = parser.parse_args(argv)
    first_text = Path(args.path).read_text()
    second_text = Path(args.second).read_text() if args.second else first_text
    print(f"Part 1 - Solution: {solve_part_1(first_text)}")
    print(f"Part 2 - Solution: {solve_part_2(second_text)}")