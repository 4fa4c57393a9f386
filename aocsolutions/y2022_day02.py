"""Rock paper scissors strategy guide scoring."""

from __future__ import annotations

import argparse
from pathlib import Path

# A/B/C: opponent plays rock/paper/scissors. Shapes score 1/2/3; loss 0, draw 3, win 6.
# Part 1: X/Y/Z is the shape to play.
_PART_1 = {
    "A X": 1 + 3,
    "A Y": 2 + 6,
    "A Z": 3 + 0,
    "B X": 1 + 0,
    "B Y": 2 + 3,
    "B Z": 3 + 6,
    "C X": 1 + 6,
    "C Y": 2 + 0,
    "C Z": 3 + 3,
}

# Part 2: X/Y/Z is the outcome to reach (lose/draw/win).
_PART_2 = {
    "A X": 3 + 0,
    "A Y": 1 + 3,
    "A Z": 2 + 6,
    "B X": 1 + 0,
    "B Y": 2 + 3,
    "B Z": 3 + 6,
    "C X": 2 + 0,
    "C Y": 3 + 3,
    "C Z": 1 + 6,
}

_SCORES = {1: _PART_1, 2: _PART_2}


def total_score(text: str, part: int = 2) -> int:
    """Total score of every round in ``text`` under the rules of ``part``."""
    try:
        scores = _SCORES[part]
    except KeyError:
        raise ValueError(f"invalid part: {part}") from None
    return sum(scores[line] for line in text.splitlines())


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Score a strategy guide.")
    parser.add_argument("path", nargs="?", default="data/input.txt")
    parser.add_argument("--part", type=int, default=2)
    args = parser.parse_args(argv)
    text = Path(args.path).read_text()
    print(f"Total score: {total_score(text, args.part)}")