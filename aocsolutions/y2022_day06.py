"""Tuning trouble: find the first run of distinct characters in a signal."""

from __future__ import annotations

import argparse
from pathlib import Path

PACKET_WINDOW = 4
MESSAGE_WINDOW = 14


def find_marker(line: str, window: int) -> int | None:
    """Index of the first character preceded by ``window`` distinct characters.

    The window ending at the very end of the line is never examined, so a
    line whose only distinct run is its tail has no marker.
    """
    if window < 1:
        raise ValueError("window must be at least 1")
    for index in range(window, len(line)):
        if len(set(line[index - window:index])) == window:
            return index
    return None


def solve(text: str, window: int) -> list[int | None]:
    """The marker of every line in ``text``, None where a line has none."""
    return [find_marker(line, window) for line in text.splitlines()]


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Find start-of-packet and message markers.")
    parser.add_argument("path", nargs="?", default="data/input.txt")
    args = parser.parse_args(argv)
    text = Path(args.path).read_text()
    for window in (PACKET_WINDOW, MESSAGE_WINDOW):
        for marker in solve(text, window):
            if marker is not None:
                print(f"Solution (with {window}): {marker}")