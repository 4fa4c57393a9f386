"""Rope bridge: follow a rope's knots and count the tail's positions."""

from __future__ import annotations

import argparse
from pathlib import Path

Position = tuple[int, int]

_STEPS = {"L": (-1, 0), "R": (1, 0), "U": (0, 1), "D": (0, -1)}


def is_diagonal(position1: Position, position2: Position) -> bool:
    """Tell whether two positions are at most one step apart on each axis."""
    return abs(position1[0] - position2[0]) <= 1 and abs(position1[1] - position2[1]) <= 1


def is_adjacent(position1: Position, position2: Position) -> bool:
    """Tell whether two knots touch, overlapping ones included."""
    return position1 == position2 or is_diagonal(position1, position2)


def move_position(position: Position, direction: str) -> Position:
    """The position one step from ``position`` in direction L, R, U or D."""
    try:
        dx, dy = _STEPS[direction]
    except KeyError:
        raise ValueError(f"illegal move: {direction!r}") from None
    return position[0] + dx, position[1] + dy


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def follow(leader: Position, follower: Position) -> Position:
    """Where ``follower`` goes so it touches ``leader`` again."""
    if is_adjacent(leader, follower):
        return follower
    return (
        follower[0] + _sign(leader[0] - follower[0]),
        follower[1] + _sign(leader[1] - follower[1]),
    )


def simulate_rope(text: str, knots: int) -> int:
    """Count the distinct positions the tail reaches after each step."""
    if knots < 2:
        raise ValueError("a rope needs at least two knots")
    rope: list[Position] = [(0, 0)] * knots
    visited: set[Position] = set()
    for line in text.splitlines():
        parts = line.split()
        direction, steps = parts[0], int(parts[1])
        for _ in range(steps):
            moved = [move_position(rope[0], direction)]
            for knot in rope[1:]:
                moved.append(follow(moved[-1], knot))
            rope = moved
            visited.add(rope[-1])
    return len(visited)


def solve_part_1(text: str) -> int:
    """Tail positions of a rope with a head and one tail knot."""
    return simulate_rope(text, 2)


def solve_part_2(text: str) -> int:
    """Tail positions of a rope with ten knots."""
    return simulate_rope(text, 10)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Simulate a rope's knots.")
    parser.add_argument("path", nargs="?", default="data/input.txt")
    args = parser.parse_args(argv)
    text = Path(args.path).read_text()
    print(f"Part 1 - Solution: {solve_part_1(text)}")
    print(f"Part 2 - Solution: {solve_part_2(text)}")