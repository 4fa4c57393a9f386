"""Camp cleanup: containing and overlapping section assignments."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Section:
    """An inclusive range of section ids."""

    start: int
    end: int

    @classmethod
    def parse(cls, text: str) -> Section:
        start, end = text.split("-")
        return cls(int(start), int(end))

    def contains(self, other: Section) -> bool:
        """Tell whether this section fully covers ``other``."""
        return self.start <= other.start and self.end >= other.end

    def overlaps(self, other: Section) -> bool:
        """Tell whether an endpoint of either section lies in the other."""
        return (
            other.start <= self.start <= other.end
            or other.start <= self.end <= other.end
            or self.start <= other.start <= self.end
            or self.start <= other.end <= self.end
        )


def parse_line(line: str) -> tuple[Section, Section]:
    """Parse a line such as ``2-4,6-8`` into two sections."""
    first, second = line.split(",")
    return Section.parse(first), Section.parse(second)


def _pairs(text: str):
    return (parse_line(line) for line in text.splitlines())


def solve_part_1(text: str) -> int:
    """Count pairs where one section contains the other."""
    return sum(1 for a, b in _pairs(text) if a.contains(b) or b.contains(a))


def solve_part_2(text: str) -> int:
    """Count pairs whose sections overlap."""
    return sum(1 for a, b in _pairs(text) if a.overlaps(b))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Count overlapping assignments.")
    parser.add_argument("path", nargs="?", default="data/input.txt")
    args = parser.parse_args(argv)
    text = Path(args.path).read_text()
    print(f"Part 1 - Overlaps: {solve_part_1(text)}")
    print(f"Part 2 - Overlaps: {solve_part_2(text)}")