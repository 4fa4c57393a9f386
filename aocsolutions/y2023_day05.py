"""Seed almanac: follow seeds through a chain of range mappings."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path

from aocsolutions.runner import Mode

CATEGORIES = (
    "seed-to-soil",
    "soil-to-fertilizer",
    "fertilizer-to-water",
    "water-to-light",
    "light-to-temperature",
    "temperature-to-humidity",
    "humidity-to-location",
)

Entry = tuple[int, int, int]
Almanac = Mapping[str, Sequence[Entry]]


def parse_seeds(text: str) -> list[int]:
    """The numbers on the first line of the seed file."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("no lines in seed data")
    return [int(number) for number in lines[0].split()]


def parse_mapping(text: str) -> list[Entry]:
    """Read ``destination source length`` triples, one per line."""
    entries = []
    for line in text.splitlines():
        numbers = [int(number) for number in line.split()]
        if len(numbers) < 3:
            raise ValueError(f"expected three numbers in {line!r}")
        destination, source, length = numbers[:3]
        entries.append((destination, source, length))
    return entries


def load_almanac(data_dir: str | Path, prefix: str) -> tuple[list[int], dict[str, list[Entry]]]:
    """Read ``<prefix>_seeds.txt`` and one ``<prefix>_<category>.txt`` per category."""
    directory = Path(data_dir)
    seeds = parse_seeds((directory / f"{prefix}_seeds.txt").read_text())
    almanac = {
        category: parse_mapping((directory / f"{prefix}_{category}.txt").read_text())
        for category in CATEGORIES
    }
    return seeds, almanac


def _entries(almanac: Almanac, category: str) -> Sequence[Entry]:
    try:
        return almanac[category]
    except KeyError:
        raise KeyError(f"category not found in almanac: {category}") from None


def find_location(seed: int, almanac: Almanac) -> int:
    """Map a seed through every category; the first matching range wins."""
    value = seed
    for category in CATEGORIES:
        for destination, source, length in _entries(almanac, category):
            if source <= value < source + length:
                value = destination + value - source
                break
    return value


def solve_part_1(seeds: Iterable[int], almanac: Almanac) -> int:
    """Lowest location of any single seed."""
    locations = [find_location(seed, almanac) for seed in seeds]
    if not locations:
        raise ValueError("no seeds to locate")
    return min(locations)


def _map_intervals(
    intervals: Iterable[tuple[int, int]], entries: Sequence[Entry]
) -> list[tuple[int, int]]:
    """Map half-open intervals through one category, first matching range winning."""
    mapped: list[tuple[int, int]] = []
    pending = list(intervals)
    for destination, source, length in entries:
        source_end = source + length
        remaining = []
        for start, end in pending:
            low, high = max(start, source), min(end, source_end)
            if low < high:
                mapped.append((low - source + destination, high - source + destination))
                if start < low:
                    remaining.append((start, low))
                if high < end:
                    remaining.append((high, end))
            else:
                remaining.append((start, end))
        pending = remaining
    return mapped + pending


def solve_part_2(seeds: Sequence[int], almanac: Almanac) -> int:
    """Lowest location of any seed in the ``(start, length)`` pairs of ``seeds``."""
    if len(seeds) % 2:
        raise ValueError("seed ranges must come in pairs")
    intervals = [
        (start, start + length)
        for start, length in zip(seeds[::2], seeds[1::2])
        if length > 0
    ]
    for category in CATEGORIES:
        intervals = _map_intervals(intervals, _entries(almanac, category))
    if not intervals:
        raise ValueError("no seeds to locate")
    return min(start for start, _ in intervals)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Find the lowest seed location.")
    parser.add_argument("data_dir", nargs="?", default="data")
    args = parser.parse_args(argv)
    for mode in (Mode.TEST, Mode.REAL):
        print(f"Mode: {mode.name}")
        seeds, almanac = load_almanac(args.data_dir, mode.value)
        print(f"Part 1 - Solution: {solve_part_1(seeds, almanac)}")
        print(f"Part 2 - Solution: {solve_part_2(seeds, almanac)}")