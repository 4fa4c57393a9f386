"""Run a pair of puzzle solvers over the test and real input files."""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterable
from pathlib import Path


class Mode(enum.Enum):
    """Which input file to solve; the value is the file's stem."""

    TEST = "test"
    REAL = "input"


def data_path(mode: Mode, data_dir: str | Path = "data") -> Path:
    """Path of the input file for ``mode`` inside ``data_dir``."""
    return Path(data_dir) / f"{mode.value}.txt"


def run(
    solve_part_1: Callable[[str], object],
    solve_part_2: Callable[[str], object],
    data_dir: str | Path = "data",
    modes: Iterable[Mode] = (Mode.TEST, Mode.REAL),
) -> list[tuple[Mode, object, object]]:
    """Solve both parts for every mode, print the answers and return them."""
    results = []
    for mode in modes:
        text = data_path(mode, data_dir).read_text()
        print(f"Mode: {mode.name}")
        part_1 = solve_part_1(text)
        print(f"Part 1 - Solution: {part_1}")
        part_2 = solve_part_2(text)
        print(f"Part 2 - Solution: {part_2}")
        results.append((mode, part_1, part_2))
    return results