"""No space left on device: directory sizes from a terminal transcript."""

from __future__ import annotations

import argparse
from collections import defaultdict
from pathlib import Path, PurePosixPath

CUTOFF_SIZE = 100_000
DISK_SIZE = 70_000_000
UPDATE_SIZE = 30_000_000

_ROOT = PurePosixPath("/")


def _file_sizes(text: str) -> dict[PurePosixPath, int]:
    """Map the path of every listed file to its size."""
    files: dict[PurePosixPath, int] = {}
    current = PurePosixPath()
    for line in text.splitlines():
        if "$ cd /" in line:
            current = _ROOT
        elif "$ cd .." in line:
            current = current.parent
        elif "$ cd" in line:
            current = current / line.replace("$ cd ", "")
        elif "$ ls" in line or "dir" in line:
            continue
        else:
            size, name = line.split()[:2]
            files[current / name] = int(size)
    return files


def directory_sizes(text: str) -> dict[str, int]:
    """Total size of every directory that holds files, keyed by absolute path."""
    sizes: dict[str, int] = defaultdict(int)
    for path, size in _file_sizes(text).items():
        if not path.is_absolute():
            raise ValueError(f"file {path} lies outside the root directory")
        for parent in path.parents:
            sizes[str(parent)] += size
    return dict(sizes)


def solve_part_1(text: str) -> int:
    """Sum the sizes of directories no larger than the cutoff."""
    return sum(size for size in directory_sizes(text).values() if size <= CUTOFF_SIZE)


def solve_part_2(text: str) -> int:
    """Size of the smallest directory whose removal frees enough for the update."""
    sizes = directory_sizes(text)
    try:
        used = sizes[str(_ROOT)]
    except KeyError:
        raise ValueError("no files found under the root directory") from None
    free = DISK_SIZE - used
    if free < 0:
        raise ValueError("used space exceeds the disk size")
    needed = UPDATE_SIZE - free
    if needed < 0:
        raise ValueError("there is already enough free space for the update")
    return min((size for size in sizes.values() if needed <= size < DISK_SIZE), default=DISK_SIZE)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Find directories to delete.")
    parser.add_argument("path", nargs="?", default="data/input.txt")
    args = parser.parse_args(argv)
    text = Path(args.path).read_text()
    print(f"Part 1 - Solution: {solve_part_1(text)}")
    print(f"Part 2 - Solution: {solve_part_2(text)}")