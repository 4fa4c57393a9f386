"""Supply stacks: rearranging crates with two kinds of crane."""

from __future__ import annotations

import argparse
from pathlib import Path

from aocsolutions.strings import remove_whitespace

NUMBER_OF_STACKS = 9
CARGO_HEIGHT = 8


def parse_cargo(text: str, number_of_stacks: int, cargo_height: int) -> dict[int, list[str]]:
    """Read the drawing of stacks into lists of crates, bottom first, keyed 1..n."""
    layers = text.splitlines()[:cargo_height]
    stacks: dict[int, list[str]] = {stack: [] for stack in range(1, number_of_stacks + 1)}
    for layer in reversed(layers):
        for stack, crates in stacks.items():
            offset = 4 * (stack - 1)
            crate = remove_whitespace(layer[offset:offset + 3])
            if crate:
                crates.append(crate)
    return stacks


def parse_instruction(instruction: str) -> tuple[int, int, int]:
    """Parse ``move N from A to B`` into ``(N, A, B)``."""
    parts = instruction.split()
    return int(parts[1]), int(parts[3]), int(parts[5])


def _instructions(text: str, cargo_height: int):
    return (parse_instruction(line) for line in text.splitlines()[cargo_height + 2:])


def _top_crates(stacks: dict[int, list[str]]) -> str:
    return "".join(
        stacks[stack][-1].replace("[", "").replace("]", "") for stack in sorted(stacks)
    )


def solve_part_1(text: str, number_of_stacks: int, cargo_height: int) -> str:
    """Move crates one at a time and read the top crate of each stack."""
    stacks = parse_cargo(text, number_of_stacks, cargo_height)
    for count, source, target in _instructions(text, cargo_height):
        for _ in range(count):
            if not stacks[source]:
                raise ValueError(f"stack {source} is empty")
            stacks[target].append(stacks[source].pop())
    return _top_crates(stacks)


def solve_part_2(text: str, number_of_stacks: int, cargo_height: int) -> str:
    """Move crates several at a time, keeping their order, and read the tops."""
    stacks = parse_cargo(text, number_of_stacks, cargo_height)
    for count, source, target in _instructions(text, cargo_height):
        crates = stacks[source]
        if count > len(crates):
            raise ValueError(f"stack {source} holds fewer than {count} crates")
        split = len(crates) - count
        moved = crates[split:]
        del crates[split:]
        stacks[target].extend(moved)
    return _top_crates(stacks)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Rearrange supply stacks.")
    parser.add_argument("path", nargs="?", default="data/input.txt")
    parser.add_argument("--stacks", type=int, default=NUMBER_OF_STACKS)
    parser.add_argument("--height", type=int, default=CARGO_HEIGHT)
    args = parser.parse_args(argv)
    text = Path(args.path).read_text()
    print(f"Part 1 - Solution: {solve_part_1(text, args.stacks, args.height)}")
    print(f"Part 2 - Solution: {solve_part_2(text, args.stacks, args.height)}")