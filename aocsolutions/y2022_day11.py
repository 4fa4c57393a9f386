"""Monkey in the middle: items thrown between monkeys by worry level."""

from __future__ import annotations

import argparse
import heapq
import math
import warnings
from dataclasses import dataclass, field
from pathlib import Path

NUMBER_OF_ROUNDS = 10_000
WORRY_DIVISOR = 1

_OPERATORS = {"*": lambda a, b: a * b, "+": lambda a, b: a + b}


@dataclass
class Monkey:
    """A monkey's items, its worry operation and its throwing test.

    ``operand`` is None when the operation uses the old value twice.
    """

    items: list[int] = field(default_factory=list)
    operator: str = "+"
    operand: int | None = None
    divisor: int = 1
    if_true: int = 0
    if_false: int = 0

    def __post_init__(self) -> None:
        if self.operator not in _OPERATORS:
            raise ValueError(f"unexpected operator: {self.operator!r}")

    def operate(self, item: int) -> int:
        """New worry level of ``item`` after this monkey inspects it."""
        right = item if self.operand is None else self.operand
        return _OPERATORS[self.operator](item, right)

    def target(self, worry_level: int) -> int:
        """The monkey an item with ``worry_level`` is thrown to."""
        return self.if_true if worry_level % self.divisor == 0 else self.if_false


def _after(line: str, marker: str) -> str:
    return line.split(marker, 1)[1].strip()


def parse_monkeys(text: str) -> list[Monkey]:
    """Read the monkey descriptions, ordered by monkey id."""
    found: dict[int, dict] = {}
    monkey_id = 0
    lines = iter(text.splitlines())
    for line in lines:
        if "Monkey" in line:
            monkey_id = int(line.split()[-1].replace(":", ""))
            found.setdefault(monkey_id, {})
        elif "Starting items" in line:
            items = _after(line, ":")
            found.setdefault(monkey_id, {})["items"] = [
                int(item) for item in items.split(",") if item.strip()
            ]
        elif "Operation" in line:
            tokens = _after(line, "=").split()
            if len(tokens) != 3 or tokens[0] != "old":
                raise ValueError(f"unexpected operation: {line.strip()!r}")
            operand = None if tokens[2] == "old" else int(tokens[2])
            found.setdefault(monkey_id, {}).update(operator=tokens[1], operand=operand)
        elif "Test" in line:
            divisor = int(line.split()[-1])
            if_true = int(next(lines).split()[-1])
            if_false = int(next(lines).split()[-1])
            found.setdefault(monkey_id, {}).update(
                divisor=divisor, if_true=if_true, if_false=if_false
            )
        elif line == "":
            continue
        else:
            warnings.warn(f"unexpected line: {line!r}", stacklevel=2)
    if sorted(found) != list(range(len(found))):
        raise ValueError("monkey ids must run from 0 without gaps")
    return [Monkey(**found[index]) for index in range(len(found))]


def solve(
    monkeys: list[Monkey],
    rounds: int = NUMBER_OF_ROUNDS,
    worry_divisor: int = WORRY_DIVISOR,
) -> int:
    """Product of the two highest inspection counts after ``rounds`` rounds.

    The monkeys passed in are left untouched.
    """
    if len(monkeys) < 2:
        raise ValueError("at least two monkeys are needed")
    if worry_divisor < 1:
        raise ValueError("worry divisor must be at least 1")
    modulus = math.prod(monkey.divisor for monkey in monkeys)
    holdings = [list(monkey.items) for monkey in monkeys]
    inspections = [0] * len(monkeys)
    for _ in range(rounds):
        for index, monkey in enumerate(monkeys):
            items, holdings[index] = holdings[index], []
            inspections[index] += len(items)
            for item in items:
                worry_level = monkey.operate(item) // worry_divisor
                target = monkey.target(worry_level)
                if worry_divisor == 1:
                    worry_level %= modulus
                holdings[target].append(worry_level)
    first, second = heapq.nlargest(2, inspections)
    return first * second


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Track monkey business.")
    parser.add_argument("path", nargs="?", default="data/input.txt")
    parser.add_argument("--rounds", type=int, default=NUMBER_OF_ROUNDS)
    parser.add_argument("--divisor", type=int, default=WORRY_DIVISOR)
    args = parser.parse_args(argv)
    monkeys = parse_monkeys(Path(args.path).read_text())
    print(f"Solution: {solve(monkeys, args.rounds, args.divisor)}")