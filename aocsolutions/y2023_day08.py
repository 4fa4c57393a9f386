"""Haunted wasteland: follow left/right instructions through a node network."""

from __future__ import annotations

import argparse
import itertools
from collections.abc import Mapping

from aocsolutions.arith import lcm_of
from aocsolutions.runner import run

Network = Mapping[str, tuple[str, str]]


def parse_data(text: str) -> tuple[str, dict[str, tuple[str, str]]]:
    """Read the instruction line and the ``NODE = (LEFT, RIGHT)`` network."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("first line is missing")
    network: dict[str, tuple[str, str]] = {}
    for line in lines[2:]:
        node, sep, elements = line.partition(" = ")
        if not sep:
            raise ValueError(f"invalid line: {line!r}")
        left, sep, right = elements.strip("()").partition(", ")
        if not sep:
            raise ValueError(f"invalid line: {line!r}")
        network[node.strip()] = (left, right)
    return lines[0], network


def _next(network: Network, node: str, instruction: str) -> str:
    try:
        left, right = network[node]
    except KeyError:
        raise KeyError(f"invalid node: {node}") from None
    return left if instruction == "L" else right


def _steps(instructions: str, network: Network, start: str, done) -> int:
    node = start
    steps = 0
    for instruction in itertools.cycle(instructions):
        if done(node):
            break
        steps += 1
        node = _next(network, node, instruction)
    return steps


def solve_part_1(text: str) -> int:
    """Steps needed to walk from ``AAA`` to ``ZZZ``."""
    instructions, network = parse_data(text)
    return _steps(instructions, network, "AAA", lambda node: node == "ZZZ")


def solve_part_2(text: str) -> int:
    """Steps until every walk from a node ending in A is at a node ending in Z."""
    instructions, network = parse_data(text)
    steps = [
        _steps(instructions, network, node, lambda current: current.endswith("Z"))
        for node in network
        if node.endswith("A")
    ]
    return lcm_of(steps)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Walk the desert network.")
    parser.add_argument("data_dir", nargs="?", default="data")
    args = parser.parse_args(argv)
    run(solve_part_1, solve_part_2, args.data_dir)