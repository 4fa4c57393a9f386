import pytest

from aocsolutions.y2023_day08 import parse_data, solve_part_1, solve_part_2

FIRST = """RL

AAA = (BBB, CCC)
BBB = (DDD, EEE)
CCC = (ZZZ, GGG)
DDD = (DDD, DDD)
EEE = (EEE, EEE)
GGG = (GGG, GGG)
ZZZ = (ZZZ, ZZZ)
"""

SECOND = """LLR

AAA = (BBB, BBB)
BBB = (AAA, ZZZ)
ZZZ = (ZZZ, ZZZ)
"""

GHOSTS = """LR

11A = (11B, XXX)
11B = (XXX, 11Z)
11Z = (11B, XXX)
22A = (22B, XXX)
22B = (22C, 22C)
22C = (22Z, 22Z)
22Z = (22B, 22B)
XXX = (XXX, XXX)
"""


def test_first_example():
    assert solve_part_1(FIRST) == 2


def test_second_example():
    assert solve_part_1(SECOND) == 6


def test_ghost_example():
    assert solve_part_2(GHOSTS) == 6


def test_parse_data():
    instructions, network = parse_data(SECOND)
    assert instructions == "LLR"
    assert network == {
        "AAA": ("BBB", "BBB"),
        "BBB": ("AAA", "ZZZ"),
        "ZZZ": ("ZZZ", "ZZZ"),
    }


def test_single_ghost_matches_part_1():
    # With only AAA as a start and ZZZ the only node ending in Z, both parts agree.
    assert solve_part_2(SECOND) == solve_part_1(SECOND)


def test_no_starting_nodes_gives_one():
    assert solve_part_2("L\n\nBBB = (BBB, BBB)\n") == 1


def test_missing_first_line():
    with pytest.raises(ValueError):
        parse_data("")


def test_invalid_line():
    with pytest.raises(ValueError):
        parse_data("L\n\nAAA (BBB, CCC)\n")


def test_unknown_node():
    with pytest.raises(KeyError):
        solve_part_1("L\n\nAAA = (BBB, BBB)\n")