import pytest

from aocsolutions.y2023_day04 import (
    count_winning_numbers,
    parse_line,
    solve_part_1,
    solve_part_2,
)

EXAMPLE = """\
Card 1: 41 48 83 86 17 | 83 86  6 31 17  9 48 53
Card 2: 13 32 20 16 61 | 61 30 68 82 17 32 24 19
Card 3:  1 21 53 59 44 | 69 82 63 72 16 21 14  1
Card 4: 41 92 73 84 69 | 59 84 76 51 58  5 54 83
Card 5: 87 83 26 28 32 | 88 30 70 12 93 22 82 36
Card 6: 31 18 13 56 72 | 74 77 10 23 35 67 36 11
"""


def test_parse_line_splits_both_lists():
    winning, numbers = parse_line(EXAMPLE.splitlines()[0])
    assert winning == [41, 48, 83, 86, 17]
    assert numbers == [83, 86, 6, 31, 17, 9, 48, 53]


def test_parse_line_without_colon_fails():
    with pytest.raises(ValueError):
        parse_line("1 2 | 3 4")


def test_parse_line_without_bar_fails():
    with pytest.raises(ValueError):
        parse_line("Card 1: 1 2 3")


def test_count_winning_numbers_of_identical_lists():
    values = [5, 9, 11, 20]
    assert count_winning_numbers(values, values) == len(values)


def test_count_winning_numbers_of_disjoint_lists():
    assert count_winning_numbers([1, 2], [3, 4]) == count_winning_numbers([], [1, 2])


def test_solve_part_1_example():
    assert solve_part_1(EXAMPLE) == 13


def test_solve_part_2_example():
    assert solve_part_2(EXAMPLE) == 30


def test_card_without_matches_scores_nothing():
    losing = EXAMPLE.splitlines()[-1]
    assert solve_part_1(losing) == solve_part_1("")


def test_every_card_counts_at_least_once():
    assert solve_part_2(EXAMPLE) >= len(EXAMPLE.splitlines())
    losing = "\n".join(EXAMPLE.splitlines()[-2:])
    assert solve_part_2(losing) == len(losing.splitlines())