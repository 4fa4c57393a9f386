import pytest

from aocsolutions.y2022_day09 import (
    follow,
    is_adjacent,
    is_diagonal,
    main,
    move_position,
    simulate_rope,
    solve_part_1,
    solve_part_2,
)

SMALL = "R 4\nU 4\nL 3\nD 1\nR 4\nD 1\nL 5\nR 2\n"
LARGE = "R 5\nU 8\nL 8\nD 3\nR 17\nD 10\nL 25\nU 20\n"


def test_is_adjacent():
    assert is_adjacent((2, 3), (3, 3)) is True
    assert is_adjacent((3, 2), (3, 3)) is True
    assert is_adjacent((2, 3), (4, 3)) is False
    assert is_adjacent((3, 2), (5, 5)) is False


def test_is_diagonal():
    assert is_diagonal((1, 1), (2, 2)) is True
    assert is_diagonal((1, 1), (3, 3)) is False
    assert is_diagonal((1, 1), (3, 2)) is False


def test_overlapping_knots_are_adjacent():
    assert is_adjacent((4, 4), (4, 4)) is True


@pytest.mark.parametrize(
    "direction, expected",
    [("L", (-1, 0)), ("R", (1, 0)), ("U", (0, 1)), ("D", (0, -1))],
)
def test_move_position(direction, expected):
    assert move_position((0, 0), direction) == expected


def test_illegal_move():
    with pytest.raises(ValueError):
        move_position((0, 0), "X")


def test_follow_keeps_touching_knot():
    assert follow((1, 1), (0, 0)) == (0, 0)


def test_follow_straight_and_diagonal():
    assert follow((2, 0), (0, 0)) == (1, 0)
    assert follow((2, 1), (0, 0)) == (1, 1)
    assert is_adjacent((0, -2), follow((0, -2), (1, 0)))


def test_worked_examples():
    assert solve_part_1(SMALL) == 13
    assert solve_part_2(SMALL) == 1
    assert solve_part_2(LARGE) == 36


def test_simulate_rope_matches_parts():
    assert simulate_rope(LARGE, 2) == solve_part_1(LARGE)
    assert simulate_rope(LARGE, 10) == solve_part_2(LARGE)


def test_empty_input_visits_nothing():
    assert simulate_rope("", 2) == 0


def test_rope_needs_two_knots():
    with pytest.raises(ValueError):
        simulate_rope(SMALL, 1)


def test_main_prints_both_parts(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(SMALL)
    main([str(path)])
    assert capsys.readouterr().out.splitlines() == [
        f"Part 1 - Solution: {solve_part_1(SMALL)}",
        f"Part 2 - Solution: {solve_part_2(SMALL)}",
    ]