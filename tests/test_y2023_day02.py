import pytest

from aocsolutions.y2023_day02 import main, parse_line, solve_part_1, solve_part_2

EXAMPLE = """\
Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green
Game 2: 1 blue, 2 green; 3 green, 4 blue, 1 red; 1 green, 1 blue
Game 3: 8 green, 6 blue, 20 red; 5 blue, 4 red, 13 green; 5 green, 1 red
Game 4: 1 green, 3 red, 6 blue; 3 green, 6 red; 3 green, 15 blue, 14 red
Game 5: 6 red, 1 blue, 3 green; 2 blue, 1 red, 2 green
"""


def test_parse_line_reads_every_draw():
    line = EXAMPLE.splitlines()[0]
    assert parse_line(line) == [
        {"blue": 3, "red": 4},
        {"red": 1, "green": 2, "blue": 6},
        {"green": 2},
    ]


def test_parse_line_without_colon_fails():
    with pytest.raises(ValueError):
        parse_line("Game 1 3 blue")


def test_solve_part_1_example():
    assert solve_part_1(EXAMPLE) == 8


def test_solve_part_2_example():
    assert solve_part_2(EXAMPLE) == 2286


def test_impossible_game_adds_nothing():
    assert solve_part_1(EXAMPLE + "Game 6: 13 red\n") == solve_part_1(EXAMPLE)


def test_limits_are_inclusive_and_position_counts():
    assert solve_part_1("Game 42: 12 red, 13 green, 14 blue") == 1


def test_unknown_colour_fails_in_part_1():
    with pytest.raises(ValueError):
        solve_part_1("Game 1: 1 purple")


def test_part_2_takes_the_maximum():
    assert solve_part_2(
        "Game 1: 2 red, 3 green, 4 blue; 1 red, 1 green, 1 blue"
    ) == solve_part_2("Game 1: 2 red, 3 green, 4 blue")


def test_part_2_ignores_unknown_colours():
    assert solve_part_2("Game 1: 1 red, 2 green, 3 blue, 9 purple") == solve_part_2(
        "Game 1: 1 red, 2 green, 3 blue"
    )


def test_part_2_missing_colour_gives_zero():
    assert solve_part_2("Game 1: 5 red, 7 green") == 0


def test_main_prints_both_modes(tmp_path, capsys):
    (tmp_path / "test.txt").write_text(EXAMPLE)
    (tmp_path / "input.txt").write_text(EXAMPLE)
    main([str(tmp_path)])
    out = capsys.readouterr().out
    assert "Mode: TEST" in out
    assert "Mode: REAL" in out
    assert f"Part 1 - Solution: {solve_part_1(EXAMPLE)}" in out
    assert f"Part 2 - Solution: {solve_part_2(EXAMPLE)}" in out