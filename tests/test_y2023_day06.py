import pytest

from aocsolutions.y2023_day06 import (
    main,
    parse_races,
    parse_single_race,
    race_options,
    solve_part_1,
    solve_part_2,
)

EXAMPLE = "Time:      7  15   30\nDistance:  9  40  200\n"


def test_parse_races():
    assert parse_races(EXAMPLE) == ([7, 15, 30], [9, 40, 200])


def test_parse_single_race_joins_digits():
    assert parse_single_race(EXAMPLE) == (71530, 940200)


def test_solve_part_1_example():
    assert solve_part_1(EXAMPLE) == 288


def test_solve_part_2_example():
    assert solve_part_2(EXAMPLE) == 71503


def test_part_1_is_product_of_races():
    product = race_options(7, 9) * race_options(15, 40) * race_options(30, 200)
    assert solve_part_1(EXAMPLE) == product


def test_part_2_uses_joined_race():
    assert solve_part_2(EXAMPLE) == race_options(*parse_single_race(EXAMPLE))


def test_higher_record_never_adds_options():
    assert race_options(30, 201) <= race_options(30, 200)
    assert race_options(15, 41) <= race_options(15, 40)


def test_unreachable_record_fails():
    with pytest.raises(ValueError):
        race_options(4, 10)


def test_record_only_tied_fails():
    with pytest.raises(ValueError):
        race_options(4, 4)


def test_parse_errors():
    with pytest.raises(ValueError):
        parse_races("Time 7 15\nDistance: 9 40")
    with pytest.raises(ValueError):
        parse_races("Time: 7 15")


def test_main_prints_results(tmp_path, capsys):
    (tmp_path / "test.txt").write_text(EXAMPLE)
    (tmp_path / "input.txt").write_text(EXAMPLE)
    main([str(tmp_path)])
    out = capsys.readouterr().out
    assert f"Part 1 - Solution: {solve_part_1(EXAMPLE)}" in out
    assert f"Part 2 - Solution: {solve_part_2(EXAMPLE)}" in out