from aocsolutions.y2023_day01 import main, replace_numbers, solve_part_1, solve_part_2

EXAMPLE_1 = "1abc2\npqr3stu8vwx\na1b2c3d4e5f\ntreb7uchet\n"

EXAMPLE_2 = (
    "two1nine\neightwothree\nabcone2threexyz\nxtwone3four\n"
    "4nineeightseven2\nzoneight234\n7pqrstsixteen\n"
)


def test_solve_part_1_example():
    assert solve_part_1(EXAMPLE_1) == 142


def test_solve_part_2_example():
    assert solve_part_2(EXAMPLE_2) == 281


def test_replace_numbers_inserts_digit():
    assert replace_numbers("two1nine") == "two2two1nine9nine"


def test_replace_numbers_leaves_plain_text_alone():
    assert replace_numbers("abc7xyz") == "abc7xyz"


def test_lines_without_digits_contribute_nothing():
    assert solve_part_1("abc\nxyz\n") == 0
    assert solve_part_1(EXAMPLE_1 + "nodigits\n") == solve_part_1(EXAMPLE_1)


def test_sum_is_additive_over_lines():
    lines = EXAMPLE_2.splitlines()
    assert solve_part_2(EXAMPLE_2) == sum(solve_part_2(line) for line in lines)


def test_part_2_matches_part_1_without_words():
    assert solve_part_2(EXAMPLE_1) == solve_part_1(EXAMPLE_1)


def test_main_prints_both_parts(tmp_path, capsys):
    first = tmp_path / "test1.txt"
    second = tmp_path / "test2.txt"
    first.write_text(EXAMPLE_1)
    second.write_text(EXAMPLE_2)
    main([str(first), "--second", str(second)])
    out = capsys.readouterr().out.splitlines()
    assert out == [
        f"Part 1 - Solution: {solve_part_1(EXAMPLE_1)}",
        f"Part 2 - Solution: {solve_part_2(EXAMPLE_2)}",
    ]