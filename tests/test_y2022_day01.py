import pytest

from aocsolutions.y2022_day01 import main, sum_of_top

EXAMPLE = "1000\n2000\n3000\n\n4000\n\n5000\n6000\n\n7000\n8000\n9000\n\n10000\n\n"


def test_example():
    assert sum_of_top(EXAMPLE) == 45000


def test_all_groups_when_count_is_large():
    total = sum(int(x) for x in EXAMPLE.split())
    assert sum_of_top(EXAMPLE, 10) == total


def test_top_grows_with_count():
    values = [sum_of_top(EXAMPLE, n) for n in range(1, 6)]
    assert values == sorted(values)


def test_unclosed_final_group_is_ignored():
    assert sum_of_top(EXAMPLE + "99999\n") == sum_of_top(EXAMPLE)


def test_group_order_does_not_matter():
    reordered = "10000\n\n7000\n8000\n9000\n\n4000\n\n1000\n2000\n3000\n\n5000\n6000\n\n"
    assert sum_of_top(reordered) == sum_of_top(EXAMPLE)


def test_bad_number():
    with pytest.raises(ValueError):
        sum_of_top("abc\n\n")


def test_main(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    main([str(path)])
    assert capsys.readouterr().out == f"Max: {sum_of_top(EXAMPLE)}\n"