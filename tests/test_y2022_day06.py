import pytest

from aocsolutions.y2022_day06 import find_marker, main, solve

FIRST = "mjqjpqmgbljsphdztnvjfqwrcgsmlb"
SECOND = "bvwbjplbgvbhsrlpgdmjqwftvncz"


def test_worked_examples():
    assert find_marker(FIRST, 4) == 7
    assert find_marker(FIRST, 14) == 19
    assert find_marker(SECOND, 4) == 5


def test_marker_right_after_unique_start():
    assert find_marker("abcde", 4) == 4


def test_tail_window_is_not_examined():
    assert find_marker("abcd", 4) is None
    assert find_marker("aaaa", 2) is None


@pytest.mark.parametrize("line", [FIRST, SECOND])
@pytest.mark.parametrize("window", [2, 4, 14])
def test_marker_is_first_distinct_window(line, window):
    marker = find_marker(line, window)
    assert marker is not None
    assert len(set(line[marker - window:marker])) == window
    assert all(
        len(set(line[index - window:index])) < window for index in range(window, marker)
    )


def test_solve_reports_each_line():
    assert solve("abcde\naaaa", 4) == [4, None]
    assert solve(f"{FIRST}\n{SECOND}", 4) == [find_marker(FIRST, 4), find_marker(SECOND, 4)]


def test_invalid_window():
    with pytest.raises(ValueError):
        find_marker(FIRST, 0)


def test_main_prints_markers(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(FIRST + "\n")
    main([str(path)])
    out = capsys.readouterr().out.splitlines()
    assert out == [
        f"Solution (with 4): {find_marker(FIRST, 4)}",
        f"Solution (with 14): {find_marker(FIRST, 14)}",
    ]