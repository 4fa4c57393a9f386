# aocsolutions

Solutions to Advent of Code puzzles: 2022 days 1–9, 11, 12, 14 and 15, and
2023 days 1–8. Each day lives in its own module (`aocsolutions.y2022_day01`,
`aocsolutions.y2023_day07`, …) and exposes its solving functions, so they can
be called directly on puzzle text as well as run from the command line.

## Installing

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Running a day

Every day has a command named after its year and day, for example:

    aoc-2022-day01
    aoc-2022-day09
    aoc-2023-day07

The 2022 commands take the path of the puzzle input as an optional argument,
`data/input.txt` by default, and print their answers. A few take extra
options:

- `aoc-2022-day01 --top N`: how many of the largest totals to sum (default 3)
- `aoc-2022-day02 --part N`: score by the rules of part 1 or part 2 (default 2)
- `aoc-2022-day05 --stacks N --height N`: number of stacks and height of the
  drawing (defaults 9 and 8)
- `aoc-2022-day11 --rounds N --divisor N`: rounds to play and the worry
  divisor (defaults 10000 and 1)
- `aoc-2022-day15 --row N --size N`: the row for part 1 and the size of the
  search space for part 2 (defaults 2000000 and 4000000)

The 2023 commands take a data directory as an optional argument (`data` by
default) and solve both parts for `test.txt` and then `input.txt` in it,
printing the mode and both answers. `aoc-2023-day01` instead takes a file
path, with `--second PATH` for a separate part 2 input; `aoc-2023-day05`
reads `<prefix>_seeds.txt` and one `<prefix>_<category>.txt` per mapping
category, with `test` and `input` as prefixes.

## Using the functions

    from aocsolutions import y2023_day04

    text = open("data/input.txt").read()
    print(y2023_day04.solve_part_1(text))
    print(y2023_day04.solve_part_2(text))

Helpers shared by several days:

- `aocsolutions.arith`: `solve_quadratic`, `is_integer`, `gcd`, `lcm`, `lcm_of`
- `aocsolutions.matrix`: `to_grid`, `format_grid`, `print_grid`, `has_adjacent`
- `aocsolutions.strings`: `reverse_string`, `remove_whitespace`
- `aocsolutions.runner`: `Mode`, `data_path` and `run`, which solves both parts
  for the test and real input of a day

## What is not included

There is no solution for 2022 day 10 (the signal and screen puzzle) or 2022
day 13, and so no command for them.