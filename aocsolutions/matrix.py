"""Helpers for character grids and boolean matrices."""

from __future__ import annotations

from collections.abc import Sequence


def to_grid(text: str) -> list[list[str]]:
    """Split text into a grid of characters, one row per line."""
    return [list(row) for row in text.splitlines()]


def format_grid(grid: Sequence[Sequence[object]]) -> str:
    """Render each cell followed by a space, one row per line."""
    return "".join("".join(f"{cell} " for cell in row) + "\n" for row in grid)


def print_grid(grid: Sequence[Sequence[object]]) -> None:
    """Print a grid as rendered by :func:`format_grid`."""
    print(format_grid(grid), end="")


def has_adjacent(matrix: Sequence[Sequence[bool]], row_index: int, column_index: int) -> bool:
    """Tell whether any of the up to eight neighbours of a cell is true."""
    if not matrix or not matrix[0]:
        raise ValueError("matrix must not be empty")
    rows = range(max(row_index - 1, 0), min(row_index + 1, len(matrix) - 1) + 1)
    columns = range(max(column_index - 1, 0), min(column_index + 1, len(matrix[0]) - 1) + 1)
    return any(
        matrix[r][c]
        for r in rows
        for c in columns
        if (r, c) != (row_index, column_index)
    )