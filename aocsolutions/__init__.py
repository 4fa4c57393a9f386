"""Advent of Code puzzle solutions for 2022 and 2023, with shared helpers."""

__version__ = "0.1.0"