"""Small numeric helpers: quadratic roots, integer checks, gcd and lcm."""

from __future__ import annotations

import math
from collections.abc import Iterable
from functools import reduce


def solve_quadratic(a: float, b: float, c: float) -> tuple[float, float] | None:
    """Return both real roots of ``a*x**2 + b*x + c``, or None if there are none.

    The first root uses ``+sqrt(discriminant)``, the second ``-sqrt(discriminant)``.
    """
    if a == 0:
        raise ValueError("the leading coefficient must not be zero")
    discriminant = b * b - 4.0 * a * c
    if discriminant < 0.0:
        return None
    root = math.sqrt(discriminant)
    return (-b + root) / (2.0 * a), (-b - root) / (2.0 * a)


def is_integer(n: float) -> bool:
    """Tell whether ``n`` has no fractional part."""
    value = float(n)
    return math.isfinite(value) and value.is_integer()


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple, dividing first to keep numbers small."""
    return a // gcd(a, b) * b


def lcm_of(numbers: Iterable[int]) -> int:
    """Least common multiple of all numbers; 1 for an empty input."""
    return reduce(lcm, numbers, 1)