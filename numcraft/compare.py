"""Comparisons of a few numbers, remainders and a stepping square root."""

from __future__ import annotations

import math


def max3(a: float, b: float, c: float) -> float:
    """Return the largest of three numbers."""
    return max(a, b, c)


def max4(a: float, b: float, c: float, d: float) -> float:
    """Return the largest of four numbers."""
    return max(a, b, c, d)


def median3(a: float, b: float, c: float) -> float:
    """Return the middle value of three numbers."""
    return sorted((a, b, c))[1]


def symbolic_comparison(x: int, y: int, z: int) -> str:
    """Describe the order of three numbers, largest first, e.g. ``"3 = 3 > 1"``."""
    ordered = sorted((x, y, z), reverse=True)
    parts = [str(ordered[0])]
    for previous, current in zip(ordered, ordered[1:]):
        parts.append("=" if previous == current else ">")
        parts.append(str(current))
    return " ".join(parts)


def remainder(x: float, y: float) -> float:
    """Return the floating-point remainder of ``x / y``, with the sign of ``x``."""
    if y == 0:
        raise ZeroDivisionError("remainder with a zero divisor")
    return math.fmod(x, y)


def approximate_sqrt(num: float, tolerance: float = 0.001, step: float = 0.0001) -> float:
    """Return the first multiple of ``step`` whose square is within ``tolerance`` of ``num``.

    Raises ValueError for a negative ``num``, a non-positive ``tolerance`` or ``step``,
    and when the step jumps over every square close enough to ``num``.
    """
    if num < 0:
        raise ValueError(f"cannot take the square root of a negative number: {num}")
    if tolerance <= 0 or step <= 0:
        raise ValueError("tolerance and step must be positive")
    # Every guess below this index has a square smaller than num - tolerance.
    k = max(0, math.floor(math.sqrt(max(num - tolerance, 0.0)) / step) - 2)
    while True:
        guess = k * step
        error = num - guess * guess
        if abs(error) <= tolerance:
            return guess
        if error < 0:
            raise ValueError(f"step {step} is too coarse to reach tolerance {tolerance}")
        k += 1