"""Functions on the decimal digits of non-negative integers."""

from __future__ import annotations

import itertools
import math


def digits(n: int) -> list[int]:
    """Return the decimal digits of ``n``, most significant first."""
    if n < 0:
        raise ValueError(f"digits of a negative number are not defined: {n}")
    return [int(ch) for ch in str(n)]


def digit_sum(n: int) -> int:
    """Return the sum of the decimal digits of ``n``."""
    return sum(digits(n))


def is_harshad(n: int) -> bool:
    """Return True if ``n`` is divisible by the (non-zero) sum of its digits."""
    total = digit_sum(n)
    return total != 0 and n % total == 0


def harshad_numbers(count: int) -> list[int]:
    """Return the first ``count`` Harshad numbers, starting from 1."""
    if count < 0:
        raise ValueError("count must not be negative")
    return list(itertools.islice(filter(is_harshad, itertools.count(1)), count))


def digital_root(n: int) -> int:
    """Return the single digit reached by repeatedly summing the digits of ``n``."""
    while n >= 10:
        n = digit_sum(n)
    if n < 0:
        raise ValueError(f"digital root of a negative number is not defined: {n}")
    return n


def reversed_digits(n: int) -> str:
    """Return the digits of ``n`` written in reverse order, leading zeros kept."""
    return "".join(str(d) for d in reversed(digits(n)))


def is_armstrong(n: int) -> bool:
    """Return True if ``n`` equals the sum of its digits each raised to the digit count."""
    ds = digits(n)
    width = len(ds)
    return sum(d**width for d in ds) == n


def armstrong_numbers(limit: int) -> list[int]:
    """Return the Armstrong numbers below ``limit``, starting from 0."""
    return [n for n in range(limit) if is_armstrong(n)]


def is_factorion(n: int) -> bool:
    """Return True if ``n`` equals the sum of the factorials of its digits."""
    return sum(math.factorial(d) for d in digits(n)) == n


def factorions(limit: int) -> list[int]:
    """Return the factorions from 1 up to but excluding ``limit``."""
    return [n for n in range(1, limit) if is_factorion(n)]