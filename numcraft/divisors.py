"""Divisor sums, amicable and perfect numbers, taxicab numbers and Collatz chains."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from itertools import combinations


@dataclass(frozen=True)
class CubeSumPair:
    """A number written in two ways as a sum of two cubes."""

    number: int
    first: tuple[int, int]
    second: tuple[int, int]


def proper_divisor_sum(n: int) -> int:
    """Return the sum of the divisors of ``n`` smaller than ``n``."""
    if n < 1:
        raise ValueError(f"a positive integer is required, got {n}")
    return sum(i for i in range(1, n // 2 + 1) if n % i == 0)


def _divisor_sums(limit: int) -> list[int]:
    sums = [0] * max(limit, 0)
    for i in range(1, limit // 2 + 1):
        for multiple in range(2 * i, limit, i):
            sums[multiple] += i
    return sums


def are_friends(a: int, b: int) -> bool:
    """Return True if each number is the sum of the other's proper divisors."""
    return proper_divisor_sum(a) == b and proper_divisor_sum(b) == a


def amicable_pairs(limit: int) -> list[tuple[int, int]]:
    """Return pairs ``(a, b)`` of distinct friendly numbers with ``a < b < limit``."""
    sums = _divisor_sums(limit)
    pairs = []
    for a in range(1, limit):
        b = sums[a]
        if a < b < limit and sums[b] == a:
            pairs.append((a, b))
    return pairs


def is_perfect(n: int) -> bool:
    """Return True if ``n`` equals the sum of its proper divisors."""
    return n > 0 and proper_divisor_sum(n) == n


def perfect_numbers(limit: int) -> list[int]:
    """Return the perfect numbers below ``limit``."""
    sums = _divisor_sums(limit)
    return [n for n in range(1, limit) if sums[n] == n]


def hardy_ramanujan(limit: int = 100000, base_limit: int = 100) -> list[CubeSumPair]:
    """Return the numbers below ``limit`` that are a sum of two cubes in two ways.

    Every base is below ``base_limit`` and the four bases are distinct. Results are
    ordered by number, then by their representations.
    """
    representations: dict[int, list[tuple[int, int]]] = defaultdict(list)
    for a in range(base_limit):
        for b in range(a + 1, base_limit):
            total = a**3 + b**3
            if total >= limit:
                break
            representations[total].append((a, b))
    found = []
    for number in sorted(representations):
        ways = sorted(representations[number])
        for first, second in combinations(ways, 2):
            found.append(CubeSumPair(number, first, second))
    return found


def collatz(n: int) -> list[int]:
    """Return the Collatz sequence starting at ``n`` and ending at 1."""
    if n < 1:
        raise ValueError(f"the Collatz sequence needs a positive start, got {n}")
    sequence = [n]
    while n != 1:
        n = n // 2 if n % 2 == 0 else 3 * n + 1
        sequence.append(n)
    return sequence