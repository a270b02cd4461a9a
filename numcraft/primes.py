"""Prime tests, factorisation and families of numbers defined through primes."""

from __future__ import annotations

import math

from .digits import digit_sum


def is_prime(n: int) -> bool:
    """Return True if ``n`` is a prime number."""
    if n < 2:
        return False
    if n < 4:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    for d in range(5, math.isqrt(n) + 1, 6):
        if n % d == 0 or n % (d + 2) == 0:
            return False
    return True


def primes_between(low: int, high: int) -> list[int]:
    """Return the primes ``p`` with ``low <= p < high`` in ascending order."""
    return [n for n in range(max(low, 2), high) if is_prime(n)]


def closest_prime(value: int) -> int:
    """Return the largest prime strictly below ``value``.

    Raises ValueError when there is no such prime.
    """
    for candidate in range(value - 1, 1, -1):
        if is_prime(candidate):
            return candidate
    raise ValueError(f"there is no prime below {value}")


def prime_factors(n: int) -> list[int]:
    """Return the prime factors of ``n`` in ascending order, with multiplicity."""
    if n < 1:
        raise ValueError(f"cannot factorise {n}: a positive integer is required")
    factors: list[int] = []
    remaining = n
    divisor = 2
    while divisor * divisor <= remaining:
        while remaining % divisor == 0:
            factors.append(divisor)
            remaining //= divisor
        divisor += 1 if divisor == 2 else 2
    if remaining > 1:
        factors.append(remaining)
    return factors


def _count_primes_up_to(n: int) -> int:
    if n < 2:
        return 0
    sieve = bytearray([1]) * (n + 1)
    sieve[0] = sieve[1] = 0
    for p in range(2, math.isqrt(n) + 1):
        if sieve[p]:
            sieve[p * p :: p] = bytes(len(range(p * p, n + 1, p)))
    return sum(sieve)


def super_prime_index(n: int) -> int:
    """Return the 1-based position of the prime ``n`` in the sequence of primes.

    Raises ValueError when ``n`` is not prime.
    """
    if not is_prime(n):
        raise ValueError(f"{n} is not a prime number")
    return _count_primes_up_to(n)


def is_super_prime(n: int) -> bool:
    """Return True if ``n`` is prime and its position among the primes is prime."""
    return is_prime(n) and is_prime(super_prime_index(n))


def is_smith(n: int) -> bool:
    """Return True if ``n`` is composite and its digit sum equals the digit sum of its prime factors."""
    if n < 4 or is_prime(n):
        return False
    return digit_sum(n) == sum(digit_sum(factor) for factor in prime_factors(n))


def smith_numbers(limit: int) -> list[int]:
    """Return the Smith numbers below ``limit``."""
    return [n for n in range(limit) if is_smith(n)]