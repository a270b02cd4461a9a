"""Number-theory and arithmetic helpers: primes, digits, divisors, comparisons, calendar days, dice, statistics and text layouts."""

__version__ = "0.1.0"