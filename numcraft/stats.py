"""Count, total, mean and extremes of a series of integers."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Summary:
    """Statistics of a non-empty series of numbers."""

    count: int
    total: int
    maximum: int
    minimum: int

    @property
    def mean(self) -> float:
        """The arithmetic mean of the series."""
        return self.total / self.count


def summarize(values: Iterable[int]) -> Summary:
    """Return the statistics of ``values``; raises ValueError when there are none."""
    iterator = iter(values)
    try:
        first = next(iterator)
    except StopIteration:
        raise ValueError("no numbers were given") from None
    count, total, maximum, minimum = 1, first, first, first
    for value in iterator:
        count += 1
        total += value
        maximum = max(maximum, value)
        minimum = min(minimum, value)
    return Summary(count=count, total=total, maximum=maximum, minimum=minimum)