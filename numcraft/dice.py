"""A simulation of the dice game craps."""

from __future__ import annotations

import random
from typing import Any

_NATURALS = frozenset({7, 11})
_CRAPS = frozenset({2, 3, 12})


def roll_dice(rng: Any = None) -> int:
    """Roll two six-sided dice and return their sum."""
    rng = random if rng is None else rng
    return rng.randint(1, 6) + rng.randint(1, 6)


def play_craps(rng: Any = None) -> bool:
    """Play one game of craps and return True if the player wins."""
    rng = random if rng is None else rng
    first = roll_dice(rng)
    if first in _NATURALS:
        return True
    if first in _CRAPS:
        return False
    while True:
        roll = roll_dice(rng)
        if roll == 7:
            return False
        if roll == first:
            return True


def win_probability(games: int = 10_000_000, rng: Any = None) -> float:
    """Estimate the player's chance of winning from ``games`` simulated games."""
    if games <= 0:
        raise ValueError("the number of games must be positive")
    rng = random if rng is None else rng
    wins = sum(play_craps(rng) for _ in range(games))
    return wins / games