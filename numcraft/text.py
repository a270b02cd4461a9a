"""Sorting names, counting words and drawing text pictures."""

from __future__ import annotations

from collections.abc import Iterable


def sort_names(names: Iterable[str]) -> list[str]:
    """Return the names ordered by length, then alphabetically."""
    return sorted(names, key=lambda name: (len(name), name))


def count_words(text: str) -> int:
    """Return the number of whitespace-separated words in ``text``."""
    return len(text.split())


def triangle(rows: int) -> str:
    """Return a centred triangle of ``rows`` rows of stars, one line per row."""
    if rows < 0:
        raise ValueError("rows must not be negative")
    return "".join(" " * (rows - i) + " *" * (i + 1) + "\n" for i in range(rows))


def histogram(values: Iterable[int]) -> str:
    """Return a vertical bar chart of ``values`` with the values printed underneath.

    Each column is five characters wide; the tallest bar sets the number of rows.
    """
    values = list(values)
    if not values:
        return ""
    top = max(values)
    lines = [
        "".join("*    " if value >= level else "     " for value in values)
        for level in range(top, 0, -1)
    ]
    lines.append("".join(f"{value:2d}   " for value in values))
    return "\n".join(lines)