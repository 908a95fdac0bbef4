"""Number tables: Floyd's triangle and multiplication tables."""

from __future__ import annotations

from itertools import count


def floyd_triangle(rows: int) -> list[list[int]]:
    """Return the first ``rows`` rows of Floyd's triangle; empty when ``rows`` < 1."""
    numbers = count(1)
    return [[next(numbers) for _ in range(length)] for length in range(1, rows + 1)]


def multiplication_table(number: int, upto: int = 10) -> list[tuple[int, int]]:
    """Return ``(multiplier, product)`` pairs of ``number`` for multipliers 1 to ``upto``."""
    return [(multiplier, number * multiplier) for multiplier in range(1, upto + 1)]