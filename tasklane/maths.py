"""Small integer helpers and number sequences."""

from __future__ import annotations

import itertools
from collections.abc import Iterator


def add(i: int, j: int) -> int:
    """Return the sum of two integers."""
    return i + j


def sub(i: int, j: int) -> int:
    """Return ``i`` minus ``j``."""
    return i - j


def mul(i: int, j: int) -> int:
    """Return the product of two integers."""
    return i * j


def factorial(i: int) -> int:
    """Return ``i!`` for a positive integer ``i``."""
    if i < 1:
        raise ValueError(f"factorial is defined here for positive integers, got {i}")
    result = 1
    for k in range(2, i + 1):
        result *= k
    return result


def fibonacci() -> Iterator[int]:
    """Yield the Fibonacci numbers 1, 1, 2, 3, 5, ... without end."""
    i, j = 0, 1
    while True:
        i, j = j, i + j
        yield i


def counter() -> Iterator[int]:
    """Yield 1, 2, 3, ... without end."""
    return itertools.count(1)