"""String helpers."""

from __future__ import annotations

from collections import Counter


def concat(a: str, b: str) -> str:
    """Join two strings and tag the result."""
    return a + b + " from internal"


def reverse(s: str) -> str:
    """Return ``s`` with its characters in reverse order."""
    return s[::-1]


def find_string(s: str, substr: str) -> bool:
    """Tell whether ``substr`` occurs in ``s``."""
    return substr in s


def is_anagram(s1: str, s2: str) -> bool:
    """Tell whether ``s2`` is made of the same characters as ``s1``.

    Strings whose UTF-8 encodings differ in length are never anagrams.
    """
    if len(s1.encode()) != len(s2.encode()):
        return False
    return not (Counter(s2) - Counter(s1))


def is_palindrome(s: str) -> bool:
    """Tell whether the UTF-8 bytes of ``s`` read the same both ways."""
    data = s.encode()
    return data == data[::-1]


def count_types(s: str) -> tuple[int, int, int]:
    """Count ASCII lower-case letters, upper-case letters and digits.

    Returns ``(lower, upper, digit)``.
    """
    lower = sum(1 for c in s if "a" <= c <= "z")
    upper = sum(1 for c in s if "A" <= c <= "Z")
    digit = sum(1 for c in s if "0" <= c <= "9")
    return lower, upper, digit


def is_numeric(s: str) -> bool:
    """Tell whether every character of ``s`` is an ASCII digit."""
    return all("0" <= c <= "9" for c in s)