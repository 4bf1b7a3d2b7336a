"""A short tour of the helper modules."""

from __future__ import annotations

import sys
import uuid
from collections.abc import Iterator
from dataclasses import dataclass

from tasklane.maths import factorial
from tasklane.people import Person, filter_adult
from tasklane.stringutils import (
    concat,
    count_types,
    is_anagram,
    is_numeric,
    reverse,
)

_NUMERIC_SAMPLES = ("1345012", "09b4t444")
_COUNT_SAMPLE = "eeeUUUU12"


@dataclass
class Book:
    """A book with a name and an author."""

    name: str
    author: str


@dataclass
class Rect:
    """A rectangle given by its width and height."""

    width: float
    height: float


def _format_people(people: list[Person]) -> str:
    return "[" + " ".join(f"{{{p.name} {p.age} {p.email}}}" for p in people) + "]"


def number_parity(limit: int = 20) -> Iterator[str]:
    """Yield a line saying whether each number below ``limit`` is odd or even."""
    for i in range(limit):
        yield f"{i} is odd" if i % 2 else f"{i} is even"


def demo() -> None:
    """Run through books, string helpers, people filters and factorials."""
    book = Book(name="Goooo", author="John")
    print("book", book.name, book.author)
    print(concat("Hello", " vcl World"))
    print(reverse("Hello World"))

    user = Person(name="John", age=uuid.uuid4().clock_seq, email="john@example.com")
    user2 = Person(name="Johne", age=12, email="johne@example.com")
    user.print()
    print("is equal : ", str(user.is_equal(user2)).lower(), file=sys.stderr)

    adults = filter_adult([user, user2])
    print("Adult users:")
    print(_format_people(adults))

    print("run factorial of 10: ", factorial(10))

    s1, s2 = "hello123", "321olleh"
    print("is palindrome: ", s1, s2, str(is_anagram(s1, s2)).lower())


def main(argv: list[str] | None = None) -> int:
    """Print a few string checks."""
    for sample in _NUMERIC_SAMPLES:
        print(str(is_numeric(sample)).lower(), file=sys.stderr)
    lower, upper, digit = count_types(_COUNT_SAMPLE)
    print(lower, upper, digit)
    print("Hello World".lower(), file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())