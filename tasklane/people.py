"""People records and filters over them."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from tasklane.maths import mul
from tasklane.stringutils import find_string


@dataclass
class Person:
    """A person with a name, an age and an e-mail address."""

    name: str
    age: int
    email: str

    def print(self) -> None:
        """Double the age, then write the record to standard error."""
        self.age = mul(2, self.age)
        print("name:", self.name, file=sys.stderr)
        print("age:", self.age, file=sys.stderr)
        print("email:", self.email, file=sys.stderr)

    def is_equal(self, other: Person) -> bool:
        """Tell whether both records hold the same name, age and e-mail."""
        return (
            self.name == other.name
            and self.age == other.age
            and self.email == other.email
        )


def filter_users(users: Iterable[Person], predicate: Callable[[Person], bool]) -> list[Person]:
    """Return the people for whom ``predicate`` holds, in their order."""
    return [user for user in users if predicate(user)]


def filter_adult(users: Iterable[Person]) -> list[Person]:
    """Return the adults."""
    return filter_users(users, is_adult)


def filter_teenager(users: Iterable[Person]) -> list[Person]:
    """Return the teenagers."""
    return filter_users(users, is_teenager)


def filter_by_name(users: Iterable[Person], name: str) -> list[Person]:
    """Return the people whose name contains ``name``."""
    return filter_users(users, lambda user: find_string(user.name, name))


def is_adult(user: Person) -> bool:
    """Tell whether the person is 18 or older."""
    return user.age >= 18


def is_teenager(user: Person) -> bool:
    """Tell whether the person is between 13 and 17."""
    return 13 <= user.age < 18