import pytest

from tasklane.people import (
    Person,
    filter_adult,
    filter_by_name,
    filter_teenager,
    filter_users,
    is_adult,
    is_teenager,
)


@pytest.fixture
def people():
    return [
        Person("John", 30, "john@example.com"),
        Person("Johne", 12, "johne@example.com"),
        Person("Mary", 15, "mary@example.com"),
        Person("Anna", 18, "anna@example.com"),
        Person("Tom", 13, "tom@example.com"),
    ]


def test_print_doubles_age(capsys):
    person = Person("John", 12, "john@example.com")
    person.print()
    assert person.age == 24
    err = capsys.readouterr().err.splitlines()
    assert err[0] == "name: John"
    assert err[2] == "email: john@example.com"
    assert err[1] == f"age: {person.age}"


def test_is_equal_same_fields():
    a = Person("John", 12, "john@example.com")
    b = Person("John", 12, "john@example.com")
    assert a.is_equal(b) is True


@pytest.mark.parametrize(
    "other",
    [
        Person("Johne", 12, "john@example.com"),
        Person("John", 13, "john@example.com"),
        Person("John", 12, "other@example.com"),
    ],
)
def test_is_equal_differs(other):
    assert Person("John", 12, "john@example.com").is_equal(other) is False


@pytest.mark.parametrize("age, expected", [(17, False), (18, True), (40, True)])
def test_is_adult(age, expected):
    assert is_adult(Person("x", age, "x@example.com")) is expected


@pytest.mark.parametrize(
    "age, expected", [(12, False), (13, True), (17, True), (18, False)]
)
def test_is_teenager(age, expected):
    assert is_teenager(Person("x", age, "x@example.com")) is expected


def test_filter_adult(people):
    result = filter_adult(people)
    assert [p.name for p in result] == ["John", "Anna"]
    assert all(p.age >= 18 for p in result)


def test_filter_teenager(people):
    assert [p.name for p in filter_teenager(people)] == ["Mary", "Tom"]


def test_adult_and_teenager_are_disjoint(people):
    adults = filter_adult(people)
    teens = filter_teenager(people)
    assert not any(p in adults for p in teens)


def test_filter_by_name_is_substring_match(people):
    assert [p.name for p in filter_by_name(people, "John")] == ["John", "Johne"]


def test_filter_users_keeps_order_and_empty(people):
    assert filter_users(people, lambda p: True) == people
    assert filter_users(people, lambda p: False) == []