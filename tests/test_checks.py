import pytest

from strongpw.checks import (
    has_adjacent_repeat,
    has_adjacent_special_pair,
    has_lower,
    has_number,
    has_special,
    structural_failure,
)


@pytest.mark.parametrize(
    ("password", "expected"),
    [("Abc2Z", True), ("AbcZ", False), ("Ab0cZ", False), ("Ab9Z", True)],
)
def test_has_number(password, expected):
    assert has_number(password) is expected


@pytest.mark.parametrize(
    ("password", "expected"),
    [("AbZ", True), ("ABZ2", False), ("A2lZ", False)],
)
def test_has_lower(password, expected):
    assert has_lower(password) is expected


@pytest.mark.parametrize(
    ("password", "expected"),
    [("Ab!Z", True), ("Ab@Z", True), ("Ab-Z", True), ("Ab.Z", False), ("AbZ", False)],
)
def test_has_special(password, expected):
    assert has_special(password) is expected


@pytest.mark.parametrize(
    ("password", "expected"),
    [
        ("Abcd", False),
        ("Abbd", True),
        ("AbBd", True),
        ("aAxy", True),
        ("A22Z", True),
        ("Ab!!", True),
        ("AbaB", False),
    ],
)
def test_has_adjacent_repeat(password, expected):
    assert has_adjacent_repeat(password) is expected


@pytest.mark.parametrize(
    ("password", "expected"),
    [
        ("a!@b", True),
        ("a@!b", True),
        ("a!!b", False),
        ("a!-@", False),
        ("a!b@", False),
    ],
)
def test_has_adjacent_special_pair(password, expected):
    assert has_adjacent_special_pair(password) is expected


@pytest.mark.parametrize(
    ("password", "expected"),
    [
        ("Abc2!Z", None),
        ("ABCDZ", "no_number"),
        ("AB2CZ", "no_lower"),
        ("Ab2cZ", "no_special"),
        ("Abb2!Z", "adjacent_repeat"),
        ("Ab2!@Z", "adjacent_special_pair"),
    ],
)
def test_structural_failure(password, expected):
    assert structural_failure(password) == expected


def test_checks_accept_character_lists():
    assert structural_failure(list("Abc2!Z")) is None
    assert has_adjacent_repeat(list("AaZ"))
