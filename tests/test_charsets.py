import dataclasses
import math

import pytest

from strongpw.charsets import (
    ALL_LETTERS,
    LOWERS,
    NUMBERS,
    SEPARATOR,
    SEPARATOR_CHAR,
    SPECIALS,
    UPPERS,
)


@pytest.mark.parametrize(
    ("char_class", "size"),
    [(NUMBERS, 8), (LOWERS, 25), (UPPERS, 24), (SPECIALS, 2), (ALL_LETTERS, 59)],
)
def test_class_sizes(char_class, size):
    assert len(char_class) == size
    assert len(set(char_class.chars)) == size
    assert char_class.entropy_bits == pytest.approx(math.log2(size))


def test_confusable_characters_are_excluded():
    for ch in "01lIO":
        assert ch not in ALL_LETTERS


def test_all_letters_is_union_without_separator():
    assert set(ALL_LETTERS.chars) == (
        set(LOWERS.chars) | set(UPPERS.chars) | set(NUMBERS.chars) | set(SPECIALS.chars)
    )
    assert SEPARATOR_CHAR == "-"
    assert SEPARATOR_CHAR not in ALL_LETTERS
    assert SEPARATOR_CHAR in SEPARATOR


def test_classes_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        UPPERS.chars = ("A",)
