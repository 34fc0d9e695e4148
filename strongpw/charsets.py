"""
Fixed character classes.

Visually confusable characters are left out: no 0/1, no lowercase l,
no uppercase I or O.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field


@dataclass(frozen=True)
class CharacterClass:
    """
    An immutable, ordered set of characters.
    """

    name: str
    chars: tuple[str, ...]
    _members: frozenset[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_members", frozenset(self.chars))

    def __contains__(self, ch: object) -> bool:
        return ch in self._members

    def __len__(self) -> int:
        return len(self.chars)

    def __getitem__(self, index: int) -> str:
        return self.chars[index]

    @property
    def entropy_bits(self) -> float:
        """Bits contributed by one uniform draw from this class."""
        return math.log2(len(self.chars))


NUMBERS = CharacterClass("numbers", tuple("23456789"))
LOWERS = CharacterClass("lowers", tuple("abcdefghijkmnopqrstuvwxyz"))
UPPERS = CharacterClass("uppers", tuple("ABCDEFGHJKLMNPQRSTUVWXYZ"))
SPECIALS = CharacterClass("specials", ("!", "@"))

# Reserved for block separators; never drawn at random.
SEPARATOR = CharacterClass("separator", ("-",))

ALL_LETTERS = CharacterClass(
    "all_letters",
    LOWERS.chars + UPPERS.chars + SPECIALS.chars + NUMBERS.chars,
)

SEPARATOR_CHAR = SEPARATOR[0]
