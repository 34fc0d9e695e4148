"""
Structural checks run on every candidate before it is scored.
"""

from __future__ import annotations

from typing import Optional, Sequence

from .charsets import LOWERS, NUMBERS, SEPARATOR, SPECIALS


def has_number(pw: Sequence[str]) -> bool:
    return any(ch in NUMBERS for ch in pw)


def has_lower(pw: Sequence[str]) -> bool:
    return any(ch in LOWERS for ch in pw)


def has_special(pw: Sequence[str]) -> bool:
    """True for a special character or a block separator."""
    return any(ch in SPECIALS or ch in SEPARATOR for ch in pw)


def has_adjacent_repeat(pw: Sequence[str]) -> bool:
    """
    Two neighbours equal ignoring case, so "aA" counts as a repeat.
    """
    return any(a.lower() == b.lower() for a, b in zip(pw, pw[1:]))


def has_adjacent_special_pair(pw: Sequence[str]) -> bool:
    """
    The two different specials next to each other ("!@" or "@!").
    """
    return any(
        a != b and a in SPECIALS and b in SPECIALS for a, b in zip(pw, pw[1:])
    )


def structural_failure(pw: Sequence[str]) -> Optional[str]:
    """
    Return the name of the first failed check, or None if all pass.
    """
    if not has_number(pw):
        return "no_number"
    if not has_lower(pw):
        return "no_lower"
    if not has_special(pw):
        return "no_special"
    if has_adjacent_repeat(pw):
        return "adjacent_repeat"
    if has_adjacent_special_pair(pw):
        return "adjacent_special_pair"
    return None
