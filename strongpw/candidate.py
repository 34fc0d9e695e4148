"""
Candidate synthesizer: one fixed-length trial password per call.
"""

from __future__ import annotations

from functools import lru_cache
from typing import List

from .charsets import ALL_LETTERS, SEPARATOR_CHAR, UPPERS
from .config import BLOCK_SIZE, LONG_PASSWORD_THRESHOLD
from .randomness import RandomSource, choice


@lru_cache(maxsize=None)
def separator_positions(length: int) -> tuple[int, ...]:
    """
    Indices overwritten with the separator for a password of `length`.

    Only long passwords get separators: every interior index that is a
    multiple of BLOCK_SIZE. The first and last positions are never touched.
    """
    if length < LONG_PASSWORD_THRESHOLD:
        return ()
    return tuple(range(BLOCK_SIZE, length - 1, BLOCK_SIZE))


def draw_candidate(
    length: int,
    rng: RandomSource,
    buffer: List[str] | None = None,
) -> List[str]:
    """
    Build one candidate of exactly `length` characters.

    We:
    - Draw the first and last character from UPPERS.
    - Draw everything in between from ALL_LETTERS.
    - Overwrite the separator positions (placement, not a draw).

    If `buffer` has the right size it is filled in place and returned.
    """
    if buffer is None or len(buffer) != length:
        buffer = [""] * length

    buffer[0] = choice(rng, UPPERS)
    for i in range(1, length - 1):
        buffer[i] = choice(rng, ALL_LETTERS)
    buffer[length - 1] = choice(rng, UPPERS)

    for i in separator_positions(length):
        buffer[i] = SEPARATOR_CHAR

    return buffer
