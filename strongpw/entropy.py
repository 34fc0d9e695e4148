"""
Entropy / length model.

Forward: the structural entropy of a candidate of length N is

    2 * log2(|UPPERS|) + (N - 2 - S) * log2(|ALL_LETTERS|)

where S is the number of separator positions for N. Separators are placed,
not drawn, so they add nothing.

After generation the realized entropy subtracts log2(attempts), the number
of candidates drawn including the accepted one. This is an approximation
of what rejection sampling costs, kept as a modeling choice; it is not a
derived Shannon bound.

Inverse: ENTROPY_TABLE maps every supported length to its forward entropy,
and length_for_entropy picks the smallest length whose entropy is >= the
target. A target exactly on a breakpoint returns that breakpoint's length.
"""

from __future__ import annotations

import bisect
import math
from typing import List, Tuple

from .candidate import separator_positions
from .charsets import ALL_LETTERS, UPPERS
from .config import MAX_LENGTH, MIN_LENGTH


def structural_entropy(length: int) -> float:
    if length < 2:
        raise ValueError("length must be at least 2")
    drawn = length - 2 - len(separator_positions(length))
    return 2 * UPPERS.entropy_bits + drawn * ALL_LETTERS.entropy_bits


def realized_entropy(structural_bits: float, attempts: int) -> float:
    if attempts < 1:
        raise ValueError("attempts must be at least 1")
    return structural_bits - math.log2(attempts)


ENTROPY_TABLE: Tuple[Tuple[int, float], ...] = tuple(
    (length, structural_entropy(length))
    for length in range(MIN_LENGTH, MAX_LENGTH + 1)
)

_TABLE_BITS: List[float] = [bits for _length, bits in ENTROPY_TABLE]


def length_for_entropy(bits: float) -> int:
    """
    Smallest supported length whose structural entropy is >= `bits`.

    Targets above the last breakpoint map to the longest supported length.
    """
    index = bisect.bisect_left(_TABLE_BITS, bits)
    if index >= len(ENTROPY_TABLE):
        return ENTROPY_TABLE[-1][0]
    return ENTROPY_TABLE[index][0]


def strength_label(bits: float) -> str:
    if bits <= 0:
        return "Very weak"
    if bits < 50:
        return "Weak"
    if bits < 80:
        return "Moderate"
    if bits < 110:
        return "Strong"
    return "Very strong"
