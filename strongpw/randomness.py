"""
Random sources.

Every generating call takes an explicit source so nothing depends on hidden
global state and tests can pass a seeded one. A source only has to provide
``randbelow(n)``: a uniform integer in ``[0, n)``.

Sources are not thread-safe. Parallel workers must each own one.
"""

from __future__ import annotations

import hashlib
import random
import secrets
from typing import Callable, List, Protocol, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    def randbelow(self, n: int) -> int: ...


def choice(rng: RandomSource, seq: Sequence[T]) -> T:
    return seq[rng.randbelow(len(seq))]


class SystemRandomSource:
    """OS CSPRNG via :mod:`secrets`. The default for real passwords."""

    def randbelow(self, n: int) -> int:
        return secrets.randbelow(n)


class SeededRandomSource:
    """
    Deterministic source for tests and reproducible runs.
    Never use it for real passwords.
    """

    def __init__(self, seed: int | str | bytes | None = None) -> None:
        self._random = random.Random(seed)

    def randbelow(self, n: int) -> int:
        return self._random.randrange(n)


class BitStreamRandomSource:
    """
    Uniform draws from an external bit supplier.

    ``refill`` returns a fresh batch of bits whenever the buffer runs dry.
    Values are built from the minimum number of bits and rejected when out
    of range, so there is no modulo bias.
    """

    def __init__(self, refill: Callable[[], List[int]]) -> None:
        self._refill = refill
        self._bits: List[int] = []
        self.bits_consumed = 0

    def _next_bit(self) -> int:
        while not self._bits:
            batch = self._refill()
            if not batch:
                raise RuntimeError("Bit supplier returned an empty batch.")
            # Stored reversed so pop() hands bits out in supplier order.
            self._bits = list(reversed(batch))
        self.bits_consumed += 1
        return self._bits.pop()

    def randbelow(self, n: int) -> int:
        if n <= 0:
            raise ValueError("randbelow() requires n > 0")
        if n == 1:
            return 0

        width = (n - 1).bit_length()
        while True:
            value = 0
            for _ in range(width):
                value = (value << 1) | self._next_bit()
            if value < n:
                return value


# ---------- bit helpers ----------


def bits_to_bytes(bits: List[int]) -> bytes:
    """
    Pack a list of bits [0,1,1,0,...] into bytes (8 bits per byte).
    If bits length is not a multiple of 8, pad with zeros at the end.
    """
    if not bits:
        return b""

    pad_len = (8 - (len(bits) % 8)) % 8
    bits_padded = bits + [0] * pad_len

    byte_values = []
    for i in range(0, len(bits_padded), 8):
        byte = 0
        for bit in bits_padded[i : i + 8]:
            byte = (byte << 1) | bit
        byte_values.append(byte)

    return bytes(byte_values)


def bytes_to_bits(data: bytes) -> List[int]:
    """
    Convert bytes into a list of bits, MSB first.
    """
    return [(byte >> (7 - i)) & 1 for byte in data for i in range(8)]


def amplify_entropy(bits: List[int], rounds: int = 1) -> List[int]:
    """
    Mix raw bits with SHA-256, `rounds` times.

    Every round outputs 256 bits, so short raw batches are also stretched.
    With rounds <= 0 the bits are returned untouched.
    """
    if rounds <= 0:
        return bits

    data = bits_to_bytes(bits)
    for _ in range(rounds):
        data = hashlib.sha256(data).digest()

    return bytes_to_bits(data)
