import hashlib

import pytest

from strongpw.randomness import (
    BitStreamRandomSource,
    SeededRandomSource,
    SystemRandomSource,
    amplify_entropy,
    bits_to_bytes,
    bytes_to_bits,
    choice,
)


def test_seeded_source_is_reproducible():
    a = SeededRandomSource(3)
    b = SeededRandomSource(3)
    assert [a.randbelow(59) for _ in range(20)] == [b.randbelow(59) for _ in range(20)]


def test_system_source_range():
    rng = SystemRandomSource()
    assert all(0 <= rng.randbelow(24) < 24 for _ in range(500))


def test_choice_picks_from_sequence(seeded_rng):
    assert choice(seeded_rng, "xyz") in "xyz"


def test_bit_stream_rejects_out_of_range_values():
    # 111 = 7 is out of range for n=5 and must be skipped, not wrapped.
    rng = BitStreamRandomSource(lambda: [1, 1, 1, 0, 1, 0])
    assert rng.randbelow(5) == 2
    assert rng.bits_consumed == 6


def test_bit_stream_refills():
    batches = iter([[1], [0], [1], [1]])
    rng = BitStreamRandomSource(lambda: next(batches))
    assert rng.randbelow(16) == 0b1011


def test_bit_stream_edge_cases():
    rng = BitStreamRandomSource(lambda: [1, 0])
    assert rng.randbelow(1) == 0
    assert rng.bits_consumed == 0
    with pytest.raises(ValueError):
        rng.randbelow(0)


def test_bit_stream_empty_batch():
    rng = BitStreamRandomSource(lambda: [])
    with pytest.raises(RuntimeError):
        rng.randbelow(2)


def test_bits_bytes_conversion():
    assert bits_to_bytes([]) == b""
    assert bits_to_bytes([1, 0, 1]) == b"\xa0"
    assert bytes_to_bits(b"\x80\x01") == [1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1]


def test_amplify_entropy():
    bits = [1, 0, 1, 1, 0, 0, 1, 0]
    assert amplify_entropy(bits, 0) == bits

    mixed = amplify_entropy(bits, 1)
    assert len(mixed) == 256
    assert mixed == bytes_to_bits(hashlib.sha256(bytes([0b10110010])).digest())
    assert amplify_entropy(bits, 2) != mixed
