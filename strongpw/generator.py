"""
High-level generation loop.

    DRAFTING -> CHECKING -> ACCEPTED
                   |
                   +-> DRAFTING (rejected, draw again)

The loop has no attempt limit: the accepted set is a non-empty subset of all
draws, so it terminates with probability 1. Settings that could never be
accepted are refused before the loop starts.
"""

from __future__ import annotations

import enum
from collections import Counter
from dataclasses import dataclass
from typing import List

from loguru import logger

from .candidate import draw_candidate, separator_positions
from .config import DEFAULT_CONFIG, GeneratorConfig, clamp_length, parse_length
from .entropy import realized_entropy, structural_entropy
from .errors import ConfigurationError
from .oracle import (
    STRUCTURAL_MIN_LENGTH,
    AcceptanceGate,
    AcceptancePolicy,
    StrengthOracle,
    policy_from_name,
)
from .randomness import RandomSource, SystemRandomSource


class GenerationState(enum.Enum):
    DRAFTING = "drafting"
    CHECKING = "checking"
    ACCEPTED = "accepted"


@dataclass
class GenerationOutcome:
    """
    Full result of one password generation.
    """

    password: str
    length: int

    # Candidates drawn, including the accepted one.
    attempts: int

    # Entropy estimates in bits (see strongpw.entropy)
    structural_entropy_bits: float
    entropy_bits: float

    # zxcvbn score of the accepted password
    score: int
    policy: AcceptancePolicy
    separator_positions: tuple[int, ...]


def ensure_viable(length: int, policy: AcceptancePolicy) -> None:
    """
    Raise ConfigurationError if no candidate of `length` can pass `policy`.
    """
    if length < STRUCTURAL_MIN_LENGTH:
        raise ConfigurationError(
            f"Length {length} cannot hold every required character class "
            f"(minimum {STRUCTURAL_MIN_LENGTH})."
        )
    if not policy.is_viable(length):
        raise ConfigurationError(
            f"Length {length} can never satisfy the {policy.name} policy "
            f"(minimum viable length {policy.minimum_viable_length()})."
        )


def _wipe(buffer: List[str]) -> None:
    for i in range(len(buffer)):
        buffer[i] = ""


def generate_password_with_meta(
    length: int | str | None = None,
    *,
    config: GeneratorConfig | None = None,
    rng: RandomSource | None = None,
    oracle: StrengthOracle | None = None,
    policy: AcceptancePolicy | None = None,
) -> GenerationOutcome:
    """
    Generate one password of `length` characters (clamped to the supported
    range; the configured default when omitted or unparseable).

    - Draw a candidate from `rng`.
    - Run the structural checks, then the strength oracle under `policy`.
    - Repeat until one is accepted.
    """
    cfg = config or DEFAULT_CONFIG
    rng = rng or SystemRandomSource()
    policy = policy or policy_from_name(cfg.policy, cfg.min_score)
    requested = parse_length(length)
    length = clamp_length(cfg.default_length if requested is None else requested, cfg)

    ensure_viable(length, policy)

    gate = AcceptanceGate(policy=policy, oracle=oracle)
    buffer: List[str] = [""] * length
    attempts = 0
    rejections: Counter[str] = Counter()
    state = GenerationState.DRAFTING

    while state is not GenerationState.ACCEPTED:
        draw_candidate(length, rng, buffer)
        attempts += 1
        state = GenerationState.CHECKING

        reason = gate.evaluate(buffer)
        if reason is None:
            state = GenerationState.ACCEPTED
        else:
            rejections[reason] += 1
            _wipe(buffer)
            state = GenerationState.DRAFTING

    password = "".join(buffer)
    _wipe(buffer)

    assert gate.last_verdict is not None
    structural_bits = structural_entropy(length)
    logger.debug(
        "Accepted a {}-character password after {} attempt(s)", length, attempts
    )
    logger.trace("Rejections by reason: {}", dict(rejections))

    return GenerationOutcome(
        password=password,
        length=length,
        attempts=attempts,
        structural_entropy_bits=structural_bits,
        entropy_bits=realized_entropy(structural_bits, attempts),
        score=gate.last_verdict.score,
        policy=policy,
        separator_positions=separator_positions(length),
    )


def generate_password(
    length: int | str | None = None,
    *,
    config: GeneratorConfig | None = None,
    rng: RandomSource | None = None,
    oracle: StrengthOracle | None = None,
    policy: AcceptancePolicy | None = None,
) -> str:
    """
    Same as generate_password_with_meta, returning only the password.
    """
    meta = generate_password_with_meta(
        length, config=config, rng=rng, oracle=oracle, policy=policy
    )
    return meta.password
