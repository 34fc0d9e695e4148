"""
Configuration for the password generator.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from loguru import logger

# Supported password lengths. Anything outside this range is clamped.
MIN_LENGTH = 9
MAX_LENGTH = 64
DEFAULT_LENGTH = 12

# Passwords at least this long get block separators for readability.
LONG_PASSWORD_THRESHOLD = 16
BLOCK_SIZE = 8

PRESETS: dict[str, int] = {
    "weak": 10,
    "default": DEFAULT_LENGTH,
    "strong": 20,
}


@dataclass
class GeneratorConfig:
    # Acceptance policy: "threshold" (zxcvbn score) or "single-pattern".
    policy: str = "threshold"

    # Fixed minimum zxcvbn score. None means length dependent
    # (3 below 11 characters, 4 otherwise).
    min_score: int | None = None

    min_length: int = MIN_LENGTH
    max_length: int = MAX_LENGTH
    default_length: int = DEFAULT_LENGTH

    # Seconds the clipboard keeps the password before it is cleared.
    clipboard_timeout: float = 15.0

    # Quantum random source settings (only used with --quantum).
    # NOTE: Keep num_qubits <= backend limit (often 20–29 for local simulators).
    num_qubits: int = 20
    entropy_rounds: int = 2


# Default configuration instance you can import elsewhere
DEFAULT_CONFIG = GeneratorConfig()


def parse_length(value: object) -> int | None:
    """
    Parse a requested length. Missing or unparseable input means "not set".
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(str(value).strip())
    except ValueError:
        logger.debug("Ignoring unparseable length {!r}", value)
        return None


def parse_entropy(value: object) -> float | None:
    """
    Parse a requested entropy in bits. Missing, unparseable or non-finite
    input means "not set".
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        bits = float(str(value).strip())
    except ValueError:
        logger.debug("Ignoring unparseable entropy {!r}", value)
        return None
    if not math.isfinite(bits):
        return None
    return bits


def clamp_length(length: int, config: GeneratorConfig | None = None) -> int:
    cfg = config or DEFAULT_CONFIG
    clamped = min(max(length, cfg.min_length), cfg.max_length)
    if clamped != length:
        logger.debug("Clamped length {} to {}", length, clamped)
    return clamped


def resolve_length(
    length: object = None,
    entropy: object = None,
    preset: str | None = None,
    config: GeneratorConfig | None = None,
) -> int:
    """
    Turn the user's request into a concrete, supported length.

    Precedence:
    - explicit length
    - explicit entropy target (bits)
    - named preset
    - configured default
    """
    # .entropy imports this module at load time.
    from .entropy import length_for_entropy

    cfg = config or DEFAULT_CONFIG

    requested = parse_length(length)
    if requested is not None:
        return clamp_length(requested, cfg)

    bits = parse_entropy(entropy)
    if bits is not None:
        return clamp_length(length_for_entropy(bits), cfg)

    if preset is not None:
        if preset in PRESETS:
            return clamp_length(PRESETS[preset], cfg)
        logger.warning("Unknown preset {!r}, using the default length", preset)

    return clamp_length(cfg.default_length, cfg)
