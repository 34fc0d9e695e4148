"""
Strength oracle and acceptance policies.

The oracle is zxcvbn: it scores a string 0..4 and reports the sequence of
patterns (dictionary words, keyboard walks, dates, ...) it recognized.
Two policies interpret that answer:

- ScoreThreshold: the score must reach a minimum. By default the minimum
  depends on length (3 below 11 characters, 4 otherwise), because short
  strings cannot reach the top score.
- SinglePattern: zxcvbn must see exactly one pattern and it must be
  "bruteforce", i.e. nothing in the string is recognizable structure.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple, Union

from loguru import logger
from zxcvbn import zxcvbn

from .checks import structural_failure
from .errors import ConfigurationError, OracleError, StrongPwError

# Shortest string that can hold 2 uppers, a digit, a lower and a special.
STRUCTURAL_MIN_LENGTH = 5

SHORT_PASSWORD_LENGTH = 11

# zxcvbn scores a guess count g as the first i with g < SCORE_GUESS_LIMITS[i],
# otherwise 4.
SCORE_GUESS_LIMITS = (1e3 + 5, 1e6 + 5, 1e8 + 5, 1e10 + 5)


@dataclass(frozen=True)
class OracleVerdict:
    score: int
    patterns: Tuple[str, ...]


StrengthOracle = Callable[[str], OracleVerdict]


def zxcvbn_oracle(candidate: str) -> OracleVerdict:
    """
    Score `candidate` with zxcvbn.

    Raises OracleError if zxcvbn fails or returns something unusable.
    """
    try:
        result = zxcvbn(candidate)
        score = result["score"]
        patterns = tuple(match["pattern"] for match in result["sequence"])
    except Exception as exc:
        raise OracleError(f"zxcvbn could not score the candidate: {exc!r}") from exc

    if isinstance(score, bool) or not isinstance(score, int) or not 0 <= score <= 4:
        raise OracleError(f"zxcvbn returned an invalid score: {score!r}")

    return OracleVerdict(score=score, patterns=patterns)


def _max_bruteforce_score(length: int) -> int:
    # A fully random string costs zxcvbn at most 10**length + 1 guesses.
    guesses = 10**length + 1
    for score, limit in enumerate(SCORE_GUESS_LIMITS):
        if guesses < limit:
            return score
    return 4


@dataclass(frozen=True)
class ScoreThreshold:
    min_score: Optional[int] = None

    name = "threshold"

    def __post_init__(self) -> None:
        if self.min_score is not None and not 0 <= self.min_score <= 4:
            raise ConfigurationError(
                f"min_score must be between 0 and 4, got {self.min_score}"
            )

    def required_score(self, length: int) -> int:
        if self.min_score is not None:
            return self.min_score
        return 3 if length < SHORT_PASSWORD_LENGTH else 4

    def accepts(self, verdict: OracleVerdict, length: int) -> bool:
        return verdict.score >= self.required_score(length)

    def is_viable(self, length: int) -> bool:
        return (
            length >= STRUCTURAL_MIN_LENGTH
            and _max_bruteforce_score(length) >= self.required_score(length)
        )

    def minimum_viable_length(self) -> int:
        length = STRUCTURAL_MIN_LENGTH
        while not self.is_viable(length):
            length += 1
        return length


@dataclass(frozen=True)
class SinglePattern:
    name = "single-pattern"

    def accepts(self, verdict: OracleVerdict, length: int) -> bool:
        return verdict.patterns == ("bruteforce",)

    def is_viable(self, length: int) -> bool:
        return length >= STRUCTURAL_MIN_LENGTH

    def minimum_viable_length(self) -> int:
        return STRUCTURAL_MIN_LENGTH


AcceptancePolicy = Union[ScoreThreshold, SinglePattern]

POLICY_NAMES = (ScoreThreshold.name, SinglePattern.name)


def policy_from_name(name: str, min_score: Optional[int] = None) -> AcceptancePolicy:
    if name == ScoreThreshold.name:
        return ScoreThreshold(min_score)
    if name == SinglePattern.name:
        if min_score is not None:
            logger.warning("min_score is ignored by the single-pattern policy")
        return SinglePattern()
    raise ConfigurationError(
        f"Unknown acceptance policy {name!r}; expected one of {', '.join(POLICY_NAMES)}"
    )


class AcceptanceGate:
    """
    Structural checks first, then the oracle. Decides a candidate's fate.
    """

    def __init__(
        self,
        policy: AcceptancePolicy | None = None,
        oracle: StrengthOracle | None = None,
    ) -> None:
        self.policy = policy or ScoreThreshold()
        self.oracle = oracle or zxcvbn_oracle
        self.last_verdict: OracleVerdict | None = None

    def evaluate(self, candidate: Sequence[str]) -> Optional[str]:
        """
        Return None if the candidate is accepted, otherwise a short
        rejection reason.
        """
        self.last_verdict = None

        reason = structural_failure(candidate)
        if reason is not None:
            return reason

        try:
            verdict = self.oracle("".join(candidate))
        except StrongPwError:
            raise
        except Exception as exc:
            raise OracleError(f"Strength oracle failed: {exc!r}") from exc
        self.last_verdict = verdict
        if not self.policy.accepts(verdict, len(candidate)):
            return "weak"
        return None
