import os

import pytest

# Must be set before PySide6 creates an application.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from strongpw.oracle import OracleVerdict  # noqa: E402
from strongpw.randomness import SeededRandomSource  # noqa: E402


@pytest.fixture
def seeded_rng():
    return SeededRandomSource(1234)


@pytest.fixture
def accept_all_oracle():
    """Oracle stub that scores everything as unstructured and maximal."""

    def oracle(candidate):
        return OracleVerdict(score=4, patterns=("bruteforce",))

    return oracle


@pytest.fixture
def counting_oracle():
    """Oracle stub that rejects the first `reject` scored candidates."""

    class CountingOracle:
        def __init__(self, reject=0):
            self.reject = reject
            self.calls = 0

        def __call__(self, candidate):
            self.calls += 1
            score = 0 if self.calls <= self.reject else 4
            return OracleVerdict(score=score, patterns=("bruteforce",))

    return CountingOracle


@pytest.fixture(autouse=True)
def quiet_library_logging():
    """cli.main turns package logging on; put it back to the library default."""
    yield
    from loguru import logger

    logger.disable("strongpw")
