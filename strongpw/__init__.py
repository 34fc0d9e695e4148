"""
Strong password generator package.
"""

from loguru import logger

from .config import GeneratorConfig, DEFAULT_CONFIG, resolve_length
from .errors import ConfigurationError, OracleError, StrongPwError
from .generator import GenerationOutcome, generate_password, generate_password_with_meta
from .oracle import ScoreThreshold, SinglePattern

__all__ = [
    "GeneratorConfig",
    "DEFAULT_CONFIG",
    "resolve_length",
    "GenerationOutcome",
    "generate_password",
    "generate_password_with_meta",
    "ScoreThreshold",
    "SinglePattern",
    "StrongPwError",
    "ConfigurationError",
    "OracleError",
]

# Library calls stay silent; the CLI turns logging on via configure_logging.
logger.disable("strongpw")
