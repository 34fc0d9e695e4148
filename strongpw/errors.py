"""
Exceptions raised by the password generator.
"""


class StrongPwError(Exception):
    """Base class for every error the generator raises on purpose."""


class ConfigurationError(StrongPwError):
    """
    The requested length / policy combination can never produce a password.

    Raised before the generation loop starts, so a bad configuration fails
    fast instead of looping forever.
    """


class OracleError(ConfigurationError):
    """
    The strength oracle could not score a well-formed candidate.

    This is not retryable: re-submitting the same kind of string would fail
    the same way.
    """
