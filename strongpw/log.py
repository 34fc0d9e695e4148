"""
Logging setup. Everything goes through loguru to stderr so stdout only ever
carries generated passwords.
"""

from __future__ import annotations

import logging
import sys

from loguru import logger


class InterceptHandler(logging.Handler):
    def emit(self, record: logging.LogRecord) -> None:
        # Get corresponding Loguru level
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller to get correct stack depth
        frame, depth = logging.currentframe(), 2
        while frame.f_back and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def configure_logging(level: str = "WARNING") -> None:
    """
    Route stdlib logging into loguru and send loguru output to stderr.
    Safe to call more than once; each call replaces the previous sinks.
    """
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

    logger.enable("strongpw")
    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format="<level>{level: <8}</level> | {name}:{function} - {message}",
        backtrace=False,
        diagnose=False,
    )
