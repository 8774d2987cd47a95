"""Centralized logging configuration."""

import sys

from loguru import logger

log_format = " | ".join(
    (
        "<lk>{time:YYYY-MM-DD HH:mm:ss.SSS}</>",
        "<lvl>{level:<8}</>",
        "<c>{name}:{function}:{line}</>",
        "{message}",
    )
)


def logging_configure(level: str = "INFO") -> None:
    """Replace loguru's default handler with a single stdout sink.

    Args:
        level: Minimum level emitted to stdout.

    Returns:
        None: The global logger is configured as a side effect.
    """

    logger.remove()  # drop default stderr handler to avoid duplicate output
    logger.add(sys.stdout, format=log_format, level=level)
