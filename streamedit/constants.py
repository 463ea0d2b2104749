"""Shared constants for streamedit.

Centralizes environment variable names, logging defaults and CLI
input/output settings.
"""

from datetime import datetime, timezone


def utcnow() -> datetime:
    """Return the current UTC time as a timezone-aware datetime.

    Stamps every ErrorContext when it is created.
    """
    return datetime.now(timezone.utc)


# Environment variables read by the logging setup
ENV_LOG_LEVEL: str = "STREAMEDIT_LOG_LEVEL"
ENV_DEBUG: str = "STREAMEDIT_DEBUG"

# Level used when neither variable is set
DEFAULT_LOG_LEVEL: str = "WARNING"

# Levels accepted from the environment (loguru level names)
LOG_LEVELS: tuple[str, ...] = (
    "TRACE",
    "DEBUG",
    "INFO",
    "SUCCESS",
    "WARNING",
    "ERROR",
    "CRITICAL",
)

LOG_FORMAT: str = (
    "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)

# Encoding used by the CLI for files and stdin
DEFAULT_ENCODING: str = "utf-8"

# Exit codes used by the CLI
EXIT_NO_MATCH: int = 1
EXIT_ERROR: int = 2
