"""
Logging setup for streamedit.

streamedit is a library first: the package disables its own loguru
records on import so that embedding applications are not flooded with
scan chatter. Applications (and the bundled CLI) opt back in with
configure_logging(), which installs a single stderr sink.

Level selection:
- STREAMEDIT_DEBUG=true forces DEBUG
- STREAMEDIT_LOG_LEVEL picks any loguru level name
- otherwise WARNING
"""

import os
import sys

from loguru import logger as loguru_logger

from streamedit.constants import (
    DEFAULT_LOG_LEVEL,
    ENV_DEBUG,
    ENV_LOG_LEVEL,
    LOG_FORMAT,
    LOG_LEVELS,
)
from streamedit.types.errors import ConfigurationError, ErrorContext, RecoveryAction

PACKAGE_NAME = "streamedit"


def is_debug_enabled() -> bool:
    """Check if debug mode is enabled."""
    return os.environ.get(ENV_DEBUG, "").lower() == "true"


def resolve_log_level(level: str | None = None) -> str:
    """
    Work out which level to log at.

    An explicit argument wins, then the debug switch, then the level
    variable, then the default.

    Raises:
        ConfigurationError: If the chosen level is not a loguru level name.
    """
    if level is None:
        if is_debug_enabled():
            return "DEBUG"
        level = os.environ.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL)

    normalized = level.strip().upper()
    if normalized not in LOG_LEVELS:
        raise ConfigurationError(
            f"Unknown log level {level!r}",
            user_message=f"'{level}' is not a valid log level.",
            context=ErrorContext(
                operation="configure_logging",
                component="logger",
                additional_info={"allowed": list(LOG_LEVELS)},
            ),
            recovery_actions=[
                RecoveryAction(
                    description=f"Set {ENV_LOG_LEVEL} to one of: {', '.join(LOG_LEVELS)}",
                    command=f"export {ENV_LOG_LEVEL}=WARNING",
                )
            ],
        )
    return normalized


def configure_logging(level: str | None = None) -> str:
    """
    Enable streamedit logging on stderr.

    Replaces every existing loguru sink with one stderr sink, so calling it
    twice does not duplicate output.

    Args:
        level: Optional explicit level; see resolve_log_level().

    Returns:
        The level that was applied.
    """
    resolved = resolve_log_level(level)
    loguru_logger.remove()
    loguru_logger.add(sys.stderr, level=resolved, format=LOG_FORMAT)
    loguru_logger.enable(PACKAGE_NAME)
    return resolved


# Export loguru logger for direct use
logger = loguru_logger
