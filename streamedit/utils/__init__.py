"""
streamedit utility modules.

- Logging (loguru, disabled for the library until configured)
"""

from .logger import (
    PACKAGE_NAME,
    configure_logging,
    is_debug_enabled,
    logger,
    resolve_log_level,
)

__all__ = [
    "PACKAGE_NAME",
    "configure_logging",
    "is_debug_enabled",
    "logger",
    "resolve_log_level",
]
