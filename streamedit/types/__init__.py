"""
streamedit type definitions.

This module exports the value types and error types used across streamedit.
"""

# Core types
from .core import LiteralSegment, MatchResult, MatchSegment, Segment

# Error types
from .errors import (
    ConfigurationError,
    ErrorCode,
    ErrorContext,
    ErrorSeverity,
    MatcherContractError,
    PatternCompileError,
    RecoveryAction,
    ResourceError,
    StreamEditError,
)

__all__ = [
    # Core types
    "MatchResult",
    "LiteralSegment",
    "MatchSegment",
    "Segment",
    # Error types
    "ErrorCode",
    "ErrorSeverity",
    "RecoveryAction",
    "ErrorContext",
    "StreamEditError",
    "MatcherContractError",
    "PatternCompileError",
    "ConfigurationError",
    "ResourceError",
]
