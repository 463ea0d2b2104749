"""
Core value types shared by matchers and the scanning engine.

Offsets are codepoint indices into a Python ``str``.
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class MatchResult(Generic[T]):
    """A successful matcher invocation.

    ``end`` is the offset just past the consumed text; a zero-width match
    has ``end`` equal to the offset it was tried at.
    """

    value: T
    end: int


@dataclass(frozen=True)
class LiteralSegment:
    """Input text that no match covered."""

    text: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"literal": self.text}


@dataclass(frozen=True)
class MatchSegment(Generic[T]):
    """The value produced by one successful match."""

    value: T

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"match": self.value}


Segment = Union[LiteralSegment, MatchSegment]
