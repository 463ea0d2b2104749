"""Parse state: the position-tracking side of the matcher collaborator.

The scanning engine never looks at the input directly. It asks a
ParseState to run a matcher at the current offset, to force one
codepoint forward, and for whatever input is left.
"""

from __future__ import annotations

from typing import TypeVar

from streamedit.types.core import MatchResult

from .matcher import Matcher, run_matcher, run_matcher_async

T = TypeVar("T")


class ParseState:
    """Input string plus the current codepoint offset."""

    __slots__ = ("_text", "_offset")

    def __init__(self, text: str, offset: int = 0):
        if not 0 <= offset <= len(text):
            raise ValueError(f"offset {offset} outside input of length {len(text)}")
        self._text = text
        self._offset = offset

    def __repr__(self) -> str:
        return f"ParseState(offset={self._offset}, length={len(self._text)})"

    @property
    def text(self) -> str:
        """The whole input."""
        return self._text

    @property
    def offset(self) -> int:
        """Current codepoint offset."""
        return self._offset

    @property
    def at_end(self) -> bool:
        return self._offset >= len(self._text)

    def attempt(self, matcher: Matcher[T]) -> MatchResult[T] | None:
        """Run a matcher at the current offset.

        On success the offset moves to the end of the match. On failure
        the offset is left where it was.
        """
        return self._commit(run_matcher(matcher, self._text, self._offset))

    async def attempt_async(self, matcher: Matcher[T]) -> MatchResult[T] | None:
        """Like attempt(), awaiting matchers that return awaitables."""
        return self._commit(await run_matcher_async(matcher, self._text, self._offset))

    def consume_one(self) -> str | None:
        """Advance exactly one codepoint.

        Returns:
            The codepoint consumed, or None at end of input.
        """
        if self._offset >= len(self._text):
            return None
        char = self._text[self._offset]
        self._offset += 1
        return char

    def remaining(self) -> str:
        """The unconsumed rest of the input."""
        return self._text[self._offset :]

    def _commit(self, result: MatchResult[T] | None) -> MatchResult[T] | None:
        if result is not None:
            self._offset = result.end
        return result
