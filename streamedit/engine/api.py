"""Public find/split/replace operations.

Every operation comes in a synchronous form and an ``*_async`` form with
the same contract. The async forms accept matchers and editors that
return awaitables and await each one before making the next call, so
effects happen in the order the matches appear in the text.

Exceptions raised by a matcher or an editor propagate unchanged and no
partial result is returned.
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from streamedit.patterns.matcher import Matcher
from streamedit.patterns.state import ParseState
from streamedit.types.core import MatchResult, Segment

from .driver import drive, drive_async
from .finder import break_on_first, break_on_first_async
from .reconstruct import AsyncEditor, rebuild, rebuild_async
from .scanner import MatchScanner, skip_then_match
from .segments import build_segments

T = TypeVar("T")

__all__ = [
    "AnyTill",
    "SepCap",
    "any_till",
    "break_on_first",
    "break_on_first_async",
    "find_all",
    "sep_cap",
    "split_cap",
    "split_cap_async",
    "stream_edit",
    "stream_edit_async",
]


def split_cap(text: str, matcher: Matcher[T]) -> list[Segment]:
    """Split ``text`` into literal and match segments.

    Example:
        >>> split_cap("hay 1 straw 2 hay", integer())
        [LiteralSegment(text='hay '), MatchSegment(value=1),
         LiteralSegment(text=' straw '), MatchSegment(value=2),
         LiteralSegment(text=' hay')]

    Returns:
        A non-empty list; ``[LiteralSegment(text)]`` when nothing matches.
    """
    return build_segments(MatchScanner(matcher).scan(text))


async def split_cap_async(text: str, matcher: Matcher[T]) -> list[Segment]:
    """Async form of split_cap()."""
    return build_segments(await MatchScanner(matcher).scan_async(text))


def stream_edit(text: str, matcher: Matcher[T], editor: Callable[[T], str]) -> str:
    """Replace every match with ``editor(value)``.

    Text outside the matches is copied unchanged. The editor runs once
    per match, left to right.
    """
    return rebuild(MatchScanner(matcher).scan(text), editor)


async def stream_edit_async(text: str, matcher: Matcher[T], editor: AsyncEditor) -> str:
    """Async form of stream_edit().

    The whole scan completes before the first editor call.
    """
    scan = await MatchScanner(matcher).scan_async(text)
    return await rebuild_async(scan, editor)


def find_all(text: str, matcher: Matcher[T]) -> list[T]:
    """Values of all leftmost, non-overlapping matches, in order."""
    scan = MatchScanner(matcher).scan(text)
    return [value for _, value in reversed(scan.pairs)]


# ============================================================================
# The same operations as matchers, for use inside larger matchers
# ============================================================================


class AnyTill(Matcher[tuple[str, Any]]):
    """Skip input until ``inner`` matches; value is ``(skipped, value)``."""

    def __init__(self, inner: Matcher[Any]):
        self.inner = inner

    def __repr__(self) -> str:
        return f"AnyTill({self.inner!r})"

    def parse(self, text: str, pos: int) -> MatchResult[tuple[str, Any]] | None:
        state = ParseState(text, pos)
        found = drive(skip_then_match(state), lambda _: state.attempt(self.inner))
        return _skipped_pair(found)

    async def parse_async(self, text: str, pos: int) -> MatchResult[tuple[str, Any]] | None:
        state = ParseState(text, pos)
        found = await drive_async(skip_then_match(state), lambda _: state.attempt_async(self.inner))
        return _skipped_pair(found)


def _skipped_pair(found: tuple[str, MatchResult[Any], int] | None) -> MatchResult[tuple[str, Any]] | None:
    if found is None:
        return None
    skipped, result, _ = found
    return MatchResult((skipped, result.value), result.end)


class SepCap(Matcher[list[Segment]]):
    """Consume the rest of the input, splitting it like split_cap()."""

    def __init__(self, inner: Matcher[Any]):
        self.inner = inner

    def __repr__(self) -> str:
        return f"SepCap({self.inner!r})"

    def parse(self, text: str, pos: int) -> MatchResult[list[Segment]]:
        scan = MatchScanner(self.inner).scan(text, pos)
        return MatchResult(build_segments(scan), len(text))

    async def parse_async(self, text: str, pos: int) -> MatchResult[list[Segment]]:
        scan = await MatchScanner(self.inner).scan_async(text, pos)
        return MatchResult(build_segments(scan), len(text))


def any_till(matcher: Matcher[T]) -> AnyTill:
    """Matcher form of one skip-then-match step."""
    return AnyTill(matcher)


def sep_cap(matcher: Matcher[T]) -> SepCap:
    """Matcher form of split_cap() over the remaining input."""
    return SepCap(matcher)
