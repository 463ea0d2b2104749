"""Match scanner: find every leftmost, non-overlapping match.

The scanner drives a matcher across the whole input and records, for
each match, the literal text skipped before it and the match value.
Three states:

- Scanning: try the matcher at each successive offset until it succeeds
  or the input runs out (the end-of-input offset is tried too).
- ZeroWidthRecovery: after a match that consumed nothing, force one
  codepoint forward. That codepoint (the carry) belongs to the next
  literal, or to the remainder if nothing else matches.
- Done: no further match; the unconsumed input is the remainder.

Every pass around the loop advances at least one codepoint, so the scan
terminates for any matcher, including one that always succeeds without
consuming input.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Any, Generator, Generic, TypeVar

from streamedit.patterns.matcher import Matcher
from streamedit.patterns.state import ParseState
from streamedit.types.core import MatchResult
from streamedit.utils.logger import logger

from .driver import drive, drive_async

T = TypeVar("T")


@dataclass
class ScanState(Generic[T]):
    """Everything a finished scan hands to its consumer.

    ``pairs`` holds ``(literal, value)`` newest-first: each match is
    pushed on the left, and consumers that need text order walk it in
    reverse. ``slot_count`` is kept in step with ``pairs`` (one slot for
    the value, one more when the literal is non-empty) so the
    reconstruction buffer can be sized without another pass.
    """

    pairs: deque[tuple[str, T]] = field(default_factory=deque)
    carry: str | None = None
    slot_count: int = 0
    remainder: str = ""
    zero_width: int = 0

    def record(self, literal: str, value: T) -> None:
        """Push a match; a pending carry is folded into its literal."""
        if self.carry is not None:
            literal = self.carry + literal
            self.carry = None
        self.pairs.appendleft((literal, value))
        self.slot_count += 2 if literal else 1

    @property
    def match_count(self) -> int:
        return len(self.pairs)

    @property
    def term(self) -> str:
        """Trailing text after the last match: carry plus remainder."""
        if self.carry is None:
            return self.remainder
        return self.carry + self.remainder


def skip_then_match(state: ParseState) -> Generator[None, Any, tuple[str, MatchResult[Any], int] | None]:
    """One Scanning step.

    Tries the matcher at the current offset and at every offset after it,
    up to and including the end of input.

    Returns:
        ``(skipped_text, result, match_start)`` for the first success, or
        None when the input ran out first. On None the state is left at the
        end of input.
    """
    start = state.offset
    while True:
        here = state.offset
        result = yield
        if result is not None:
            return state.text[start:here], result, here
        if state.consume_one() is None:
            return None


def scan_steps(state: ParseState) -> Generator[None, Any, ScanState[Any]]:
    """The scan loop as a step generator; see the module docstring."""
    scan: ScanState[Any] = ScanState()
    while True:
        step_start = state.offset
        found = yield from skip_then_match(state)
        if found is None:
            scan.remainder = state.text[step_start:]
            return scan

        literal, result, match_start = found
        scan.record(literal, result.value)
        if result.end > match_start:
            continue

        scan.zero_width += 1
        carry = state.consume_one()
        if carry is None:
            return scan
        scan.carry = carry


class MatchScanner(Generic[T]):
    """Run a matcher over a whole string.

    Usage:
        scanner = MatchScanner(integer())
        state = scanner.scan("hay 1 straw 2 hay")
        state.match_count  # 2
    """

    def __init__(self, matcher: Matcher[T]):
        self.matcher = matcher

    def scan(self, text: str, offset: int = 0) -> ScanState[T]:
        """Scan ``text`` from ``offset`` with synchronous matcher calls."""
        state = ParseState(text, offset)
        scan = drive(scan_steps(state), lambda _: state.attempt(self.matcher))
        self._log_summary(text, scan)
        return scan

    async def scan_async(self, text: str, offset: int = 0) -> ScanState[T]:
        """Scan ``text`` from ``offset``, awaiting asynchronous matchers."""
        state = ParseState(text, offset)
        scan = await drive_async(scan_steps(state), lambda _: state.attempt_async(self.matcher))
        self._log_summary(text, scan)
        return scan

    def _log_summary(self, text: str, scan: ScanState[T]) -> None:
        logger.debug(
            "Scanned {} codepoints with {!r}: {} matches, {} zero-width",
            len(text),
            self.matcher,
            scan.match_count,
            scan.zero_width,
        )
