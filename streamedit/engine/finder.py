"""Find only the first match and split the input around it."""

from __future__ import annotations

from typing import Any, Generator, TypeVar

from streamedit.patterns.matcher import Matcher
from streamedit.patterns.state import ParseState

from .driver import drive, drive_async
from .scanner import skip_then_match

T = TypeVar("T")


def _break_steps(state: ParseState) -> Generator[None, Any, tuple[str, Any, str] | None]:
    found = yield from skip_then_match(state)
    if found is None:
        return None
    prefix, result, _ = found
    return prefix, result.value, state.remaining()


def break_on_first(text: str, matcher: Matcher[T]) -> tuple[str, T, str] | None:
    """Split ``text`` around the first match.

    Zero-width matches are returned as they are; nothing is forced
    forward because the scan stops here.

    Returns:
        ``(prefix, value, suffix)``, or None if the matcher succeeds nowhere.
    """
    state = ParseState(text)
    return drive(_break_steps(state), lambda _: state.attempt(matcher))


async def break_on_first_async(text: str, matcher: Matcher[T]) -> tuple[str, T, str] | None:
    """Async form of break_on_first()."""
    state = ParseState(text)
    return await drive_async(_break_steps(state), lambda _: state.attempt_async(matcher))
