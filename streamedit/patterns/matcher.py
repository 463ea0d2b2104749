"""Matcher base classes.

A matcher is a backtracking recognizer: tried at an offset of a string,
it either succeeds with a MatchResult or fails by returning None. Failure
never consumes input, so the engine can retry at the next offset without
any bookkeeping.

Matchers whose parse() returns an awaitable are accepted by the async
operations only.
"""

from __future__ import annotations

import inspect
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Generic, TypeVar

from streamedit.types.core import MatchResult
from streamedit.types.errors import ErrorContext, MatcherContractError, RecoveryAction

T = TypeVar("T")
U = TypeVar("U")


class Matcher(ABC, Generic[T]):
    """Abstract base class for matchers.

    Implementations must provide parse(). The combinator methods build
    derived matchers that run synchronous matchers in the synchronous
    operations and any matcher in the async ones.
    """

    @abstractmethod
    def parse(self, text: str, pos: int) -> MatchResult[T] | None:
        """Try to match at ``pos``.

        Args:
            text: The whole input.
            pos: Codepoint offset to match at (may equal ``len(text)``).

        Returns:
            MatchResult on success, None on failure.
        """

    async def parse_async(self, text: str, pos: int) -> MatchResult[T] | None:
        """Awaitable form of parse(), used by the async operations.

        Awaits parse() when it returns an awaitable. Matchers built from
        other matchers override this to run their parts asynchronously.
        """
        result = self.parse(text, pos)
        if inspect.isawaitable(result):
            result = await result
        return result

    def map(self, fn: Callable[[T], U]) -> Matcher[U]:
        """Transform the value of every successful match."""
        from .combinators import Mapped

        return Mapped(self, fn)

    def with_span(self) -> Matcher[tuple[str, T]]:
        """Pair every value with the source text it consumed."""
        from .combinators import WithSpan

        return WithSpan(self)

    def then(self, other: Matcher[U]) -> Matcher[tuple[T, U]]:
        """Match self, then other right after it."""
        from .combinators import Sequence

        return Sequence(self, other)

    def __or__(self, other: Matcher[Any]) -> Matcher[Any]:
        from .combinators import choice

        return choice(self, other)


class AsyncMatcher(Matcher[T]):
    """Matcher whose parse() is a coroutine.

    Useful when recognizing a match needs I/O (a lookup table fetched on
    demand, an environment query). Only the ``*_async`` operations can run
    it.
    """

    @abstractmethod
    async def parse(self, text: str, pos: int) -> MatchResult[T] | None:  # type: ignore[override]
        """Try to match at ``pos``; see Matcher.parse()."""


def validate_result(
    result: Any,
    text: str,
    pos: int,
    matcher: Any = None,
) -> MatchResult | None:
    """Check a parse() result against the matcher contract.

    Args:
        result: What parse() returned (already awaited).
        text: The input the matcher ran on.
        pos: Offset the matcher was tried at.
        matcher: The matcher, for error context.

    Returns:
        The result unchanged.

    Raises:
        MatcherContractError: If the result is not None or a MatchResult,
            or its end offset lies outside ``[pos, len(text)]``.
    """
    if result is None:
        return None

    if not isinstance(result, MatchResult):
        raise MatcherContractError(
            f"Matcher {matcher!r} returned {type(result).__name__}, expected MatchResult or None",
            context=ErrorContext(
                operation="parse",
                component=type(matcher).__name__,
                position=pos,
            ),
        )

    if result.end < pos or result.end > len(text):
        raise MatcherContractError(
            f"Matcher {matcher!r} returned end={result.end} when tried at {pos} "
            f"on input of length {len(text)}",
            context=ErrorContext(
                operation="parse",
                component=type(matcher).__name__,
                position=pos,
                additional_info={"end": result.end, "length": len(text)},
            ),
            recovery_actions=[
                RecoveryAction(
                    description="Return an end offset between the start offset and len(text)"
                )
            ],
        )

    return result


def run_matcher(matcher: Matcher[T], text: str, pos: int) -> MatchResult[T] | None:
    """Run a synchronous matcher and validate its result.

    Raises:
        MatcherContractError: If the matcher is asynchronous or breaks
            the result contract.
    """
    result = matcher.parse(text, pos)
    if inspect.isawaitable(result):
        discard_awaitable(result)
        raise MatcherContractError(
            f"Matcher {matcher!r} is asynchronous",
            user_message="An asynchronous matcher was used in a synchronous operation.",
            context=ErrorContext(
                operation="parse",
                component=type(matcher).__name__,
                position=pos,
            ),
            recovery_actions=[
                RecoveryAction(description="Use the *_async variant of the operation")
            ],
        )
    return validate_result(result, text, pos, matcher)


async def run_matcher_async(matcher: Matcher[T], text: str, pos: int) -> MatchResult[T] | None:
    """Run a matcher through parse_async() and validate its result."""
    result = await matcher.parse_async(text, pos)
    return validate_result(result, text, pos, matcher)


def discard_awaitable(awaitable: Awaitable[Any]) -> None:
    """Close a never-awaited coroutine so it does not warn on collection."""
    close = getattr(awaitable, "close", None)
    if close is not None:
        close()
