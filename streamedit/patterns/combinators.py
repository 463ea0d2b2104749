"""Ready-made matchers and matcher combinators.

These cover the usual needs of a find/replace caller: plain text,
regular expressions anchored at the scan position, numbers, single
codepoints, zero-width probes and a handful of ways to combine them.

Usage:
    from streamedit.patterns import literal, integer, regex

    needle = literal("needle")
    number = integer()
    word = regex(r"\\w+").map(lambda m: m.group(0))

    # value is (matched_text, value)
    spanned = number.with_span()
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, TypeVar

from streamedit.types.core import MatchResult
from streamedit.types.errors import ErrorContext, PatternCompileError, RecoveryAction

from .matcher import Matcher, run_matcher, run_matcher_async

T = TypeVar("T")
U = TypeVar("U")


# ============================================================================
# Primitive matchers
# ============================================================================


class Literal(Matcher[str]):
    """Match a fixed string; the value is the source text it matched."""

    def __init__(self, expected: str, ignore_case: bool = False):
        self.expected = expected
        self.ignore_case = ignore_case
        self._folded = expected.lower() if ignore_case else expected

    def __repr__(self) -> str:
        return f"Literal({self.expected!r}, ignore_case={self.ignore_case})"

    def parse(self, text: str, pos: int) -> MatchResult[str] | None:
        end = pos + len(self.expected)
        candidate = text[pos:end]
        if len(candidate) != len(self.expected):
            return None
        if self.ignore_case:
            if candidate.lower() != self._folded:
                return None
        elif candidate != self.expected:
            return None
        return MatchResult(candidate, end)


class Regex(Matcher[re.Match]):
    """Match a regular expression anchored at the scan position.

    The value is the ``re.Match`` object, so group references and
    ``Match.expand()`` are available to editors.
    """

    _MAX_PATTERN_LENGTH = 1000

    def __init__(self, pattern: str | re.Pattern[str], flags: int = 0):
        if isinstance(pattern, re.Pattern):
            self._compiled = pattern
            return

        if len(pattern) > self._MAX_PATTERN_LENGTH:
            raise PatternCompileError(
                f"Regex pattern too long ({len(pattern)} chars, max {self._MAX_PATTERN_LENGTH})",
                user_message="Regular expression is too long.",
                context=ErrorContext(operation="compile", component="Regex"),
            )
        try:
            self._compiled = re.compile(pattern, flags)
        except re.error as e:
            raise PatternCompileError(
                f"Invalid regex pattern '{pattern[:100]}': {e}",
                user_message=f"Invalid regular expression: {e}",
                context=ErrorContext(
                    operation="compile",
                    component="Regex",
                    position=e.pos,
                    additional_info={"pattern": pattern[:100]},
                ),
                recovery_actions=[
                    RecoveryAction(description="Pass --literal to search for the text as-is")
                ],
                original_error=e,
            ) from e

    @property
    def pattern(self) -> re.Pattern[str]:
        return self._compiled

    def __repr__(self) -> str:
        return f"Regex({self._compiled.pattern!r})"

    def parse(self, text: str, pos: int) -> MatchResult[re.Match[str]] | None:
        match = self._compiled.match(text, pos)
        if match is None:
            return None
        return MatchResult(match, match.end())


class CharIf(Matcher[str]):
    """Match one codepoint satisfying a predicate."""

    def __init__(self, predicate: Callable[[str], bool], name: str = "char_if"):
        self.predicate = predicate
        self.name = name

    def __repr__(self) -> str:
        return f"CharIf({self.name})"

    def parse(self, text: str, pos: int) -> MatchResult[str] | None:
        if pos < len(text) and self.predicate(text[pos]):
            return MatchResult(text[pos], pos + 1)
        return None


class Empty(Matcher[T]):
    """Always succeed without consuming input."""

    def __init__(self, value: T = None):
        self.value = value

    def __repr__(self) -> str:
        return f"Empty({self.value!r})"

    def parse(self, text: str, pos: int) -> MatchResult[T]:
        return MatchResult(self.value, pos)


class GetOffset(Matcher[int]):
    """Zero-width matcher whose value is the offset it was tried at."""

    def __repr__(self) -> str:
        return "GetOffset()"

    def parse(self, text: str, pos: int) -> MatchResult[int]:
        return MatchResult(pos, pos)


class FunctionMatcher(Matcher[T]):
    """Adapt a plain ``fn(text, pos) -> MatchResult | None`` callable.

    The callable may be a coroutine function; the matcher is then only
    usable with the async operations.
    """

    def __init__(self, fn: Callable[[str, int], Any]):
        self.fn = fn

    def __repr__(self) -> str:
        return f"FunctionMatcher({getattr(self.fn, '__name__', self.fn)!r})"

    def parse(self, text: str, pos: int) -> Any:
        return self.fn(text, pos)


# ============================================================================
# Derived matchers
# ============================================================================


@dataclass(frozen=True)
class Mapped(Matcher[U]):
    """Apply a function to the value of a successful match."""

    inner: Matcher[Any]
    fn: Callable[[Any], U]

    def parse(self, text: str, pos: int) -> MatchResult[U] | None:
        return self._finish(run_matcher(self.inner, text, pos))

    async def parse_async(self, text: str, pos: int) -> MatchResult[U] | None:
        return self._finish(await run_matcher_async(self.inner, text, pos))

    def _finish(self, result: MatchResult[Any] | None) -> MatchResult[U] | None:
        if result is None:
            return None
        return MatchResult(self.fn(result.value), result.end)


@dataclass(frozen=True)
class WithSpan(Matcher[tuple[str, Any]]):
    """Pair a match value with the source text the match consumed."""

    inner: Matcher[Any]

    def parse(self, text: str, pos: int) -> MatchResult[tuple[str, Any]] | None:
        return _spanned(text, pos, run_matcher(self.inner, text, pos))

    async def parse_async(self, text: str, pos: int) -> MatchResult[tuple[str, Any]] | None:
        return _spanned(text, pos, await run_matcher_async(self.inner, text, pos))


def _spanned(text: str, pos: int, result: MatchResult[Any] | None) -> MatchResult[tuple[str, Any]] | None:
    if result is None:
        return None
    return MatchResult((text[pos : result.end], result.value), result.end)


@dataclass(frozen=True)
class Sequence(Matcher[tuple[Any, Any]]):
    """Match ``first`` then ``second``; fail as a whole if either fails."""

    first: Matcher[Any]
    second: Matcher[Any]

    def parse(self, text: str, pos: int) -> MatchResult[tuple[Any, Any]] | None:
        head = run_matcher(self.first, text, pos)
        if head is None:
            return None
        tail = run_matcher(self.second, text, head.end)
        if tail is None:
            return None
        return MatchResult((head.value, tail.value), tail.end)

    async def parse_async(self, text: str, pos: int) -> MatchResult[tuple[Any, Any]] | None:
        head = await run_matcher_async(self.first, text, pos)
        if head is None:
            return None
        tail = await run_matcher_async(self.second, text, head.end)
        if tail is None:
            return None
        return MatchResult((head.value, tail.value), tail.end)


@dataclass(frozen=True)
class Choice(Matcher[Any]):
    """Try alternatives in order at the same offset; first success wins."""

    alternatives: tuple[Matcher[Any], ...]

    def parse(self, text: str, pos: int) -> MatchResult[Any] | None:
        for alternative in self.alternatives:
            result = run_matcher(alternative, text, pos)
            if result is not None:
                return result
        return None

    async def parse_async(self, text: str, pos: int) -> MatchResult[Any] | None:
        for alternative in self.alternatives:
            result = await run_matcher_async(alternative, text, pos)
            if result is not None:
                return result
        return None


# ============================================================================
# Factory functions
# ============================================================================


def literal(expected: str, ignore_case: bool = False) -> Literal:
    """Match ``expected`` exactly (or case-insensitively)."""
    return Literal(expected, ignore_case=ignore_case)


def regex(pattern: str | re.Pattern[str], flags: int = 0) -> Regex:
    """Match a regular expression at the scan position.

    Raises:
        PatternCompileError: If the pattern does not compile.
    """
    return Regex(pattern, flags)


def integer(signed: bool = False) -> Matcher[int]:
    """Match a run of ASCII decimal digits; the value is an ``int``.

    Args:
        signed: Also accept one leading ``+`` or ``-``.
    """
    pattern = r"[+-]?[0-9]+" if signed else r"[0-9]+"
    return Regex(pattern).map(lambda m: int(m.group(0)))


def any_char() -> CharIf:
    """Match any single codepoint."""
    return CharIf(lambda _: True, name="any_char")


def char_if(predicate: Callable[[str], bool], name: str = "char_if") -> CharIf:
    """Match one codepoint for which ``predicate`` is true."""
    return CharIf(predicate, name=name)


def empty(value: T = None) -> Empty[T]:
    """Succeed everywhere, consuming nothing."""
    return Empty(value)


def get_offset() -> GetOffset:
    """Zero-width matcher producing the current offset."""
    return GetOffset()


def function_matcher(fn: Callable[[str, int], Any]) -> FunctionMatcher[Any]:
    """Wrap a ``fn(text, pos) -> MatchResult | None`` callable."""
    return FunctionMatcher(fn)


def choice(*matchers: Matcher[Any]) -> Choice:
    """First alternative that matches wins.

    Nested choices are flattened.
    """
    if not matchers:
        raise ValueError("choice() needs at least one matcher")
    flat: list[Matcher[Any]] = []
    for m in matchers:
        if isinstance(m, Choice):
            flat.extend(m.alternatives)
        else:
            flat.append(m)
    return Choice(tuple(flat))
