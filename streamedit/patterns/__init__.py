"""Matchers: the recognizers the scanning engine drives.

Components:
- Matcher / AsyncMatcher: abstract base classes
- ParseState: offset tracking used by the engine
- literal, regex, integer, any_char, char_if, empty, get_offset,
  function_matcher, choice: ready-made matchers

Usage:
    from streamedit.patterns import literal, regex

    needle = literal("needle")
    dated = regex(r"(\\d{4})-(\\d{2})-(\\d{2})")
"""

from .matcher import AsyncMatcher, Matcher, run_matcher, run_matcher_async, validate_result
from .state import ParseState
from .combinators import (
    CharIf,
    Choice,
    Empty,
    FunctionMatcher,
    GetOffset,
    Literal,
    Mapped,
    Regex,
    Sequence,
    WithSpan,
    any_char,
    char_if,
    choice,
    empty,
    function_matcher,
    get_offset,
    integer,
    literal,
    regex,
)

__all__ = [
    "AsyncMatcher",
    "CharIf",
    "Choice",
    "Empty",
    "FunctionMatcher",
    "GetOffset",
    "Literal",
    "Mapped",
    "Matcher",
    "ParseState",
    "Regex",
    "Sequence",
    "WithSpan",
    "any_char",
    "char_if",
    "choice",
    "empty",
    "function_matcher",
    "get_offset",
    "integer",
    "literal",
    "regex",
    "run_matcher",
    "run_matcher_async",
    "validate_result",
]
