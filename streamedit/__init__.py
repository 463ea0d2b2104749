"""
streamedit - find, split and replace with arbitrary matchers.

A drop-in alternative to regular-expression find/replace in which the
thing being searched for is any backtracking matcher, not just a regex:
- break_on_first: split the input around its first match
- split_cap: split the input into literal and match segments
- stream_edit: rebuild the input with every match replaced

Matchers producing typed values (numbers, tuples, parse trees) flow
straight through to segments and editors.
"""

from loguru import logger as _logger

from .engine import (
    any_till,
    break_on_first,
    break_on_first_async,
    find_all,
    sep_cap,
    split_cap,
    split_cap_async,
    stream_edit,
    stream_edit_async,
)
from .patterns import (
    AsyncMatcher,
    Matcher,
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
from .types import LiteralSegment, MatchResult, MatchSegment, Segment, StreamEditError

__version__ = "0.1.0"

_logger.disable(__name__)

__all__ = [
    "__version__",
    # Operations
    "break_on_first",
    "break_on_first_async",
    "split_cap",
    "split_cap_async",
    "stream_edit",
    "stream_edit_async",
    "find_all",
    "any_till",
    "sep_cap",
    # Matchers
    "Matcher",
    "AsyncMatcher",
    "literal",
    "regex",
    "integer",
    "any_char",
    "char_if",
    "empty",
    "get_offset",
    "function_matcher",
    "choice",
    # Types
    "MatchResult",
    "LiteralSegment",
    "MatchSegment",
    "Segment",
    "StreamEditError",
]
