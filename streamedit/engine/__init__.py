"""Scanning engine.

Components:
- MatchScanner: drives a matcher over the whole input
- build_segments: scan result to an ordered segment list
- rebuild: scan result plus editor to an edited string
- break_on_first: first match only
"""

from .api import (
    AnyTill,
    SepCap,
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
from .reconstruct import rebuild, rebuild_async
from .scanner import MatchScanner, ScanState
from .segments import build_segments

__all__ = [
    "AnyTill",
    "MatchScanner",
    "ScanState",
    "SepCap",
    "any_till",
    "break_on_first",
    "break_on_first_async",
    "build_segments",
    "find_all",
    "rebuild",
    "rebuild_async",
    "sep_cap",
    "split_cap",
    "split_cap_async",
    "stream_edit",
    "stream_edit_async",
]
