"""Turn a finished scan into an ordered segment list."""

from __future__ import annotations

from typing import Any

from streamedit.types.core import LiteralSegment, MatchSegment, Segment

from .scanner import ScanState


def build_segments(scan: ScanState[Any]) -> list[Segment]:
    """Build the split-and-capture result of a scan.

    Literal segments are only emitted for non-empty text, except when
    nothing matched: the result is then the single literal ``scan.term``,
    which is the whole scanned input (empty input included).

    Returns:
        A non-empty list of LiteralSegment / MatchSegment in text order.
    """
    term = scan.term
    if not scan.pairs:
        return [LiteralSegment(term)]

    segments: list[Segment] = []
    for literal, value in reversed(scan.pairs):
        if literal:
            segments.append(LiteralSegment(literal))
        segments.append(MatchSegment(value))
    if term:
        segments.append(LiteralSegment(term))
    return segments
