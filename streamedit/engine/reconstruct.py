"""Rebuild an edited string from a finished scan.

The output is assembled in a list sized exactly from
``ScanState.slot_count`` (plus one slot for trailing text) and joined
once, so the cost stays linear in the output no matter how many
matches there are.
"""

from __future__ import annotations

from typing import Any, Awaitable, Callable, Generator

from .driver import drive, drive_async
from .scanner import ScanState

Editor = Callable[[Any], str]
AsyncEditor = Callable[[Any], "str | Awaitable[str]"]


def fill_steps(scan: ScanState[Any]) -> Generator[Any, str, str]:
    """Reconstruction as a step generator.

    Yields each match value in text order and expects the replacement
    text back. Returns the joined output.
    """
    term = scan.term
    slots: list[str] = [""] * (scan.slot_count + (1 if term else 0))
    if term:
        slots[-1] = term

    cursor = 0
    for literal, value in reversed(scan.pairs):
        if literal:
            slots[cursor] = literal
            cursor += 1
        replacement = yield value
        if not isinstance(replacement, str):
            raise TypeError(
                f"editor returned {type(replacement).__name__} for {value!r}, expected str"
            )
        slots[cursor] = replacement
        cursor += 1

    return "".join(slots)


def rebuild(scan: ScanState[Any], editor: Editor) -> str:
    """Apply ``editor`` to every match, in text order, and join the result."""
    return drive(fill_steps(scan), editor)


async def rebuild_async(scan: ScanState[Any], editor: AsyncEditor) -> str:
    """Like rebuild(), awaiting editors that return awaitables."""
    return await drive_async(fill_steps(scan), editor)
