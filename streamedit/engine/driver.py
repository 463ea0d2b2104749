"""Drivers for the engine's step generators.

The scan loop and the reconstruction pass are written once, as
generators that yield a request (an offset to try the matcher at, or a
match value to edit) and receive the answer back through ``send()``.
The synchronous driver answers each request with a plain call; the
asyncio driver awaits the answer when it is awaitable. Either way a
request is fully answered before the generator runs again, so matcher
and editor calls happen strictly one after another, in text order.

Any exception raised while answering a request propagates out of the
driver; the generator is closed and nothing it accumulated is returned.
Only the generator's own StopIteration ends a run: one raised by a
matcher or editor is never mistaken for the end of the steps.
"""

from __future__ import annotations

import inspect
from typing import Awaitable, Callable, Generator, TypeVar

from streamedit.patterns.matcher import discard_awaitable

Y = TypeVar("Y")
S = TypeVar("S")
R = TypeVar("R")

Steps = Generator[Y, S, R]

_DONE = object()


def _advance(steps: Steps[Y, S, R], reply: S | object = _DONE) -> tuple[bool, Y | R]:
    """Resume the generator once.

    Returns:
        ``(True, return_value)`` when the generator finished, otherwise
        ``(False, next_request)``.
    """
    try:
        if reply is _DONE:
            return False, next(steps)
        return False, steps.send(reply)
    except StopIteration as stop:
        return True, stop.value


def drive(steps: Steps[Y, S, R], answer: Callable[[Y], S]) -> R:
    """Run a step generator to completion with a synchronous answerer.

    Raises:
        TypeError: If ``answer`` returns an awaitable.
    """
    try:
        done, request = _advance(steps)
        while not done:
            reply = answer(request)
            if inspect.isawaitable(reply):
                discard_awaitable(reply)
                raise TypeError(
                    f"{answer!r} returned an awaitable; use the *_async variant of the operation"
                )
            done, request = _advance(steps, reply)
        return request
    finally:
        steps.close()


async def drive_async(
    steps: Steps[Y, S, R],
    answer: Callable[[Y], S | Awaitable[S]],
) -> R:
    """Run a step generator to completion, awaiting awaitable answers.

    A StopIteration escaping ``answer`` surfaces as RuntimeError, as it
    does from any coroutine.
    """
    try:
        done, request = _advance(steps)
        while not done:
            reply = answer(request)
            if inspect.isawaitable(reply):
                reply = await reply
            done, request = _advance(steps, reply)
        return request
    finally:
        steps.close()
