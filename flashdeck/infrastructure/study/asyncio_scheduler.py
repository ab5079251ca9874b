"""Transition scheduling on an asyncio event loop."""

import asyncio
from collections.abc import Callable

from flashdeck.domain.study.scheduling import TransitionHandle


class AsyncioTransitionScheduler:
    """
    Defers transition commits with ``loop.call_later``.

    Without an explicit loop, the running loop is looked up on every call,
    so the scheduler must be used from inside a coroutine or callback.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def schedule(self, delay: float, callback: Callable[[], None]) -> TransitionHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(delay, callback)
