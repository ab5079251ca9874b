"""
Deferred commits for card transitions.

Advancing or retreating starts a short slide transition; the position only
changes once the transition finishes. The session asks a scheduler to run
the commit later instead of sleeping, so the event loop keeps running.
"""

from collections.abc import Callable
from typing import Protocol


class TransitionHandle(Protocol):
    """A scheduled commit that can still be cancelled."""

    def cancel(self) -> None: ...


class TransitionScheduler(Protocol):
    """Runs a callback once ``delay`` seconds have passed."""

    def schedule(self, delay: float, callback: Callable[[], None]) -> TransitionHandle: ...


class _CompletedHandle:
    def cancel(self) -> None:
        """Nothing left to cancel."""


class ImmediateTransitionScheduler:
    """
    Runs the commit synchronously.

    For clients without animations (terminals, scripts) where the slide has
    no visible duration.
    """

    def schedule(self, delay: float, callback: Callable[[], None]) -> TransitionHandle:
        callback()
        return _CompletedHandle()
