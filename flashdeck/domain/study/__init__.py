"""
Study bounded context - Domain layer.

The study session is a client-side state machine over one immutable list of
cards: ordering (optionally shuffled), flip state, viewed/completed tracking,
navigation with timed slide transitions, keyboard shortcuts and completion.
Nothing here is persisted.
"""

from .scheduling import ImmediateTransitionScheduler, TransitionHandle, TransitionScheduler
from .session import (
    DEFAULT_TRANSITION_DELAY,
    SlideDirection,
    StudyCard,
    StudyKey,
    StudySession,
    StudySessionSnapshot,
)

__all__ = [
    "DEFAULT_TRANSITION_DELAY",
    "ImmediateTransitionScheduler",
    "SlideDirection",
    "StudyCard",
    "StudyKey",
    "StudySession",
    "StudySessionSnapshot",
    "TransitionHandle",
    "TransitionScheduler",
]
