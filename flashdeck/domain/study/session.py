"""
Study session: one pass over a fixed list of cards.

The session lives only in memory on the client that drives it. It never
writes to the database; leaving the study view discards it, and coming
back starts a fresh one.

Flow per card:
    front shown -> flip (back viewed) -> advance -> next card front ...
    on the last card: finish

Guards instead of errors: transitions that are not allowed in the current
state (advancing before the back was viewed, navigating while a slide is
running, ...) are ignored and reported by returning ``False``.
"""

import random
from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum

import structlog

from flashdeck.domain.library.entities.card import Card
from flashdeck.domain.study.exceptions import EmptySessionError
from flashdeck.domain.study.scheduling import (
    ImmediateTransitionScheduler,
    TransitionHandle,
    TransitionScheduler,
)

logger = structlog.get_logger(__name__)

DEFAULT_TRANSITION_DELAY = 0.35


class SlideDirection(StrEnum):
    FORWARD = "forward"
    BACKWARD = "backward"


class StudyKey(StrEnum):
    """Key names as reported by browser keyboard events."""

    ARROW_RIGHT = "ArrowRight"
    ARROW_LEFT = "ArrowLeft"
    ARROW_UP = "ArrowUp"
    ARROW_DOWN = "ArrowDown"
    SPACE = " "


FLIP_KEYS = (StudyKey.ARROW_UP, StudyKey.ARROW_DOWN, StudyKey.SPACE)


@dataclass(frozen=True)
class StudyCard:
    """The part of a card a study session needs."""

    id: int
    front: str
    back: str

    @classmethod
    def from_card(cls, card: Card) -> "StudyCard":
        return cls(id=card.id.value, front=card.front, back=card.back)


@dataclass(frozen=True)
class StudySessionSnapshot:
    """Everything a view needs to render the session at one moment."""

    current_card: StudyCard
    position: int
    total: int
    is_flipped: bool
    is_shuffled: bool
    is_transitioning: bool
    direction: SlideDirection | None
    pending_card: StudyCard | None
    completed_count: int
    progress: float
    is_first_card: bool
    is_last_card: bool
    has_viewed_current_card: bool
    can_flip: bool
    can_advance: bool
    can_retreat: bool
    can_finish: bool
    is_complete: bool

    @property
    def card_number(self) -> int:
        """1-based position for "Card i of n" labels."""
        return self.position + 1


class StudySession:
    """
    Client-side controller for studying one deck.

    Args:
        cards: Cards to study, in deck order. Must not be empty.
        shuffled: Start with a shuffled working order.
        scheduler: Runs the deferred commit at the end of a slide transition.
            Defaults to committing immediately.
        transition_delay: Length of the slide transition in seconds.
        rng: Random source for shuffling.
    """

    def __init__(
        self,
        cards: Sequence[StudyCard],
        *,
        shuffled: bool = False,
        scheduler: TransitionScheduler | None = None,
        transition_delay: float = DEFAULT_TRANSITION_DELAY,
        rng: random.Random | None = None,
    ) -> None:
        if not cards:
            raise EmptySessionError()

        self._original: tuple[StudyCard, ...] = tuple(cards)
        self._scheduler = scheduler or ImmediateTransitionScheduler()
        self._transition_delay = transition_delay
        self._rng = rng or random.Random()  # noqa: S311

        self._shuffled = shuffled
        self._order: tuple[StudyCard, ...] = (
            self._shuffle(self._original) if shuffled else self._original
        )

        self._position = 0
        self._flipped = False
        self._viewed: set[int] = set()
        self._completed: set[int] = set()

        self._transitioning = False
        self._direction: SlideDirection | None = None
        self._pending_index: int | None = None
        self._pending_handle: TransitionHandle | None = None
        self._transition_seq = 0

    @classmethod
    def from_cards(
        cls,
        cards: Sequence[Card],
        *,
        shuffled: bool = False,
        scheduler: TransitionScheduler | None = None,
        transition_delay: float = DEFAULT_TRANSITION_DELAY,
        rng: random.Random | None = None,
    ) -> "StudySession":
        """Build a session straight from persisted card entities."""
        return cls(
            [StudyCard.from_card(card) for card in cards],
            shuffled=shuffled,
            scheduler=scheduler,
            transition_delay=transition_delay,
            rng=rng,
        )

    # ------------------------------------------------------------------
    # Derived state
    # ------------------------------------------------------------------

    @property
    def cards(self) -> tuple[StudyCard, ...]:
        """The working order for this session."""
        return self._order

    @property
    def total(self) -> int:
        return len(self._order)

    @property
    def position(self) -> int:
        return self._position

    @property
    def current_card(self) -> StudyCard:
        return self._order[self._position]

    @property
    def is_flipped(self) -> bool:
        return self._flipped

    @property
    def is_shuffled(self) -> bool:
        return self._shuffled

    @property
    def is_transitioning(self) -> bool:
        return self._transitioning

    @property
    def direction(self) -> SlideDirection | None:
        return self._direction

    @property
    def pending_card(self) -> StudyCard | None:
        """The card sliding in while a transition runs."""
        if self._pending_index is None:
            return None
        return self._order[self._pending_index]

    @property
    def viewed_ids(self) -> frozenset[int]:
        return frozenset(self._viewed)

    @property
    def completed_ids(self) -> frozenset[int]:
        return frozenset(self._completed)

    @property
    def completed_count(self) -> int:
        return len(self._completed)

    @property
    def progress(self) -> float:
        """Completed cards as a percentage of the session."""
        return len(self._completed) / len(self._order) * 100

    @property
    def is_complete(self) -> bool:
        return len(self._completed) == len(self._order)

    @property
    def is_first_card(self) -> bool:
        return self._position == 0

    @property
    def is_last_card(self) -> bool:
        return self._position == len(self._order) - 1

    @property
    def has_viewed_current_card(self) -> bool:
        return self.current_card.id in self._viewed

    @property
    def can_flip(self) -> bool:
        return not self._transitioning and not self.is_complete

    @property
    def can_advance(self) -> bool:
        return (
            not self._transitioning
            and not self.is_complete
            and not self.is_last_card
            and self.has_viewed_current_card
        )

    @property
    def can_retreat(self) -> bool:
        return not self._transitioning and not self.is_complete and not self.is_first_card

    @property
    def can_finish(self) -> bool:
        return not self._transitioning and not self.is_complete and self.is_last_card

    def snapshot(self) -> StudySessionSnapshot:
        return StudySessionSnapshot(
            current_card=self.current_card,
            position=self._position,
            total=self.total,
            is_flipped=self._flipped,
            is_shuffled=self._shuffled,
            is_transitioning=self._transitioning,
            direction=self._direction,
            pending_card=self.pending_card,
            completed_count=self.completed_count,
            progress=self.progress,
            is_first_card=self.is_first_card,
            is_last_card=self.is_last_card,
            has_viewed_current_card=self.has_viewed_current_card,
            can_flip=self.can_flip,
            can_advance=self.can_advance,
            can_retreat=self.can_retreat,
            can_finish=self.can_finish,
            is_complete=self.is_complete,
        )

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def flip(self) -> bool:
        """Turn the current card over. Showing the back marks it viewed."""
        if not self.can_flip:
            return False
        self._flipped = not self._flipped
        if self._flipped:
            self._viewed.add(self.current_card.id)
        return True

    def advance(self) -> bool:
        """
        Move to the next card.

        The card being left counts as completed. Requires its back to have
        been viewed, and is ignored on the last card or mid-transition.
        """
        if not self.can_advance:
            return False
        self._completed.add(self.current_card.id)
        self._begin_transition(self._position + 1, SlideDirection.FORWARD)
        return True

    def retreat(self) -> bool:
        """Move back to the previous card. Completion is left untouched."""
        if not self.can_retreat:
            return False
        self._begin_transition(self._position - 1, SlideDirection.BACKWARD)
        return True

    def finish(self) -> bool:
        """Mark the last card as completed."""
        if not self.can_finish:
            return False
        self._completed.add(self.current_card.id)
        logger.debug("study_session_finished", total=self.total)
        return True

    def toggle_shuffle(self) -> None:
        """
        Switch between shuffled and deck order.

        Turning shuffle on draws a new permutation; turning it off restores
        the deck order. Either way all progress is discarded.
        """
        self._shuffled = not self._shuffled
        self._order = self._shuffle(self._original) if self._shuffled else self._original
        self._reset_progress()

    def restart(self) -> bool:
        """Start over after completing, keeping the current working order."""
        if not self.is_complete:
            return False
        self._reset_progress()
        return True

    def handle_key(self, key: str, *, in_text_input: bool = False) -> bool:
        """
        Apply a keyboard shortcut.

        Right arrow advances, left arrow retreats, up/down arrows and space
        flip. Keys are ignored while the session is complete, while a slide
        is running, or when focus is in a text field.

        Returns:
            True if the key was consumed
        """
        if in_text_input or self.is_complete or self._transitioning:
            return False

        if key == StudyKey.ARROW_RIGHT:
            return self.advance()
        if key == StudyKey.ARROW_LEFT:
            return self.retreat()
        if key in FLIP_KEYS:
            return self.flip()
        return False

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _shuffle(self, cards: tuple[StudyCard, ...]) -> tuple[StudyCard, ...]:
        """Fisher-Yates shuffle into a new tuple."""
        shuffled = list(cards)
        for i in range(len(shuffled) - 1, 0, -1):
            j = self._rng.randint(0, i)
            shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
        return tuple(shuffled)

    def _begin_transition(self, target: int, direction: SlideDirection) -> None:
        self._flipped = False
        self._transitioning = True
        self._direction = direction
        self._pending_index = target
        self._transition_seq += 1
        seq = self._transition_seq

        handle = self._scheduler.schedule(
            self._transition_delay, lambda: self._commit_transition(seq, target)
        )
        if self._transitioning and self._transition_seq == seq:
            self._pending_handle = handle

    def _commit_transition(self, seq: int, target: int) -> None:
        # A reset while the slide was running makes this commit stale
        if not self._transitioning or seq != self._transition_seq:
            return
        self._position = target
        self._clear_transition()

    def _clear_transition(self) -> None:
        self._transitioning = False
        self._direction = None
        self._pending_index = None
        self._pending_handle = None

    def _reset_progress(self) -> None:
        if self._pending_handle is not None:
            self._pending_handle.cancel()
        self._transition_seq += 1
        self._clear_transition()
        self._position = 0
        self._flipped = False
        self._viewed = set()
        self._completed = set()
