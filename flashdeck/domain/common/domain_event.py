"""
Base class for things that happened to decks and cards.

Use cases publish events after a write has been committed; listeners (the
view cache today) react to them in the same process.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID, uuid4


@dataclass(frozen=True, kw_only=True)
class DomainEvent:
    """
    Immutable record of a committed change, named in past tense.

    Subclasses are declared with ``@dataclass(frozen=True, kw_only=True)`` so
    their own fields can follow the defaulted ones here.
    """

    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @property
    def event_type(self) -> str:
        return type(self).__name__
