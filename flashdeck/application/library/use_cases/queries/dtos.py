"""DTOs for library read views."""

from dataclasses import dataclass

from flashdeck.domain.library.entities import Card, Deck


@dataclass(frozen=True)
class DeckWithCardCount:
    deck: Deck
    card_count: int


@dataclass(frozen=True)
class DeckDetail:
    """A deck with its cards in creation order."""

    deck: Deck
    cards: list[Card]

    @property
    def card_count(self) -> int:
        return len(self.cards)


@dataclass(frozen=True)
class DashboardSummary:
    """Per-owner totals; does not depend on the caller's plan."""

    decks: list[DeckWithCardCount]
    deck_count: int
    card_count: int


@dataclass(frozen=True)
class DashboardView:
    """Dashboard totals plus what the caller's plan still allows."""

    summary: DashboardSummary
    can_create_deck: bool
    deck_limit: int | None
