"""Protocol for Card repository in library context."""

from typing import Protocol

from flashdeck.domain.common.value_objects import CardId, DeckId, OwnerId
from flashdeck.domain.library.entities import Card, Deck


class CardRepositoryProtocol(Protocol):
    """Protocol for Card repository operations."""

    def find_by_id(self, card_id: CardId) -> Card | None:
        ...

    def find_with_deck(self, card_id: CardId) -> tuple[Card, Deck] | None:
        """
        Find a card together with the deck it belongs to.

        Returns:
            (card, deck) if the card exists, None otherwise
        """
        ...

    def find_by_deck(self, deck_id: DeckId) -> list[Card]:
        """
        Get all cards of a deck.

        Returns:
            List of card entities ordered by created_at ASC, then id
        """
        ...

    def count_by_owner(self, owner_id: OwnerId) -> int:
        """Count cards across every deck of an owner."""
        ...

    def count_by_decks(self, deck_ids: list[DeckId]) -> dict[int, int]:
        """
        Count cards for several decks at once.

        Returns:
            Mapping of deck id value to card count; decks without cards map to 0
        """
        ...

    def save(self, card: Card) -> Card:
        """
        Save a card entity (create or update).

        Returns:
            Saved card entity with database-generated values
        """
        ...

    def delete(self, card_id: CardId) -> bool:
        """
        Returns:
            True if deleted, False if not found
        """
        ...
