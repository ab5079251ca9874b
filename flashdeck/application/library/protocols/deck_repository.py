"""Protocol for Deck repository in library context."""

from typing import Protocol

from flashdeck.domain.common.value_objects import DeckId, OwnerId
from flashdeck.domain.library.entities import Deck


class DeckRepositoryProtocol(Protocol):
    """Protocol for Deck repository operations."""

    def find_by_id(self, deck_id: DeckId) -> Deck | None:
        """
        Find a deck by ID.

        Ownership is not checked here; callers compare the owner themselves
        so that missing and foreign decks can be reported the same way.

        Returns:
            Deck entity if found, None otherwise
        """
        ...

    def find_by_owner(self, owner_id: OwnerId) -> list[Deck]:
        """
        Get all decks of an owner.

        Returns:
            List of deck entities ordered by created_at ASC, then id
        """
        ...

    def count_by_owner(self, owner_id: OwnerId) -> int:
        ...

    def save(self, deck: Deck) -> Deck:
        """
        Save a deck entity (create or update).

        Returns:
            Saved deck entity with database-generated values
        """
        ...

    def delete(self, deck_id: DeckId) -> bool:
        """
        Delete a deck together with all of its cards in one transaction.

        Returns:
            True if deleted, False if not found
        """
        ...
