"""Use case for listing the cards of a deck."""

from flashdeck.application.library.protocols.card_repository import CardRepositoryProtocol
from flashdeck.domain.common.value_objects import DeckId
from flashdeck.domain.library.entities import Card


class GetCardsByDeckIdUseCase:
    """Plain repository read; callers are expected to have checked ownership."""

    def __init__(self, card_repository: CardRepositoryProtocol) -> None:
        self.card_repository = card_repository

    def get_cards(self, deck_id: DeckId) -> list[Card]:
        """Return the deck's cards in creation order."""
        return self.card_repository.find_by_deck(deck_id)
