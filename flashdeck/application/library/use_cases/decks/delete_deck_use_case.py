"""Use case for deleting decks."""

import structlog

from flashdeck.application.common.authorization import ensure_deck_owner, require_identity
from flashdeck.application.common.event_publisher import EventPublisherProtocol
from flashdeck.application.common.validation import parse_id
from flashdeck.application.library.protocols.deck_repository import DeckRepositoryProtocol
from flashdeck.domain.common.value_objects import DeckId
from flashdeck.domain.identity.entities import AuthContext
from flashdeck.domain.library.events import ResourceChanged

logger = structlog.get_logger(__name__)


class DeleteDeckUseCase:
    def __init__(
        self,
        deck_repository: DeckRepositoryProtocol,
        event_publisher: EventPublisherProtocol,
    ) -> None:
        self.deck_repository = deck_repository
        self.event_publisher = event_publisher

    def delete_deck(self, ctx: AuthContext, deck_id: int) -> None:
        """
        Delete a deck and all of its cards.

        Raises:
            UnauthenticatedError: If the caller has no identity
            AccessDeniedError: If the deck is missing or owned by someone else
        """
        owner_id = require_identity(ctx)
        deck_id_vo = parse_id(DeckId, deck_id, "deck_id")

        ensure_deck_owner(self.deck_repository.find_by_id(deck_id_vo), owner_id)
        self.deck_repository.delete(deck_id_vo)

        logger.info("deleted_deck", deck_id=deck_id)
        self.event_publisher.publish(
            ResourceChanged(
                kind="deck",
                action="deleted",
                resource_id=deck_id,
                deck_id=deck_id,
                owner_id=owner_id.value,
            )
        )
