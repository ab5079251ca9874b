"""Use case for deleting cards."""

import structlog

from flashdeck.application.common.authorization import ensure_deck_owner, require_identity
from flashdeck.application.common.event_publisher import EventPublisherProtocol
from flashdeck.application.common.validation import parse_id
from flashdeck.application.library.protocols.card_repository import CardRepositoryProtocol
from flashdeck.domain.common.value_objects import CardId
from flashdeck.domain.identity.entities import AuthContext
from flashdeck.domain.library.events import ResourceChanged
from flashdeck.exceptions import AccessDeniedError

logger = structlog.get_logger(__name__)


class DeleteCardUseCase:
    def __init__(
        self,
        card_repository: CardRepositoryProtocol,
        event_publisher: EventPublisherProtocol,
    ) -> None:
        self.card_repository = card_repository
        self.event_publisher = event_publisher

    def delete_card(self, ctx: AuthContext, card_id: int) -> None:
        """
        Delete a single card. The deck and its other cards are untouched.

        Raises:
            UnauthenticatedError: If the caller has no identity
            AccessDeniedError: If the card is missing or its deck is owned by someone else
        """
        owner_id = require_identity(ctx)
        card_id_vo = parse_id(CardId, card_id, "card_id")

        found = self.card_repository.find_with_deck(card_id_vo)
        if found is None:
            logger.warning("card_access_denied", card_id=card_id, identity=owner_id.value)
            raise AccessDeniedError()
        _, deck = found
        ensure_deck_owner(deck, owner_id)

        self.card_repository.delete(card_id_vo)

        logger.info("deleted_card", card_id=card_id)
        self.event_publisher.publish(
            ResourceChanged(
                kind="card",
                action="deleted",
                resource_id=card_id,
                deck_id=deck.id.value,
                owner_id=owner_id.value,
            )
        )
