"""Use case for editing cards."""

import structlog

from flashdeck.application.common.authorization import ensure_deck_owner, require_identity
from flashdeck.application.common.event_publisher import EventPublisherProtocol
from flashdeck.application.common.validation import parse_id
from flashdeck.application.library.protocols.card_repository import CardRepositoryProtocol
from flashdeck.domain.common.exceptions import ValidationError
from flashdeck.domain.common.value_objects import CardId
from flashdeck.domain.identity.entities import AuthContext
from flashdeck.domain.library.entities import Card
from flashdeck.domain.library.entities.card import validate_card_side
from flashdeck.domain.library.events import ResourceChanged
from flashdeck.exceptions import AccessDeniedError

logger = structlog.get_logger(__name__)


class UpdateCardUseCase:
    def __init__(
        self,
        card_repository: CardRepositoryProtocol,
        event_publisher: EventPublisherProtocol,
    ) -> None:
        self.card_repository = card_repository
        self.event_publisher = event_publisher

    def update_card(
        self,
        ctx: AuthContext,
        card_id: int,
        front: str | None = None,
        back: str | None = None,
    ) -> Card:
        """
        Update a card's front and/or back.

        Raises:
            UnauthenticatedError: If the caller has no identity
            ValidationError: If no side is supplied or a side breaks its constraints
            AccessDeniedError: If the card is missing or its deck is owned by someone else
        """
        owner_id = require_identity(ctx)
        card_id_vo = parse_id(CardId, card_id, "card_id")

        if front is None and back is None:
            raise ValidationError(
                "At least one of front or back must be provided",
                constraint="at_least_one",
            )
        if front is not None:
            validate_card_side(front, "front")
        if back is not None:
            validate_card_side(back, "back")

        found = self.card_repository.find_with_deck(card_id_vo)
        if found is None:
            logger.warning("card_access_denied", card_id=card_id, identity=owner_id.value)
            raise AccessDeniedError()
        card, deck = found
        ensure_deck_owner(deck, owner_id)

        card.update_content(front=front, back=back)
        card = self.card_repository.save(card)

        logger.info("updated_card", card_id=card_id)
        self.event_publisher.publish(
            ResourceChanged(
                kind="card",
                action="updated",
                resource_id=card_id,
                deck_id=deck.id.value,
                owner_id=owner_id.value,
            )
        )
        return card
