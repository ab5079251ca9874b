"""Use case for adding a card to a deck."""

import structlog

from flashdeck.application.common.authorization import ensure_deck_owner, require_identity
from flashdeck.application.common.event_publisher import EventPublisherProtocol
from flashdeck.application.common.validation import parse_id
from flashdeck.application.library.protocols.card_repository import CardRepositoryProtocol
from flashdeck.application.library.protocols.deck_repository import DeckRepositoryProtocol
from flashdeck.domain.common.value_objects import DeckId
from flashdeck.domain.identity.entities import AuthContext
from flashdeck.domain.library.entities import Card
from flashdeck.domain.library.entities.card import validate_card_side
from flashdeck.domain.library.events import ResourceChanged

logger = structlog.get_logger(__name__)


class CreateCardUseCase:
    """Use case for adding a card to a deck the caller owns."""

    def __init__(
        self,
        card_repository: CardRepositoryProtocol,
        deck_repository: DeckRepositoryProtocol,
        event_publisher: EventPublisherProtocol,
    ) -> None:
        self.card_repository = card_repository
        self.deck_repository = deck_repository
        self.event_publisher = event_publisher

    def create_card(self, ctx: AuthContext, deck_id: int, front: str, back: str) -> Card:
        """
        Create a new card in a deck.

        Args:
            ctx: Caller identity and entitlements
            deck_id: ID of the parent deck
            front: Question side (1-1000 characters)
            back: Answer side (1-1000 characters)

        Returns:
            Created card domain entity

        Raises:
            UnauthenticatedError: If the caller has no identity
            ValidationError: If a side breaks its constraints
            AccessDeniedError: If the deck is missing or owned by someone else
        """
        owner_id = require_identity(ctx)
        deck_id_vo = parse_id(DeckId, deck_id, "deck_id")
        validate_card_side(front, "front")
        validate_card_side(back, "back")

        deck = ensure_deck_owner(self.deck_repository.find_by_id(deck_id_vo), owner_id)

        card = Card.create(deck_id=deck.id, front=front, back=back)
        card = self.card_repository.save(card)

        logger.info("created_card", card_id=card.id.value, deck_id=deck_id)
        self.event_publisher.publish(
            ResourceChanged(
                kind="card",
                action="created",
                resource_id=card.id.value,
                deck_id=deck_id,
                owner_id=owner_id.value,
            )
        )
        return card
