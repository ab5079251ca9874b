"""Use case for updating deck details."""

import structlog

from flashdeck.application.common.authorization import ensure_deck_owner, require_identity
from flashdeck.application.common.event_publisher import EventPublisherProtocol
from flashdeck.application.common.validation import parse_id
from flashdeck.application.library.protocols.deck_repository import DeckRepositoryProtocol
from flashdeck.domain.common.exceptions import ValidationError
from flashdeck.domain.common.value_objects import DeckId
from flashdeck.domain.identity.entities import AuthContext
from flashdeck.domain.library.entities import Deck
from flashdeck.domain.library.entities.deck import validate_deck_description, validate_deck_name
from flashdeck.domain.library.events import ResourceChanged

logger = structlog.get_logger(__name__)


class UpdateDeckUseCase:
    def __init__(
        self,
        deck_repository: DeckRepositoryProtocol,
        event_publisher: EventPublisherProtocol,
    ) -> None:
        self.deck_repository = deck_repository
        self.event_publisher = event_publisher

    def update_deck(
        self,
        ctx: AuthContext,
        deck_id: int,
        name: str | None = None,
        description: str | None = None,
    ) -> Deck:
        """
        Update a deck's name and/or description.

        Fields left as ``None`` keep their value; an empty description clears it.

        Raises:
            UnauthenticatedError: If the caller has no identity
            ValidationError: If no field is supplied or a field breaks its constraint
            AccessDeniedError: If the deck is missing or owned by someone else
        """
        owner_id = require_identity(ctx)
        deck_id_vo = parse_id(DeckId, deck_id, "deck_id")

        if name is None and description is None:
            raise ValidationError(
                "At least one of name or description must be provided",
                constraint="at_least_one",
            )
        if name is not None:
            validate_deck_name(name)
        if description is not None:
            validate_deck_description(description)

        deck = ensure_deck_owner(self.deck_repository.find_by_id(deck_id_vo), owner_id)
        deck.update_details(name=name, description=description)
        deck = self.deck_repository.save(deck)

        logger.info("updated_deck", deck_id=deck_id)
        self.event_publisher.publish(
            ResourceChanged(
                kind="deck",
                action="updated",
                resource_id=deck_id,
                deck_id=deck_id,
                owner_id=owner_id.value,
            )
        )
        return deck
