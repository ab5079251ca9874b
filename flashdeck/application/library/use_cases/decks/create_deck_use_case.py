"""Use case for creating decks."""

import structlog

from flashdeck.application.common.authorization import require_identity
from flashdeck.application.common.event_publisher import EventPublisherProtocol
from flashdeck.application.library.protocols.deck_repository import DeckRepositoryProtocol
from flashdeck.domain.identity.entities import UNLIMITED_DECKS, AuthContext
from flashdeck.domain.library.entities import Deck
from flashdeck.domain.library.entities.deck import validate_deck_description, validate_deck_name
from flashdeck.domain.library.events import ResourceChanged
from flashdeck.exceptions import QuotaExceededError

logger = structlog.get_logger(__name__)


class CreateDeckUseCase:
    """Use case for creating decks, subject to the free plan's deck limit."""

    def __init__(
        self,
        deck_repository: DeckRepositoryProtocol,
        event_publisher: EventPublisherProtocol,
        free_tier_deck_limit: int,
    ) -> None:
        self.deck_repository = deck_repository
        self.event_publisher = event_publisher
        self.free_tier_deck_limit = free_tier_deck_limit

    def create_deck(self, ctx: AuthContext, name: str, description: str | None = None) -> Deck:
        """
        Create a new deck owned by the caller.

        Args:
            ctx: Caller identity and entitlements
            name: Deck name (trimmed, 1-100 characters)
            description: Optional description; blank is stored as NULL

        Returns:
            Created deck domain entity

        Raises:
            UnauthenticatedError: If the caller has no identity
            ValidationError: If name or description break their constraints
            QuotaExceededError: If a free-plan caller already has the maximum number of decks
        """
        owner_id = require_identity(ctx)
        name = validate_deck_name(name)
        description = validate_deck_description(description)

        if not ctx.has_entitlement(UNLIMITED_DECKS):
            current = self.deck_repository.count_by_owner(owner_id)
            if current >= self.free_tier_deck_limit:
                logger.info(
                    "deck_quota_exceeded",
                    identity=owner_id.value,
                    limit=self.free_tier_deck_limit,
                    current=current,
                )
                raise QuotaExceededError(limit=self.free_tier_deck_limit, current=current)

        deck = Deck.create(owner_id=owner_id, name=name, description=description)
        deck = self.deck_repository.save(deck)

        logger.info("created_deck", deck_id=deck.id.value, identity=owner_id.value)
        self.event_publisher.publish(
            ResourceChanged(
                kind="deck",
                action="created",
                resource_id=deck.id.value,
                deck_id=deck.id.value,
                owner_id=owner_id.value,
            )
        )
        return deck
