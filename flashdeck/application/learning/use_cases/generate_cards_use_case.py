"""Use case for filling a deck with generated cards."""

import structlog

from flashdeck.application.common.authorization import (
    ensure_deck_owner,
    require_entitlement,
    require_identity,
)
from flashdeck.application.common.validation import parse_id
from flashdeck.application.learning.protocols.card_suggestion_service import (
    CardSuggestion,
    CardSuggestionServiceProtocol,
)
from flashdeck.application.library.protocols.card_repository import CardRepositoryProtocol
from flashdeck.application.library.protocols.deck_repository import DeckRepositoryProtocol
from flashdeck.application.library.use_cases.cards import CreateCardUseCase
from flashdeck.domain.common.exceptions import ValidationError
from flashdeck.domain.common.value_objects import DeckId
from flashdeck.domain.identity.entities import AI_FLASHCARD_GENERATION, AuthContext
from flashdeck.domain.library.entities import Card
from flashdeck.domain.library.entities.card import validate_card_side
from flashdeck.exceptions import GenerationFailedError

logger = structlog.get_logger(__name__)


class GenerateCardsUseCase:
    """
    Generate a batch of cards for a deck from its name and description.

    The whole batch is checked before anything is written; a bad batch
    leaves the deck untouched. Writes then go card by card through
    CreateCardUseCase, so a failure partway keeps the cards already saved.
    """

    def __init__(
        self,
        deck_repository: DeckRepositoryProtocol,
        card_repository: CardRepositoryProtocol,
        card_suggestion_service: CardSuggestionServiceProtocol,
        create_card_use_case: CreateCardUseCase,
        suggestion_count: int,
    ) -> None:
        self.deck_repository = deck_repository
        self.card_repository = card_repository
        self.card_suggestion_service = card_suggestion_service
        self.create_card_use_case = create_card_use_case
        self.suggestion_count = suggestion_count

    async def generate_cards(self, ctx: AuthContext, deck_id: int) -> list[Card]:
        """
        Generate and save cards for a deck.

        Args:
            ctx: Caller identity and entitlements
            deck_id: ID of the deck to fill

        Returns:
            The created cards, in the order they were suggested

        Raises:
            UnauthenticatedError: If the caller has no identity
            FeatureGatedError: If the caller's plan lacks AI generation
            AccessDeniedError: If the deck is missing or owned by someone else
            GenerationFailedError: If the service fails or returns an unusable batch
        """
        owner_id = require_identity(ctx)
        require_entitlement(ctx, AI_FLASHCARD_GENERATION)
        deck_id_vo = parse_id(DeckId, deck_id, "deck_id")

        deck = ensure_deck_owner(self.deck_repository.find_by_id(deck_id_vo), owner_id)
        existing_pairs = [
            CardSuggestion(front=card.front, back=card.back)
            for card in self.card_repository.find_by_deck(deck_id_vo)
        ]

        try:
            suggestions = await self.card_suggestion_service.suggest_cards(
                topic=deck.name,
                description=deck.description,
                existing_pairs=existing_pairs,
                count=self.suggestion_count,
            )
        except Exception as e:
            logger.error(
                "card_suggestion_failed",
                deck_id=deck_id,
                error=str(e),
                exc_info=True,
            )
            raise GenerationFailedError("the suggestion service is unavailable") from e

        self._check_batch(suggestions, deck_id)

        cards = [
            self.create_card_use_case.create_card(ctx, deck_id, s.front, s.back)
            for s in suggestions
        ]

        logger.info("generated_cards", deck_id=deck_id, card_count=len(cards))
        return cards

    def _check_batch(self, suggestions: list[CardSuggestion], deck_id: int) -> None:
        if len(suggestions) != self.suggestion_count:
            logger.warning(
                "card_suggestion_count_mismatch",
                deck_id=deck_id,
                expected=self.suggestion_count,
                received=len(suggestions),
            )
            raise GenerationFailedError(
                f"expected {self.suggestion_count} cards, received {len(suggestions)}"
            )

        for index, suggestion in enumerate(suggestions):
            try:
                validate_card_side(suggestion.front, "front")
                validate_card_side(suggestion.back, "back")
            except ValidationError as e:
                logger.warning(
                    "card_suggestion_invalid",
                    deck_id=deck_id,
                    index=index,
                    field=e.field,
                    constraint=e.constraint,
                )
                raise GenerationFailedError(f"card {index + 1} is invalid: {e.message}") from e
