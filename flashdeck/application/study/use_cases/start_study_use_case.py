"""Use case for loading a deck to study."""

from dataclasses import dataclass

import structlog

from flashdeck.application.common.authorization import ensure_deck_owner, require_identity
from flashdeck.application.common.validation import parse_id
from flashdeck.application.library.protocols.deck_repository import DeckRepositoryProtocol
from flashdeck.application.library.use_cases.queries import GetCardsByDeckIdUseCase
from flashdeck.domain.common.value_objects import DeckId
from flashdeck.domain.identity.entities import AuthContext
from flashdeck.domain.library.entities import Card, Deck
from flashdeck.exceptions import EmptyDeckError

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class StudyMaterial:
    """What a client needs to build a study session."""

    deck: Deck
    cards: list[Card]


class StartStudyUseCase:
    def __init__(
        self,
        deck_repository: DeckRepositoryProtocol,
        get_cards_use_case: GetCardsByDeckIdUseCase,
    ) -> None:
        self.deck_repository = deck_repository
        self.get_cards_use_case = get_cards_use_case

    def start_study(self, ctx: AuthContext, deck_id: int) -> StudyMaterial:
        """
        Load a deck and its cards for a study session.

        Raises:
            UnauthenticatedError: If the caller has no identity
            AccessDeniedError: If the deck is missing or owned by someone else
            EmptyDeckError: If the deck has no cards
        """
        owner_id = require_identity(ctx)
        deck_id_vo = parse_id(DeckId, deck_id, "deck_id")

        deck = ensure_deck_owner(self.deck_repository.find_by_id(deck_id_vo), owner_id)
        cards = self.get_cards_use_case.get_cards(deck_id_vo)
        if not cards:
            logger.info("study_rejected_empty_deck", deck_id=deck_id)
            raise EmptyDeckError(deck_id)

        logger.info("study_started", deck_id=deck_id, card_count=len(cards))
        return StudyMaterial(deck=deck, cards=cards)
