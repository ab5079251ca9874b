"""Use case for listing the caller's decks."""

import structlog

from flashdeck.application.common.authorization import require_identity
from flashdeck.application.common.view_cache import ViewCacheProtocol, deck_list_key
from flashdeck.application.library.protocols.card_repository import CardRepositoryProtocol
from flashdeck.application.library.protocols.deck_repository import DeckRepositoryProtocol
from flashdeck.application.library.use_cases.queries.dtos import DeckWithCardCount
from flashdeck.domain.common.value_objects import OwnerId
from flashdeck.domain.identity.entities import AuthContext

logger = structlog.get_logger(__name__)


def load_decks_with_counts(
    owner_id: OwnerId,
    deck_repository: DeckRepositoryProtocol,
    card_repository: CardRepositoryProtocol,
) -> list[DeckWithCardCount]:
    decks = deck_repository.find_by_owner(owner_id)
    counts = card_repository.count_by_decks([deck.id for deck in decks])
    return [DeckWithCardCount(deck=deck, card_count=counts.get(deck.id.value, 0)) for deck in decks]


class ListDecksUseCase:
    def __init__(
        self,
        deck_repository: DeckRepositoryProtocol,
        card_repository: CardRepositoryProtocol,
        view_cache: ViewCacheProtocol,
    ) -> None:
        self.deck_repository = deck_repository
        self.card_repository = card_repository
        self.view_cache = view_cache

    def list_decks(self, ctx: AuthContext) -> list[DeckWithCardCount]:
        """
        Get the caller's decks in creation order, each with its card count.

        Raises:
            UnauthenticatedError: If the caller has no identity
        """
        owner_id = require_identity(ctx)
        key = deck_list_key(owner_id.value)

        cached = self.view_cache.get(key)
        if cached is not None:
            return cached

        version = self.view_cache.version(key)
        decks = load_decks_with_counts(owner_id, self.deck_repository, self.card_repository)
        self.view_cache.set(key, decks, version)

        logger.debug("listed_decks", identity=owner_id.value, count=len(decks))
        return decks
