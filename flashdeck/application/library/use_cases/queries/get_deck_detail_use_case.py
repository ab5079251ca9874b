"""Use case for a single deck with its cards."""

import structlog

from flashdeck.application.common.authorization import ensure_deck_owner, require_identity
from flashdeck.application.common.validation import parse_id
from flashdeck.application.common.view_cache import ViewCacheProtocol, deck_detail_key
from flashdeck.application.library.protocols.card_repository import CardRepositoryProtocol
from flashdeck.application.library.protocols.deck_repository import DeckRepositoryProtocol
from flashdeck.application.library.use_cases.queries.dtos import DeckDetail
from flashdeck.domain.common.value_objects import DeckId
from flashdeck.domain.identity.entities import AuthContext

logger = structlog.get_logger(__name__)


class GetDeckDetailUseCase:
    def __init__(
        self,
        deck_repository: DeckRepositoryProtocol,
        card_repository: CardRepositoryProtocol,
        view_cache: ViewCacheProtocol,
    ) -> None:
        self.deck_repository = deck_repository
        self.card_repository = card_repository
        self.view_cache = view_cache

    def get_deck_detail(self, ctx: AuthContext, deck_id: int) -> DeckDetail:
        """
        Get a deck and its cards (oldest first).

        Raises:
            UnauthenticatedError: If the caller has no identity
            AccessDeniedError: If the deck is missing or owned by someone else
        """
        owner_id = require_identity(ctx)
        deck_id_vo = parse_id(DeckId, deck_id, "deck_id")
        key = deck_detail_key(deck_id)

        cached: DeckDetail | None = self.view_cache.get(key)
        if cached is not None:
            # Cache is keyed by deck, so the owner still has to be checked
            ensure_deck_owner(cached.deck, owner_id)
            return cached

        version = self.view_cache.version(key)
        deck = ensure_deck_owner(self.deck_repository.find_by_id(deck_id_vo), owner_id)
        detail = DeckDetail(deck=deck, cards=self.card_repository.find_by_deck(deck_id_vo))
        self.view_cache.set(key, detail, version)

        logger.debug("loaded_deck_detail", deck_id=deck_id, card_count=detail.card_count)
        return detail
