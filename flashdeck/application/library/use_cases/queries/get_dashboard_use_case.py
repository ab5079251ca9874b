"""Use case for the dashboard summary."""

import structlog

from flashdeck.application.common.authorization import require_identity
from flashdeck.application.common.view_cache import ViewCacheProtocol, dashboard_key
from flashdeck.application.library.protocols.card_repository import CardRepositoryProtocol
from flashdeck.application.library.protocols.deck_repository import DeckRepositoryProtocol
from flashdeck.application.library.use_cases.queries.dtos import DashboardSummary, DashboardView
from flashdeck.application.library.use_cases.queries.list_decks_use_case import (
    load_decks_with_counts,
)
from flashdeck.domain.identity.entities import UNLIMITED_DECKS, AuthContext

logger = structlog.get_logger(__name__)


class GetDashboardUseCase:
    def __init__(
        self,
        deck_repository: DeckRepositoryProtocol,
        card_repository: CardRepositoryProtocol,
        view_cache: ViewCacheProtocol,
        free_tier_deck_limit: int,
    ) -> None:
        self.deck_repository = deck_repository
        self.card_repository = card_repository
        self.view_cache = view_cache
        self.free_tier_deck_limit = free_tier_deck_limit

    def get_dashboard(self, ctx: AuthContext) -> DashboardView:
        """
        Get the caller's decks, deck count and total card count.

        The totals are cached per owner; whether another deck may be created
        is worked out per request since it depends on the caller's plan.

        Raises:
            UnauthenticatedError: If the caller has no identity
        """
        owner_id = require_identity(ctx)
        key = dashboard_key(owner_id.value)

        summary = self.view_cache.get(key)
        if summary is None:
            version = self.view_cache.version(key)
            decks = load_decks_with_counts(owner_id, self.deck_repository, self.card_repository)
            summary = DashboardSummary(
                decks=decks,
                deck_count=len(decks),
                card_count=self.card_repository.count_by_owner(owner_id),
            )
            self.view_cache.set(key, summary, version)
            logger.debug(
                "built_dashboard",
                identity=owner_id.value,
                deck_count=summary.deck_count,
                card_count=summary.card_count,
            )

        if ctx.has_entitlement(UNLIMITED_DECKS):
            return DashboardView(summary=summary, can_create_deck=True, deck_limit=None)
        return DashboardView(
            summary=summary,
            can_create_deck=summary.deck_count < self.free_tier_deck_limit,
            deck_limit=self.free_tier_deck_limit,
        )
