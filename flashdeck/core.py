from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from flashdeck.application.learning.use_cases import GenerateCardsUseCase
from flashdeck.application.library.use_cases.cards import (
    CreateCardUseCase,
    DeleteCardUseCase,
    UpdateCardUseCase,
)
from flashdeck.application.library.use_cases.decks import (
    CreateDeckUseCase,
    DeleteDeckUseCase,
    UpdateDeckUseCase,
)
from flashdeck.application.library.use_cases.queries import (
    GetCardsByDeckIdUseCase,
    GetDashboardUseCase,
    GetDeckDetailUseCase,
    ListDecksUseCase,
)
from flashdeck.application.study.use_cases import StartStudyUseCase
from flashdeck.config import get_settings
from flashdeck.infrastructure.ai.ai_service import AIService
from flashdeck.infrastructure.cache.view_cache import InMemoryViewCache
from flashdeck.infrastructure.events.subscriptions import create_event_publisher
from flashdeck.infrastructure.library.repositories import CardRepository, DeckRepository


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    settings = providers.Singleton(get_settings)

    # Repositories
    deck_repository = providers.Factory(DeckRepository, db=db)
    card_repository = providers.Factory(CardRepository, db=db)

    # Process-wide services
    view_cache = providers.Singleton(
        InMemoryViewCache, ttl_seconds=settings.provided.VIEW_CACHE_TTL_SECONDS
    )
    event_publisher = providers.Singleton(create_event_publisher, view_cache=view_cache)
    card_suggestion_service = providers.Singleton(AIService)

    # Library module, mutation use cases
    create_deck_use_case = providers.Factory(
        CreateDeckUseCase,
        deck_repository=deck_repository,
        event_publisher=event_publisher,
        free_tier_deck_limit=settings.provided.FREE_TIER_DECK_LIMIT,
    )
    update_deck_use_case = providers.Factory(
        UpdateDeckUseCase,
        deck_repository=deck_repository,
        event_publisher=event_publisher,
    )
    delete_deck_use_case = providers.Factory(
        DeleteDeckUseCase,
        deck_repository=deck_repository,
        event_publisher=event_publisher,
    )
    create_card_use_case = providers.Factory(
        CreateCardUseCase,
        card_repository=card_repository,
        deck_repository=deck_repository,
        event_publisher=event_publisher,
    )
    update_card_use_case = providers.Factory(
        UpdateCardUseCase,
        card_repository=card_repository,
        event_publisher=event_publisher,
    )
    delete_card_use_case = providers.Factory(
        DeleteCardUseCase,
        card_repository=card_repository,
        event_publisher=event_publisher,
    )

    # Library module, queries
    get_dashboard_use_case = providers.Factory(
        GetDashboardUseCase,
        deck_repository=deck_repository,
        card_repository=card_repository,
        view_cache=view_cache,
        free_tier_deck_limit=settings.provided.FREE_TIER_DECK_LIMIT,
    )
    list_decks_use_case = providers.Factory(
        ListDecksUseCase,
        deck_repository=deck_repository,
        card_repository=card_repository,
        view_cache=view_cache,
    )
    get_deck_detail_use_case = providers.Factory(
        GetDeckDetailUseCase,
        deck_repository=deck_repository,
        card_repository=card_repository,
        view_cache=view_cache,
    )
    get_cards_by_deck_use_case = providers.Factory(
        GetCardsByDeckIdUseCase,
        card_repository=card_repository,
    )

    # Learning module use cases
    generate_cards_use_case = providers.Factory(
        GenerateCardsUseCase,
        deck_repository=deck_repository,
        card_repository=card_repository,
        card_suggestion_service=card_suggestion_service,
        create_card_use_case=create_card_use_case,
        suggestion_count=settings.provided.CARD_SUGGESTION_COUNT,
    )

    # Study module use cases
    start_study_use_case = providers.Factory(
        StartStudyUseCase,
        deck_repository=deck_repository,
        get_cards_use_case=get_cards_by_deck_use_case,
    )


# Initialize container
container = Container()
