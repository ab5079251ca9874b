"""Library schemas."""

from flashdeck.infrastructure.library.schemas.card_schemas import (
    Card,
    CardCreateRequest,
    CardCreateResponse,
    CardUpdateRequest,
    CardUpdateResponse,
    GeneratedCardsResponse,
)
from flashdeck.infrastructure.library.schemas.converters import (
    card_to_schema,
    deck_to_schema,
    deck_with_count_to_schema,
)
from flashdeck.infrastructure.library.schemas.dashboard_schemas import DashboardResponse
from flashdeck.infrastructure.library.schemas.deck_schemas import (
    Deck,
    DeckCreateRequest,
    DeckCreateResponse,
    DeckDetailResponse,
    DeckListResponse,
    DeckUpdateRequest,
    DeckUpdateResponse,
    DeckWithCardCount,
)

__all__ = [
    "Card",
    "CardCreateRequest",
    "CardCreateResponse",
    "CardUpdateRequest",
    "CardUpdateResponse",
    "DashboardResponse",
    "Deck",
    "DeckCreateRequest",
    "DeckCreateResponse",
    "DeckDetailResponse",
    "DeckListResponse",
    "DeckUpdateRequest",
    "DeckUpdateResponse",
    "DeckWithCardCount",
    "GeneratedCardsResponse",
    "card_to_schema",
    "deck_to_schema",
    "deck_with_count_to_schema",
]
