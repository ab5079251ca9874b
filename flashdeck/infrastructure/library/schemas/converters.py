"""Build response schemas from domain entities and query DTOs."""

from flashdeck.application.library.use_cases.queries import DeckWithCardCount as DeckWithCount
from flashdeck.domain.library.entities import Card, Deck
from flashdeck.infrastructure.library.schemas.card_schemas import Card as CardSchema
from flashdeck.infrastructure.library.schemas.deck_schemas import Deck as DeckSchema
from flashdeck.infrastructure.library.schemas.deck_schemas import DeckWithCardCount


def deck_to_schema(deck: Deck) -> DeckSchema:
    return DeckSchema(
        id=deck.id.value,
        name=deck.name,
        description=deck.description,
        created_at=deck.created_at,
        updated_at=deck.updated_at,
    )


def deck_with_count_to_schema(item: DeckWithCount) -> DeckWithCardCount:
    return DeckWithCardCount(
        id=item.deck.id.value,
        name=item.deck.name,
        description=item.deck.description,
        created_at=item.deck.created_at,
        updated_at=item.deck.updated_at,
        card_count=item.card_count,
    )


def card_to_schema(card: Card) -> CardSchema:
    return CardSchema(
        id=card.id.value,
        deck_id=card.deck_id.value,
        front=card.front,
        back=card.back,
        created_at=card.created_at,
        updated_at=card.updated_at,
    )
