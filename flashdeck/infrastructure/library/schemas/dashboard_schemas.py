from pydantic import BaseModel, Field

from flashdeck.infrastructure.library.schemas.deck_schemas import DeckWithCardCount


class DashboardResponse(BaseModel):
    """Schema for the dashboard summary."""

    decks: list[DeckWithCardCount] = Field(..., description="Decks in creation order")
    deck_count: int
    card_count: int = Field(..., description="Cards across all of the caller's decks")
    can_create_deck: bool = Field(..., description="Whether the plan allows another deck")
    deck_limit: int | None = Field(..., description="Deck limit of the plan, null if unlimited")
