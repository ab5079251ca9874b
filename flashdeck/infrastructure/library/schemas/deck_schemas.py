"""Pydantic schemas for Deck API request/response validation."""

from datetime import datetime

from pydantic import BaseModel, Field

from flashdeck.infrastructure.library.schemas.card_schemas import Card


class Deck(BaseModel):
    """Schema for Deck response."""

    id: int
    name: str
    description: str | None
    created_at: datetime | None
    updated_at: datetime | None


class DeckWithCardCount(Deck):
    card_count: int = Field(..., description="Number of cards in the deck")


class DeckDetailResponse(BaseModel):
    """Schema for a deck with its cards."""

    deck: Deck
    cards: list[Card] = Field(..., description="Cards in creation order, oldest first")
    card_count: int


class DeckListResponse(BaseModel):
    decks: list[DeckWithCardCount]


class DeckCreateRequest(BaseModel):
    """
    Schema for creating a new deck.

    Length rules are enforced by the domain so that violations are reported
    with their field and constraint.
    """

    name: str = Field(..., description="Deck name, 1-100 characters")
    description: str | None = Field(None, description="Optional description, up to 500 characters")


class DeckUpdateRequest(BaseModel):
    """Schema for updating a deck. Omitted fields keep their value."""

    name: str | None = Field(None, description="New deck name")
    description: str | None = Field(None, description="New description; empty clears it")


class DeckCreateResponse(BaseModel):
    success: bool = Field(..., description="Whether the creation was successful")
    message: str = Field(..., description="Response message")
    deck: Deck = Field(..., description="Created deck")


class DeckUpdateResponse(BaseModel):
    success: bool = Field(..., description="Whether the update was successful")
    message: str = Field(..., description="Response message")
    deck: Deck = Field(..., description="Updated deck")
