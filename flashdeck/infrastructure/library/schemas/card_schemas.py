"""Pydantic schemas for Card API request/response validation."""

from datetime import datetime

from pydantic import BaseModel, Field


class Card(BaseModel):
    """Schema for Card response."""

    id: int
    deck_id: int
    front: str
    back: str
    created_at: datetime | None
    updated_at: datetime | None


class CardCreateRequest(BaseModel):
    """Schema for creating a new card."""

    front: str = Field(..., description="Question side, 1-1000 characters")
    back: str = Field(..., description="Answer side, 1-1000 characters")


class CardUpdateRequest(BaseModel):
    """Schema for updating a card. Omitted sides keep their value."""

    front: str | None = Field(None, description="New question side")
    back: str | None = Field(None, description="New answer side")


class CardCreateResponse(BaseModel):
    success: bool = Field(..., description="Whether the creation was successful")
    message: str = Field(..., description="Response message")
    card: Card = Field(..., description="Created card")


class CardUpdateResponse(BaseModel):
    success: bool = Field(..., description="Whether the update was successful")
    message: str = Field(..., description="Response message")
    card: Card = Field(..., description="Updated card")


class GeneratedCardsResponse(BaseModel):
    success: bool = Field(..., description="Whether the generation was successful")
    message: str = Field(..., description="Response message")
    cards: list[Card] = Field(..., description="Created cards, in suggestion order")
