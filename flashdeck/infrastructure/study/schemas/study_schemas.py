"""Pydantic schemas for study session API responses."""

from pydantic import BaseModel, Field


class StudyCardItem(BaseModel):
    """A card as handed to a study session."""

    id: int
    front: str
    back: str


class StudySessionResponse(BaseModel):
    """Everything a client needs to run a study session locally."""

    deck_id: int = Field(..., description="ID of the deck being studied")
    deck_name: str = Field(..., description="Name of the deck being studied")
    cards: list[StudyCardItem] = Field(..., description="Cards in deck order, oldest first")
    transition_ms: int = Field(..., description="Length of the slide between cards")
