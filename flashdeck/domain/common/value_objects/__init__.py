"""Common value objects shared across all domain modules."""

from .ids import CardId, DeckId, OwnerId

__all__ = [
    "CardId",
    "DeckId",
    "OwnerId",
]
