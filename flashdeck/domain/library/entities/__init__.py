from .card import MAX_CARD_SIDE_LENGTH, Card
from .deck import MAX_DECK_DESCRIPTION_LENGTH, MAX_DECK_NAME_LENGTH, Deck

__all__ = [
    "MAX_CARD_SIDE_LENGTH",
    "MAX_DECK_DESCRIPTION_LENGTH",
    "MAX_DECK_NAME_LENGTH",
    "Card",
    "Deck",
]
