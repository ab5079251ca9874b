from .card_repository import CardRepositoryProtocol
from .deck_repository import DeckRepositoryProtocol

__all__ = ["CardRepositoryProtocol", "DeckRepositoryProtocol"]
