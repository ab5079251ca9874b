from .generate_cards_use_case import GenerateCardsUseCase

__all__ = ["GenerateCardsUseCase"]
