from .card_suggestion_service import CardSuggestion, CardSuggestionServiceProtocol

__all__ = ["CardSuggestion", "CardSuggestionServiceProtocol"]
