from .auth_context import AI_FLASHCARD_GENERATION, UNLIMITED_DECKS, AuthContext

__all__ = ["AI_FLASHCARD_GENERATION", "UNLIMITED_DECKS", "AuthContext"]
