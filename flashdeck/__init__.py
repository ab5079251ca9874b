"""Flashdeck: flashcard decks, AI card generation and study sessions."""
