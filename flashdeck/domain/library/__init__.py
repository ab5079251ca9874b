"""
Library bounded context - Domain layer.

This context owns the user's study material:
- Deck: a named, owned collection of cards
- Card: a front/back pair that lives inside exactly one deck
"""
