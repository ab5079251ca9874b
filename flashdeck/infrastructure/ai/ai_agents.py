from pydantic import BaseModel
from pydantic_ai import Agent

from flashdeck.infrastructure.ai.ai_model import get_ai_model


class GeneratedCard(BaseModel):
    front: str
    back: str


def get_card_generation_agent() -> Agent[None, list[GeneratedCard]]:
    return Agent(
        get_ai_model(),
        output_type=list[GeneratedCard],
        instructions="""
        You write flashcards for a study deck. You receive the deck topic, an optional
        description of what the deck should cover, and the cards the deck already has.

        Every card must be:
        1. Focused: test ONE fact or idea
        2. Precise: the question has a single clear answer
        3. Standalone: understandable without the deck description at hand
        4. New: do not repeat or rephrase any existing card

        Format each card as:
        front: [short question, at most a few sentences]
        back: [precise answer, at most a few sentences]

        Keep both sides under 1000 characters. Never leave a side empty.
        Return exactly the number of cards you are asked for.
        """,
    )
