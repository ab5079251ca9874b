from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class CardSuggestion:
    front: str
    back: str


class CardSuggestionServiceProtocol(Protocol):
    async def suggest_cards(
        self,
        topic: str,
        description: str | None,
        existing_pairs: list[CardSuggestion],
        count: int,
    ) -> list[CardSuggestion]:
        """Ask for ``count`` new question/answer pairs that avoid ``existing_pairs``."""
        ...
