"""
Card entity: one question/answer pair inside a deck.
"""

from dataclasses import dataclass
from datetime import UTC, datetime

from flashdeck.domain.common.entity import Entity
from flashdeck.domain.common.exceptions import ValidationError
from flashdeck.domain.common.value_objects import CardId, DeckId

MAX_CARD_SIDE_LENGTH = 1000


def validate_card_side(text: str, field: str) -> str:
    """Validate one face of a card; ``field`` is ``front`` or ``back``."""
    label = "Front side" if field == "front" else "Back side"
    if text is None or not text.strip():
        raise ValidationError(f"{label} is required", field=field, constraint="required")
    if len(text) > MAX_CARD_SIDE_LENGTH:
        raise ValidationError(
            f"{label} cannot exceed {MAX_CARD_SIDE_LENGTH} characters",
            field=field,
            constraint="max_length",
        )
    return text


@dataclass(eq=False)
class Card(Entity[CardId]):
    """
    Flashcard with a front (question) and back (answer).

    Business Rules:
    - Front and back are required and at most MAX_CARD_SIDE_LENGTH characters
    - A card always belongs to exactly one deck
    """

    id: CardId
    deck_id: DeckId
    front: str
    back: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        validate_card_side(self.front, "front")
        validate_card_side(self.back, "back")

    def update_content(self, front: str | None = None, back: str | None = None) -> None:
        """
        Update the front and/or back. Omitted sides keep their value.

        Raises:
            ValidationError: If a supplied side breaks its constraint
        """
        if front is not None:
            validate_card_side(front, "front")
        if back is not None:
            validate_card_side(back, "back")

        if front is not None:
            self.front = front
        if back is not None:
            self.back = back
        self.updated_at = datetime.now(UTC)

    @classmethod
    def create(cls, deck_id: DeckId, front: str, back: str) -> "Card":
        """Create a new card (ID will be 0 until persisted)."""
        return cls(id=CardId.generate(), deck_id=deck_id, front=front, back=back)

    @classmethod
    def create_with_id(
        cls,
        id: CardId,
        deck_id: DeckId,
        front: str,
        back: str,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Card":
        """Reconstitute a card from persistence."""
        return cls(
            id=id,
            deck_id=deck_id,
            front=front,
            back=back,
            created_at=created_at,
            updated_at=updated_at,
        )
