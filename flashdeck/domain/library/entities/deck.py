"""
Deck entity: a named collection of cards owned by one identity.
"""

from dataclasses import dataclass
from datetime import UTC, datetime

from flashdeck.domain.common.entity import Entity
from flashdeck.domain.common.exceptions import ValidationError
from flashdeck.domain.common.value_objects import DeckId, OwnerId

# Domain constraints
MAX_DECK_NAME_LENGTH = 100
MAX_DECK_DESCRIPTION_LENGTH = 500


def validate_deck_name(name: str) -> str:
    """Return the trimmed name; the length limit applies to the input as sent."""
    if name is None or not name.strip():
        raise ValidationError("Name is required", field="name", constraint="required")
    if len(name) > MAX_DECK_NAME_LENGTH:
        raise ValidationError(
            f"Name cannot exceed {MAX_DECK_NAME_LENGTH} characters",
            field="name",
            constraint="max_length",
        )
    return name.strip()


def validate_deck_description(description: str | None) -> str | None:
    """Return the trimmed description, ``None`` for blank input."""
    if description is not None and len(description) > MAX_DECK_DESCRIPTION_LENGTH:
        raise ValidationError(
            f"Description cannot exceed {MAX_DECK_DESCRIPTION_LENGTH} characters",
            field="description",
            constraint="max_length",
        )
    if description is None or not description.strip():
        return None
    return description.strip()


@dataclass(eq=False)
class Deck(Entity[DeckId]):
    """
    Deck of flashcards.

    Business Rules:
    - Name is required and at most MAX_DECK_NAME_LENGTH characters
    - Description is optional and at most MAX_DECK_DESCRIPTION_LENGTH characters
    - The owner is fixed at creation and never changes
    - Deleting a deck deletes its cards (enforced by the repository)
    """

    id: DeckId
    owner_id: OwnerId
    name: str
    description: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        self.name = validate_deck_name(self.name)
        self.description = validate_deck_description(self.description)

    def is_owned_by(self, owner_id: OwnerId) -> bool:
        return self.owner_id == owner_id

    def update_details(self, name: str | None = None, description: str | None = None) -> None:
        """
        Apply a partial update; omitted (``None``) fields keep their value.

        An empty description clears it.

        Raises:
            ValidationError: If a supplied field breaks its constraint
        """
        new_name = validate_deck_name(name) if name is not None else self.name
        new_description = (
            validate_deck_description(description) if description is not None else self.description
        )
        self.name = new_name
        self.description = new_description
        self.updated_at = datetime.now(UTC)

    @classmethod
    def create(cls, owner_id: OwnerId, name: str, description: str | None = None) -> "Deck":
        """Create a new deck (ID will be 0 until persisted)."""
        return cls(
            id=DeckId.generate(),
            owner_id=owner_id,
            name=name,
            description=description,
        )

    @classmethod
    def create_with_id(
        cls,
        id: DeckId,
        owner_id: OwnerId,
        name: str,
        description: str | None,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Deck":
        """Reconstitute a deck from persistence."""
        return cls(
            id=id,
            owner_id=owner_id,
            name=name,
            description=description,
            created_at=created_at,
            updated_at=updated_at,
        )
