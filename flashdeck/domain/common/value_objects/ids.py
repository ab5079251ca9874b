from dataclasses import dataclass

from ..entity import EntityId
from ..exceptions import ValidationError
from ..value_object import ValueObject

MAX_OWNER_ID_LENGTH = 255


@dataclass(frozen=True)
class DeckId(EntityId):
    """Strongly-typed deck identifier."""

    value: int


@dataclass(frozen=True)
class CardId(EntityId):
    """Strongly-typed card identifier."""

    value: int


@dataclass(frozen=True)
class OwnerId(ValueObject):
    """Opaque identity of the user who owns a deck, issued by the identity provider."""

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValidationError(
                "Owner identity cannot be empty", field="owner_id", constraint="required"
            )
        if len(self.value) > MAX_OWNER_ID_LENGTH:
            raise ValidationError(
                f"Owner identity cannot exceed {MAX_OWNER_ID_LENGTH} characters",
                field="owner_id",
                constraint="max_length",
            )

    def __str__(self) -> str:
        return self.value
