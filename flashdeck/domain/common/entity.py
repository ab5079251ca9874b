"""Identity-bearing domain objects and their integer ids."""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar

from .value_object import ValueObject


@dataclass(frozen=True, eq=False)
class EntityId(ValueObject):
    """
    Integer id assigned by the database.

    Zero marks an entity that has not been saved yet.
    """

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"{type(self).__name__} must be non-negative")

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def generate(cls) -> Self:
        """Placeholder id for a new, unsaved entity."""
        return cls(0)

    @property
    def is_persisted(self) -> bool:
        return self.value != 0


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Domain object compared by id rather than by its attributes.

    Subclasses are ``@dataclass(eq=False)`` so the comparison below is kept.
    """

    id: IdType

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return False
        return self.id == other.id  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.id))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id})"
