"""Values compared by content: identifiers and other small domain types."""

from dataclasses import fields


class ValueObject:
    """
    Base for frozen dataclasses that have no identity of their own.

    Plain ``@dataclass(frozen=True)`` subclasses get equality and hashing
    from the generated methods. Bases declared with ``eq=False`` (EntityId)
    fall back to the field comparison below.
    """

    def _field_values(self) -> tuple[object, ...]:
        return tuple(getattr(self, f.name) for f in fields(self))  # type: ignore[arg-type]

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return False
        return self._field_values() == other._field_values()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._field_values()))
