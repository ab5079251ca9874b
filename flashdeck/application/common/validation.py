"""Input checks that happen before any entity is loaded."""

from typing import TypeVar

from flashdeck.domain.common.entity import EntityId
from flashdeck.domain.common.exceptions import ValidationError

IdT = TypeVar("IdT", bound=EntityId)


def parse_id(id_type: type[IdT], value: int, field: str) -> IdT:
    """
    Wrap a client-supplied id, which must be a positive integer.

    Raises:
        ValidationError: If ``value`` is not a positive integer
    """
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValidationError(
            f"{field} must be a positive integer", field=field, constraint="positive"
        )
    return id_type(value)
