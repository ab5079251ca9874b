"""Events emitted after a deck or card has been written."""

from dataclasses import dataclass
from typing import Literal

from flashdeck.domain.common.domain_event import DomainEvent

ResourceKind = Literal["deck", "card"]
ResourceAction = Literal["created", "updated", "deleted"]


@dataclass(frozen=True, kw_only=True)
class ResourceChanged(DomainEvent):
    """
    A deck or card was created, updated or deleted.

    ``deck_id`` is the affected deck (the card's parent for card changes) and
    ``owner_id`` its owner, so listeners can refresh the views that show it.
    """

    kind: ResourceKind
    action: ResourceAction
    resource_id: int
    deck_id: int
    owner_id: str
