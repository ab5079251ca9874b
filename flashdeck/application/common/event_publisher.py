from typing import Protocol

from flashdeck.domain.common.domain_event import DomainEvent


class EventPublisherProtocol(Protocol):
    """Delivers events to in-process listeners; delivery is best-effort."""

    def publish(self, event: DomainEvent) -> None: ...
