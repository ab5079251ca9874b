"""In-process event delivery."""

from collections import defaultdict
from collections.abc import Callable

import structlog

from flashdeck.domain.common.domain_event import DomainEvent

logger = structlog.get_logger(__name__)

EventHandler = Callable[[DomainEvent], None]


class InProcessEventPublisher:
    """
    Calls subscribed handlers synchronously, in subscription order.

    A failing handler is logged and skipped; the publisher never raises
    back into the operation that published the event.
    """

    def __init__(self) -> None:
        self._handlers: dict[type[DomainEvent], list[EventHandler]] = defaultdict(list)

    def subscribe(self, event_type: type[DomainEvent], handler: EventHandler) -> None:
        self._handlers[event_type].append(handler)

    def publish(self, event: DomainEvent) -> None:
        for event_type, handlers in self._handlers.items():
            if not isinstance(event, event_type):
                continue
            for handler in handlers:
                try:
                    handler(event)
                except Exception as e:
                    logger.error(
                        "event_handler_failed",
                        event_type=event.event_type,
                        event_id=str(event.event_id),
                        handler=getattr(handler, "__qualname__", repr(handler)),
                        error=str(e),
                        exc_info=True,
                    )
