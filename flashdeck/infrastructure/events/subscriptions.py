"""Wires in-process event listeners."""

from flashdeck.domain.library.events import ResourceChanged
from flashdeck.infrastructure.cache.view_cache import InMemoryViewCache, ViewCacheInvalidator
from flashdeck.infrastructure.events.in_process_publisher import InProcessEventPublisher


def create_event_publisher(view_cache: InMemoryViewCache) -> InProcessEventPublisher:
    """Build the application publisher with every listener subscribed."""
    publisher = InProcessEventPublisher()
    publisher.subscribe(ResourceChanged, ViewCacheInvalidator(view_cache))
    return publisher
