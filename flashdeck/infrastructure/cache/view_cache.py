"""In-memory cache for rendered read views."""

import threading
import time
from collections.abc import Callable
from typing import Any

import structlog

from flashdeck.application.common.view_cache import (
    dashboard_key,
    deck_detail_key,
    deck_list_key,
)
from flashdeck.domain.common.domain_event import DomainEvent
from flashdeck.domain.library.events import ResourceChanged

logger = structlog.get_logger(__name__)


class InMemoryViewCache:
    """
    Process-local key/value store shared by all requests.

    Entries expire after ``ttl_seconds``. Invalidation only reaches this
    process, so the TTL bounds how stale a view can get when another worker
    handled the change.
    """

    def __init__(
        self,
        ttl_seconds: float = 30.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[str, tuple[Any, float]] = {}
        self._versions: dict[str, int] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Any | None:  # noqa: ANN401
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            value, expires_at = entry
            if self._clock() >= expires_at:
                del self._entries[key]
                return None
            return value

    def version(self, key: str) -> int:
        with self._lock:
            return self._versions.get(key, 0)

    def set(self, key: str, value: Any, version: int) -> bool:  # noqa: ANN401
        with self._lock:
            if self._versions.get(key, 0) != version:
                logger.debug("view_cache_write_skipped", key=key)
                return False
            self._entries[key] = (value, self._clock() + self.ttl_seconds)
            return True

    def invalidate(self, key: str) -> None:
        with self._lock:
            self._versions[key] = self._versions.get(key, 0) + 1
            self._entries.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._versions.clear()


class ViewCacheInvalidator:
    """Drops every cached view a deck or card change can affect."""

    def __init__(self, view_cache: InMemoryViewCache) -> None:
        self.view_cache = view_cache

    def __call__(self, event: DomainEvent) -> None:
        if not isinstance(event, ResourceChanged):
            return
        for key in (
            dashboard_key(event.owner_id),
            deck_list_key(event.owner_id),
            deck_detail_key(event.deck_id),
        ):
            self.view_cache.invalidate(key)
        logger.debug(
            "view_cache_invalidated",
            kind=event.kind,
            action=event.action,
            deck_id=event.deck_id,
            owner_id=event.owner_id,
        )
