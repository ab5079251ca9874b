"""Protocol for the cache of rendered read views (dashboard, deck list, deck detail)."""

from typing import Any, Protocol


def dashboard_key(owner_id: str) -> str:
    return f"dashboard:{owner_id}"


def deck_list_key(owner_id: str) -> str:
    return f"decks:{owner_id}"


def deck_detail_key(deck_id: int) -> str:
    return f"deck:{deck_id}"


class ViewCacheProtocol(Protocol):
    """
    Read-through cache with a version per key.

    A reader takes ``version(key)`` before loading from storage and hands it
    back to ``set``; if the key was invalidated in between, the write is
    dropped so a view built from old rows never lands in the cache.
    """

    def get(self, key: str) -> Any | None:  # noqa: ANN401
        """Return the cached view, or None on a miss or expiry."""
        ...

    def version(self, key: str) -> int:
        ...

    def set(self, key: str, value: Any, version: int) -> bool:  # noqa: ANN401
        """Store ``value`` unless ``key`` was invalidated since ``version`` was read."""
        ...

    def invalidate(self, key: str) -> None:
        ...
