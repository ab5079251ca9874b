from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider

from flashdeck.core import container
from flashdeck.database import DatabaseSession

T = TypeVar("T")


def inject_use_case(provider: Provider[T]) -> Callable[[DatabaseSession], T]:
    """
    Turn a container provider into a FastAPI dependency.

    The request's session is bound to ``container.db`` only while the use case
    and its repositories are built; they keep their own reference to it.
    """

    def dependency(db: DatabaseSession) -> T:
        with container.db.override(db):
            return provider()

    return dependency
