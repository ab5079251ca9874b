"""Pytest configuration and fixtures."""

import os

# Must be set before the application modules read their settings
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["ENVIRONMENT"] = "test"

from collections.abc import Generator  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402

from flashdeck import models  # noqa: E402
from flashdeck.core import container  # noqa: E402
from flashdeck.database import Base, create_database_engine, get_db  # noqa: E402
from flashdeck.domain.identity.entities import (  # noqa: E402
    AI_FLASHCARD_GENERATION,
    UNLIMITED_DECKS,
)
from flashdeck.infrastructure.identity.auth.token_service import create_access_token  # noqa: E402
from flashdeck.infrastructure.learning.routers import card_generation  # noqa: E402
from flashdeck.main import app  # noqa: E402

# Test database URL (in-memory SQLite, foreign keys enforced)
TEST_DATABASE_URL = "sqlite:///:memory:"

test_engine = create_database_engine(TEST_DATABASE_URL)
TestSessionLocal = sessionmaker(bind=test_engine, autoflush=False)

OWNER = "user_owner"
OTHER = "user_other"


def auth_headers(identity: str, *entitlements: str) -> dict[str, str]:
    """Bearer header for ``identity`` with the given plan entitlements."""
    return {"Authorization": f"Bearer {create_access_token(identity, entitlements)}"}


def create_test_deck(
    db_session: Session,
    user_id: str = OWNER,
    name: str = "Spanish Vocabulary",
    description: str | None = "Common words and phrases",
) -> models.Deck:
    deck = models.Deck(user_id=user_id, name=name, description=description)
    db_session.add(deck)
    db_session.commit()
    db_session.refresh(deck)
    return deck


def create_test_card(
    db_session: Session,
    deck: models.Deck,
    front: str = "Hola",
    back: str = "Hello",
) -> models.Card:
    card = models.Card(deck_id=deck.id, front=front, back=back)
    db_session.add(card)
    db_session.commit()
    db_session.refresh(card)
    return card


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture(autouse=True)
def clear_view_cache() -> Generator[None, None, None]:
    """Cached views must not leak between tests; ids restart with every schema."""
    container.view_cache().clear()
    yield
    container.view_cache().clear()


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, Any, None]:
    """Create a test client with database session."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    card_generation.limiter.enabled = False

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
    card_generation.limiter.enabled = True


@pytest.fixture
def owner_headers() -> dict[str, str]:
    """Free-plan caller."""
    return auth_headers(OWNER)


@pytest.fixture
def pro_headers() -> dict[str, str]:
    """Paid-plan caller with every entitlement."""
    return auth_headers(OWNER, UNLIMITED_DECKS, AI_FLASHCARD_GENERATION)


@pytest.fixture
def other_headers() -> dict[str, str]:
    return auth_headers(OTHER)


@pytest.fixture
def test_deck(db_session: Session) -> models.Deck:
    return create_test_deck(db_session)
