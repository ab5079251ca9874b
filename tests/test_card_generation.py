"""Tests for the AI card generation endpoint."""

from collections.abc import Generator

import pytest
from dependency_injector import providers
from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from flashdeck import feature_flags, models
from flashdeck.application.learning.protocols.card_suggestion_service import CardSuggestion
from flashdeck.core import container
from flashdeck.domain.identity.entities import AI_FLASHCARD_GENERATION
from tests.conftest import OWNER, auth_headers, create_test_card


class FakeSuggestionService:
    """Records calls and returns a canned batch, or raises."""

    def __init__(
        self,
        suggestions: list[CardSuggestion] | None = None,
        error: Exception | None = None,
    ) -> None:
        self.suggestions = suggestions or []
        self.error = error
        self.calls: list[dict] = []

    async def suggest_cards(
        self,
        topic: str,
        description: str | None,
        existing_pairs: list[CardSuggestion],
        count: int,
    ) -> list[CardSuggestion]:
        self.calls.append(
            {
                "topic": topic,
                "description": description,
                "existing_pairs": existing_pairs,
                "count": count,
            }
        )
        if self.error is not None:
            raise self.error
        return self.suggestions


def make_batch(n: int = 20) -> list[CardSuggestion]:
    return [CardSuggestion(front=f"Question {i}", back=f"Answer {i}") for i in range(n)]


@pytest.fixture
def ai_enabled(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(feature_flags, "is_ai_enabled", lambda: True)


@pytest.fixture
def use_service() -> Generator:
    """Install a fake suggestion service for the duration of a test."""

    def install(service: FakeSuggestionService) -> FakeSuggestionService:
        container.card_suggestion_service.override(providers.Object(service))
        return service

    yield install
    container.card_suggestion_service.reset_override()


@pytest.fixture
def ai_headers() -> dict[str, str]:
    return auth_headers(OWNER, AI_FLASHCARD_GENERATION)


class TestGenerateCards:
    """Test suite for POST /decks/:id/cards/generate endpoint."""

    def test_generates_full_batch(
        self,
        client: TestClient,
        db_session: Session,
        test_deck: models.Deck,
        ai_enabled: None,
        use_service,
        ai_headers: dict[str, str],
    ) -> None:
        create_test_card(db_session, test_deck, front="Hola", back="Hello")
        service = use_service(FakeSuggestionService(make_batch()))

        response = client.post(
            f"/api/v1/decks/{test_deck.id}/cards/generate", headers=ai_headers
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert len(data["cards"]) == 20
        assert data["cards"][0]["front"] == "Question 0"
        assert db_session.query(models.Card).filter_by(deck_id=test_deck.id).count() == 21

        call = service.calls[0]
        assert call["topic"] == "Spanish Vocabulary"
        assert call["description"] == "Common words and phrases"
        assert call["existing_pairs"] == [CardSuggestion(front="Hola", back="Hello")]
        assert call["count"] == 20

    def test_requires_entitlement(
        self,
        client: TestClient,
        db_session: Session,
        test_deck: models.Deck,
        ai_enabled: None,
        use_service,
        owner_headers: dict[str, str],
    ) -> None:
        service = use_service(FakeSuggestionService(make_batch()))

        response = client.post(
            f"/api/v1/decks/{test_deck.id}/cards/generate", headers=owner_headers
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN
        data = response.json()
        assert data["type"] == "FeatureGated"
        assert data["feature"] == AI_FLASHCARD_GENERATION
        assert "Upgrade" in data["detail"]
        assert service.calls == []

    def test_foreign_deck_is_forbidden(
        self,
        client: TestClient,
        db_session: Session,
        test_deck: models.Deck,
        ai_enabled: None,
        use_service,
    ) -> None:
        service = use_service(FakeSuggestionService(make_batch()))
        headers = auth_headers("someone_else", AI_FLASHCARD_GENERATION)

        response = client.post(f"/api/v1/decks/{test_deck.id}/cards/generate", headers=headers)

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.json()["type"] == "Forbidden"
        assert service.calls == []

    def test_upstream_failure_writes_nothing(
        self,
        client: TestClient,
        db_session: Session,
        test_deck: models.Deck,
        ai_enabled: None,
        use_service,
        ai_headers: dict[str, str],
    ) -> None:
        use_service(FakeSuggestionService(error=TimeoutError("model timed out")))

        response = client.post(
            f"/api/v1/decks/{test_deck.id}/cards/generate", headers=ai_headers
        )

        assert response.status_code == status.HTTP_502_BAD_GATEWAY
        assert response.json()["type"] == "GenerationFailed"
        assert db_session.query(models.Card).count() == 0

    def test_short_batch_writes_nothing(
        self,
        client: TestClient,
        db_session: Session,
        test_deck: models.Deck,
        ai_enabled: None,
        use_service,
        ai_headers: dict[str, str],
    ) -> None:
        use_service(FakeSuggestionService(make_batch(19)))

        response = client.post(
            f"/api/v1/decks/{test_deck.id}/cards/generate", headers=ai_headers
        )

        assert response.status_code == status.HTTP_502_BAD_GATEWAY
        assert db_session.query(models.Card).count() == 0

    def test_invalid_pair_writes_nothing(
        self,
        client: TestClient,
        db_session: Session,
        test_deck: models.Deck,
        ai_enabled: None,
        use_service,
        ai_headers: dict[str, str],
    ) -> None:
        batch = make_batch()
        batch[7] = CardSuggestion(front="Valid question", back="")
        use_service(FakeSuggestionService(batch))

        response = client.post(
            f"/api/v1/decks/{test_deck.id}/cards/generate", headers=ai_headers
        )

        assert response.status_code == status.HTTP_502_BAD_GATEWAY
        assert db_session.query(models.Card).count() == 0

    def test_disabled_on_server(
        self,
        client: TestClient,
        test_deck: models.Deck,
        monkeypatch: pytest.MonkeyPatch,
        ai_headers: dict[str, str],
    ) -> None:
        monkeypatch.setattr(feature_flags, "is_ai_enabled", lambda: False)

        response = client.post(
            f"/api/v1/decks/{test_deck.id}/cards/generate", headers=ai_headers
        )

        assert response.status_code == status.HTTP_410_GONE

    def test_requires_authentication(
        self, client: TestClient, test_deck: models.Deck, ai_enabled: None
    ) -> None:
        response = client.post(f"/api/v1/decks/{test_deck.id}/cards/generate")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
