"""Tests for the dashboard endpoint."""

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from tests.conftest import OTHER, create_test_card, create_test_deck


class TestDashboard:
    """Test suite for GET /dashboard endpoint."""

    def test_empty_dashboard(self, client: TestClient, owner_headers: dict[str, str]) -> None:
        response = client.get("/api/v1/dashboard", headers=owner_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "decks": [],
            "deck_count": 0,
            "card_count": 0,
            "can_create_deck": True,
            "deck_limit": 3,
        }

    def test_dashboard_totals(
        self, client: TestClient, db_session: Session, owner_headers: dict[str, str]
    ) -> None:
        deck1 = create_test_deck(db_session, name="One")
        deck2 = create_test_deck(db_session, name="Two")
        create_test_card(db_session, deck1)
        create_test_card(db_session, deck2)
        create_test_card(db_session, deck2, front="Gato", back="Cat")
        other_deck = create_test_deck(db_session, user_id=OTHER)
        create_test_card(db_session, other_deck)

        data = client.get("/api/v1/dashboard", headers=owner_headers).json()

        assert data["deck_count"] == 2
        assert data["card_count"] == 3
        assert [d["name"] for d in data["decks"]] == ["One", "Two"]
        assert data["can_create_deck"] is True

    def test_dashboard_at_quota(
        self, client: TestClient, db_session: Session, owner_headers: dict[str, str]
    ) -> None:
        for i in range(3):
            create_test_deck(db_session, name=f"Deck {i}")

        data = client.get("/api/v1/dashboard", headers=owner_headers).json()

        assert data["can_create_deck"] is False
        assert data["deck_limit"] == 3

    def test_dashboard_unlimited_plan(
        self, client: TestClient, db_session: Session, pro_headers: dict[str, str]
    ) -> None:
        for i in range(3):
            create_test_deck(db_session, name=f"Deck {i}")

        data = client.get("/api/v1/dashboard", headers=pro_headers).json()

        assert data["can_create_deck"] is True
        assert data["deck_limit"] is None

    def test_dashboard_refreshes_after_card_created(
        self, client: TestClient, db_session: Session, owner_headers: dict[str, str]
    ) -> None:
        deck = create_test_deck(db_session)
        assert client.get("/api/v1/dashboard", headers=owner_headers).json()["card_count"] == 0

        client.post(
            f"/api/v1/decks/{deck.id}/cards",
            json={"front": "Hola", "back": "Hello"},
            headers=owner_headers,
        )

        data = client.get("/api/v1/dashboard", headers=owner_headers).json()
        assert data["card_count"] == 1
        assert data["decks"][0]["card_count"] == 1

    def test_dashboard_requires_authentication(self, client: TestClient) -> None:
        response = client.get("/api/v1/dashboard")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["type"] == "Unauthenticated"
