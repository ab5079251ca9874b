"""Tests for deck API endpoints."""

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from flashdeck import models
from tests.conftest import OTHER, create_test_card, create_test_deck


class TestCreateDeck:
    """Test suite for POST /decks endpoint."""

    def test_create_deck_success(
        self, client: TestClient, db_session: Session, owner_headers: dict[str, str]
    ) -> None:
        response = client.post(
            "/api/v1/decks",
            json={"name": "  Biology  ", "description": "Cells and organelles"},
            headers=owner_headers,
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["success"] is True
        deck = data["deck"]
        assert deck["name"] == "Biology"
        assert deck["description"] == "Cells and organelles"

        db_deck = db_session.query(models.Deck).filter_by(id=deck["id"]).first()
        assert db_deck is not None
        assert db_deck.user_id == "user_owner"

    def test_create_deck_empty_description_stored_as_null(
        self, client: TestClient, db_session: Session, owner_headers: dict[str, str]
    ) -> None:
        response = client.post(
            "/api/v1/decks",
            json={"name": "Chemistry", "description": "   "},
            headers=owner_headers,
        )

        assert response.status_code == status.HTTP_201_CREATED
        deck_id = response.json()["deck"]["id"]
        assert db_session.get(models.Deck, deck_id).description is None

    def test_create_deck_requires_authentication(self, client: TestClient) -> None:
        response = client.post("/api/v1/decks", json={"name": "Biology"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["type"] == "Unauthenticated"

    def test_create_deck_invalid_token_is_unauthenticated(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/decks",
            json={"name": "Biology"},
            headers={"Authorization": "Bearer not-a-token"},
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_create_deck_blank_name(self, client: TestClient, owner_headers: dict[str, str]) -> None:
        response = client.post("/api/v1/decks", json={"name": "   "}, headers=owner_headers)

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT
        data = response.json()
        assert data["type"] == "ValidationFailed"
        assert data["field"] == "name"
        assert data["constraint"] == "required"

    def test_create_deck_name_too_long(
        self, client: TestClient, owner_headers: dict[str, str]
    ) -> None:
        response = client.post("/api/v1/decks", json={"name": "x" * 101}, headers=owner_headers)

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT
        assert response.json()["field"] == "name"
        assert response.json()["constraint"] == "max_length"

    def test_create_deck_name_at_limit(
        self, client: TestClient, owner_headers: dict[str, str]
    ) -> None:
        response = client.post("/api/v1/decks", json={"name": "x" * 100}, headers=owner_headers)

        assert response.status_code == status.HTTP_201_CREATED

    def test_create_deck_description_too_long(
        self, client: TestClient, owner_headers: dict[str, str]
    ) -> None:
        response = client.post(
            "/api/v1/decks",
            json={"name": "Biology", "description": "d" * 501},
            headers=owner_headers,
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT
        assert response.json()["field"] == "description"

    def test_free_plan_quota(
        self, client: TestClient, db_session: Session, owner_headers: dict[str, str]
    ) -> None:
        for i in range(3):
            response = client.post(
                "/api/v1/decks", json={"name": f"Deck {i}"}, headers=owner_headers
            )
            assert response.status_code == status.HTTP_201_CREATED

        response = client.post("/api/v1/decks", json={"name": "Deck 4"}, headers=owner_headers)

        assert response.status_code == status.HTTP_403_FORBIDDEN
        data = response.json()
        assert data["type"] == "QuotaExceeded"
        assert data["limit"] == 3
        assert data["current"] == 3
        assert db_session.query(models.Deck).count() == 3

    def test_quota_counts_only_own_decks(
        self, client: TestClient, db_session: Session, owner_headers: dict[str, str]
    ) -> None:
        for i in range(3):
            create_test_deck(db_session, user_id=OTHER, name=f"Other {i}")

        response = client.post("/api/v1/decks", json={"name": "Mine"}, headers=owner_headers)

        assert response.status_code == status.HTTP_201_CREATED

    def test_unlimited_plan_skips_quota(
        self, client: TestClient, db_session: Session, pro_headers: dict[str, str]
    ) -> None:
        for i in range(3):
            create_test_deck(db_session, name=f"Deck {i}")

        response = client.post("/api/v1/decks", json={"name": "Deck 4"}, headers=pro_headers)

        assert response.status_code == status.HTTP_201_CREATED


class TestListDecks:
    """Test suite for GET /decks endpoint."""

    def test_list_decks_in_creation_order_with_counts(
        self, client: TestClient, db_session: Session, owner_headers: dict[str, str]
    ) -> None:
        first = create_test_deck(db_session, name="First")
        second = create_test_deck(db_session, name="Second")
        create_test_deck(db_session, user_id=OTHER, name="Not mine")
        create_test_card(db_session, second)
        create_test_card(db_session, second, front="Adiós", back="Goodbye")

        response = client.get("/api/v1/decks", headers=owner_headers)

        assert response.status_code == status.HTTP_200_OK
        decks = response.json()["decks"]
        assert [d["id"] for d in decks] == [first.id, second.id]
        assert [d["card_count"] for d in decks] == [0, 2]

    def test_list_decks_requires_authentication(self, client: TestClient) -> None:
        response = client.get("/api/v1/decks")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_list_refreshes_after_create(
        self, client: TestClient, owner_headers: dict[str, str]
    ) -> None:
        assert client.get("/api/v1/decks", headers=owner_headers).json()["decks"] == []

        client.post("/api/v1/decks", json={"name": "Fresh"}, headers=owner_headers)

        decks = client.get("/api/v1/decks", headers=owner_headers).json()["decks"]
        assert [d["name"] for d in decks] == ["Fresh"]


class TestGetDeck:
    """Test suite for GET /decks/:id endpoint."""

    def test_get_deck_with_cards(
        self,
        client: TestClient,
        db_session: Session,
        test_deck: models.Deck,
        owner_headers: dict[str, str],
    ) -> None:
        card1 = create_test_card(db_session, test_deck, front="Uno", back="One")
        card2 = create_test_card(db_session, test_deck, front="Dos", back="Two")

        response = client.get(f"/api/v1/decks/{test_deck.id}", headers=owner_headers)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["deck"]["name"] == "Spanish Vocabulary"
        assert data["card_count"] == 2
        assert [c["id"] for c in data["cards"]] == [card1.id, card2.id]

    def test_missing_and_foreign_decks_look_the_same(
        self,
        client: TestClient,
        test_deck: models.Deck,
        other_headers: dict[str, str],
    ) -> None:
        foreign = client.get(f"/api/v1/decks/{test_deck.id}", headers=other_headers)
        missing = client.get("/api/v1/decks/99999", headers=other_headers)

        assert foreign.status_code == status.HTTP_403_FORBIDDEN
        assert missing.status_code == status.HTTP_403_FORBIDDEN
        assert foreign.json() == missing.json()
        assert foreign.json()["type"] == "Forbidden"

    def test_cached_deck_still_checks_owner(
        self,
        client: TestClient,
        test_deck: models.Deck,
        owner_headers: dict[str, str],
        other_headers: dict[str, str],
    ) -> None:
        assert client.get(f"/api/v1/decks/{test_deck.id}", headers=owner_headers).status_code == 200

        response = client.get(f"/api/v1/decks/{test_deck.id}", headers=other_headers)

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_get_deck_non_positive_id(
        self, client: TestClient, owner_headers: dict[str, str]
    ) -> None:
        response = client.get("/api/v1/decks/0", headers=owner_headers)

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT


class TestUpdateDeck:
    """Test suite for PUT /decks/:id endpoint."""

    def test_update_name_only(
        self,
        client: TestClient,
        db_session: Session,
        test_deck: models.Deck,
        owner_headers: dict[str, str],
    ) -> None:
        response = client.put(
            f"/api/v1/decks/{test_deck.id}",
            json={"name": "Spanish Basics"},
            headers=owner_headers,
        )

        assert response.status_code == status.HTTP_200_OK
        deck = response.json()["deck"]
        assert deck["name"] == "Spanish Basics"
        assert deck["description"] == "Common words and phrases"

    def test_update_clears_description(
        self,
        client: TestClient,
        db_session: Session,
        test_deck: models.Deck,
        owner_headers: dict[str, str],
    ) -> None:
        response = client.put(
            f"/api/v1/decks/{test_deck.id}",
            json={"description": ""},
            headers=owner_headers,
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["deck"]["description"] is None

    def test_update_requires_a_field(
        self, client: TestClient, test_deck: models.Deck, owner_headers: dict[str, str]
    ) -> None:
        response = client.put(f"/api/v1/decks/{test_deck.id}", json={}, headers=owner_headers)

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT
        assert response.json()["type"] == "ValidationFailed"

    def test_update_foreign_deck_is_forbidden(
        self,
        client: TestClient,
        db_session: Session,
        test_deck: models.Deck,
        other_headers: dict[str, str],
    ) -> None:
        response = client.put(
            f"/api/v1/decks/{test_deck.id}",
            json={"name": "Hijacked"},
            headers=other_headers,
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN
        db_session.refresh(test_deck)
        assert test_deck.name == "Spanish Vocabulary"

    def test_update_invalidates_cached_detail(
        self, client: TestClient, test_deck: models.Deck, owner_headers: dict[str, str]
    ) -> None:
        client.get(f"/api/v1/decks/{test_deck.id}", headers=owner_headers)

        client.put(
            f"/api/v1/decks/{test_deck.id}", json={"name": "Renamed"}, headers=owner_headers
        )

        response = client.get(f"/api/v1/decks/{test_deck.id}", headers=owner_headers)
        assert response.json()["deck"]["name"] == "Renamed"


class TestDeleteDeck:
    """Test suite for DELETE /decks/:id endpoint."""

    def test_delete_deck_removes_cards(
        self,
        client: TestClient,
        db_session: Session,
        test_deck: models.Deck,
        owner_headers: dict[str, str],
    ) -> None:
        create_test_card(db_session, test_deck)
        create_test_card(db_session, test_deck, front="Gato", back="Cat")
        deck_id = test_deck.id

        response = client.delete(f"/api/v1/decks/{deck_id}", headers=owner_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["success"] is True
        db_session.expire_all()
        assert db_session.get(models.Deck, deck_id) is None
        assert db_session.query(models.Card).filter_by(deck_id=deck_id).count() == 0

    def test_delete_foreign_deck_is_forbidden(
        self,
        client: TestClient,
        db_session: Session,
        test_deck: models.Deck,
        other_headers: dict[str, str],
    ) -> None:
        response = client.delete(f"/api/v1/decks/{test_deck.id}", headers=other_headers)

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert db_session.query(models.Deck).count() == 1

    def test_delete_frees_quota(
        self, client: TestClient, db_session: Session, owner_headers: dict[str, str]
    ) -> None:
        decks = [create_test_deck(db_session, name=f"Deck {i}") for i in range(3)]

        client.delete(f"/api/v1/decks/{decks[0].id}", headers=owner_headers)
        response = client.post("/api/v1/decks", json={"name": "Replacement"}, headers=owner_headers)

        assert response.status_code == status.HTTP_201_CREATED
