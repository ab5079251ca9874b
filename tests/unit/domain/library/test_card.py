import pytest

from flashdeck.domain.common.exceptions import ValidationError
from flashdeck.domain.common.value_objects import DeckId
from flashdeck.domain.library.entities import Card


def test_create_card() -> None:
    card = Card.create(deck_id=DeckId(1), front="Hola", back="Hello")

    assert card.deck_id == DeckId(1)
    assert card.front == "Hola"
    assert card.back == "Hello"


def test_card_side_at_limit() -> None:
    card = Card.create(deck_id=DeckId(1), front="q" * 1000, back="a" * 1000)

    assert len(card.front) == 1000


@pytest.mark.parametrize(
    ("front", "back", "field", "constraint"),
    [
        ("", "Hello", "front", "required"),
        ("Hola", "  ", "back", "required"),
        ("q" * 1001, "Hello", "front", "max_length"),
        ("Hola", "a" * 1001, "back", "max_length"),
    ],
)
def test_invalid_sides(front: str, back: str, field: str, constraint: str) -> None:
    with pytest.raises(ValidationError) as exc_info:
        Card.create(deck_id=DeckId(1), front=front, back=back)

    assert exc_info.value.field == field
    assert exc_info.value.constraint == constraint


def test_update_front_keeps_back() -> None:
    card = Card.create(deck_id=DeckId(1), front="Hola", back="Hello")

    card.update_content(front="X")

    assert card.front == "X"
    assert card.back == "Hello"
    assert card.updated_at is not None


def test_invalid_update_changes_nothing() -> None:
    card = Card.create(deck_id=DeckId(1), front="Hola", back="Hello")

    with pytest.raises(ValidationError):
        card.update_content(front="Fine", back="")

    assert card.front == "Hola"
    assert card.back == "Hello"
