"""In-memory stand-ins for repositories and the event publisher."""

from dataclasses import replace
from datetime import UTC, datetime

from flashdeck.domain.common.domain_event import DomainEvent
from flashdeck.domain.common.value_objects import CardId, DeckId, OwnerId
from flashdeck.domain.library.entities import Card, Deck


class InMemoryDeckRepository:
    def __init__(self, cards: "InMemoryCardRepository") -> None:
        self.decks: dict[int, Deck] = {}
        self.cards = cards
        self._next_id = 1

    def find_by_id(self, deck_id: DeckId) -> Deck | None:
        deck = self.decks.get(deck_id.value)
        return replace(deck) if deck else None

    def find_by_owner(self, owner_id: OwnerId) -> list[Deck]:
        return [replace(d) for d in self.decks.values() if d.owner_id == owner_id]

    def count_by_owner(self, owner_id: OwnerId) -> int:
        return len(self.find_by_owner(owner_id))

    def save(self, deck: Deck) -> Deck:
        if not deck.id.is_persisted:
            now = datetime.now(UTC)
            deck = replace(deck, id=DeckId(self._next_id), created_at=now, updated_at=now)
            self._next_id += 1
        self.decks[deck.id.value] = replace(deck)
        return deck

    def delete(self, deck_id: DeckId) -> bool:
        if deck_id.value not in self.decks:
            return False
        for card in self.cards.find_by_deck(deck_id):
            self.cards.delete(card.id)
        del self.decks[deck_id.value]
        return True


class InMemoryCardRepository:
    def __init__(self) -> None:
        self.cards: dict[int, Card] = {}
        self.decks: InMemoryDeckRepository | None = None
        self._next_id = 1

    def find_by_id(self, card_id: CardId) -> Card | None:
        card = self.cards.get(card_id.value)
        return replace(card) if card else None

    def find_with_deck(self, card_id: CardId) -> tuple[Card, Deck] | None:
        card = self.find_by_id(card_id)
        if card is None or self.decks is None:
            return None
        deck = self.decks.find_by_id(card.deck_id)
        return (card, deck) if deck else None

    def find_by_deck(self, deck_id: DeckId) -> list[Card]:
        return [replace(c) for c in self.cards.values() if c.deck_id == deck_id]

    def count_by_deck(self, deck_id: DeckId) -> int:
        return len(self.find_by_deck(deck_id))

    def count_by_owner(self, owner_id: OwnerId) -> int:
        assert self.decks is not None
        return sum(self.count_by_deck(d.id) for d in self.decks.find_by_owner(owner_id))

    def count_by_decks(self, deck_ids: list[DeckId]) -> dict[int, int]:
        return {deck_id.value: self.count_by_deck(deck_id) for deck_id in deck_ids}

    def save(self, card: Card) -> Card:
        if not card.id.is_persisted:
            now = datetime.now(UTC)
            card = replace(card, id=CardId(self._next_id), created_at=now, updated_at=now)
            self._next_id += 1
        self.cards[card.id.value] = replace(card)
        return card

    def delete(self, card_id: CardId) -> bool:
        return self.cards.pop(card_id.value, None) is not None


class RecordingPublisher:
    def __init__(self) -> None:
        self.events: list[DomainEvent] = []

    def publish(self, event: DomainEvent) -> None:
        self.events.append(event)


def make_repositories() -> tuple[InMemoryDeckRepository, InMemoryCardRepository]:
    cards = InMemoryCardRepository()
    decks = InMemoryDeckRepository(cards)
    cards.decks = decks
    return decks, cards
