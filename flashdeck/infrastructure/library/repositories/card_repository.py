"""Repository for Card domain entities."""

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from flashdeck.domain.common.value_objects import CardId, DeckId, OwnerId
from flashdeck.domain.library.entities import Card, Deck
from flashdeck.infrastructure.library.mappers.card_mapper import CardMapper
from flashdeck.infrastructure.library.mappers.deck_mapper import DeckMapper
from flashdeck.models import Card as CardORM
from flashdeck.models import Deck as DeckORM


class CardRepository:
    """Repository for Card domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = CardMapper()
        self.deck_mapper = DeckMapper()

    def find_by_id(self, card_id: CardId) -> Card | None:
        orm_model = self.db.get(CardORM, card_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_with_deck(self, card_id: CardId) -> tuple[Card, Deck] | None:
        """
        Find a card together with the deck it belongs to.

        Returns:
            (card, deck) if the card exists, None otherwise
        """
        stmt = (
            select(CardORM, DeckORM)
            .join(DeckORM, CardORM.deck_id == DeckORM.id)
            .where(CardORM.id == card_id.value)
        )
        row = self.db.execute(stmt).one_or_none()
        if row is None:
            return None
        card_orm, deck_orm = row
        return self.mapper.to_domain(card_orm), self.deck_mapper.to_domain(deck_orm)

    def find_by_deck(self, deck_id: DeckId) -> list[Card]:
        """
        Get all cards of a deck.

        Returns:
            List of card entities ordered by created_at ASC, then id
        """
        stmt = (
            select(CardORM)
            .where(CardORM.deck_id == deck_id.value)
            .order_by(CardORM.created_at.asc(), CardORM.id.asc())
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def count_by_owner(self, owner_id: OwnerId) -> int:
        stmt = (
            select(func.count(CardORM.id))
            .join(DeckORM, CardORM.deck_id == DeckORM.id)
            .where(DeckORM.user_id == owner_id.value)
        )
        return self.db.execute(stmt).scalar() or 0

    def count_by_decks(self, deck_ids: list[DeckId]) -> dict[int, int]:
        """
        Count cards for several decks in one query.

        Returns:
            Mapping of deck id value to card count; decks without cards map to 0
        """
        ids = [deck_id.value for deck_id in deck_ids]
        counts = dict.fromkeys(ids, 0)
        if not ids:
            return counts

        stmt = (
            select(CardORM.deck_id, func.count(CardORM.id))
            .where(CardORM.deck_id.in_(ids))
            .group_by(CardORM.deck_id)
        )
        for deck_id, count in self.db.execute(stmt).all():
            counts[deck_id] = count
        return counts

    def save(self, card: Card) -> Card:
        """
        Save a card entity (create or update).

        Returns:
            Saved card entity with database-generated values
        """
        if card.id.value == 0:
            orm_model = self.mapper.to_orm(card)
            self.db.add(orm_model)
            self.db.commit()
            self.db.refresh(orm_model)
            return self.mapper.to_domain(orm_model)

        orm_model = self.db.get(CardORM, card.id.value)
        if not orm_model:
            raise ValueError(f"Card {card.id.value} not found")
        self.mapper.to_orm(card, orm_model)
        self.db.commit()
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def delete(self, card_id: CardId) -> bool:
        """
        Returns:
            True if deleted, False if not found
        """
        card_orm = self.db.get(CardORM, card_id.value)
        if not card_orm:
            return False

        self.db.delete(card_orm)
        self.db.commit()
        return True
