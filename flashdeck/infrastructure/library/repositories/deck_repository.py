"""Repository for Deck domain entities."""

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from flashdeck.domain.common.value_objects import DeckId, OwnerId
from flashdeck.domain.library.entities import Deck
from flashdeck.infrastructure.library.mappers.deck_mapper import DeckMapper
from flashdeck.models import Card as CardORM
from flashdeck.models import Deck as DeckORM


class DeckRepository:
    """Repository for Deck domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = DeckMapper()

    def find_by_id(self, deck_id: DeckId) -> Deck | None:
        orm_model = self.db.get(DeckORM, deck_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_owner(self, owner_id: OwnerId) -> list[Deck]:
        """
        Get all decks of an owner.

        Returns:
            List of deck entities ordered by created_at ASC, then id
        """
        stmt = (
            select(DeckORM)
            .where(DeckORM.user_id == owner_id.value)
            .order_by(DeckORM.created_at.asc(), DeckORM.id.asc())
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def count_by_owner(self, owner_id: OwnerId) -> int:
        stmt = select(func.count(DeckORM.id)).where(DeckORM.user_id == owner_id.value)
        return self.db.execute(stmt).scalar() or 0

    def save(self, deck: Deck) -> Deck:
        """
        Save a deck entity (create or update).

        Returns:
            Saved deck entity with database-generated values
        """
        if deck.id.value == 0:
            orm_model = self.mapper.to_orm(deck)
            self.db.add(orm_model)
            self.db.commit()
            self.db.refresh(orm_model)
            return self.mapper.to_domain(orm_model)

        orm_model = self.db.get(DeckORM, deck.id.value)
        if not orm_model:
            raise ValueError(f"Deck {deck.id.value} not found")
        self.mapper.to_orm(deck, orm_model)
        self.db.commit()
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def delete(self, deck_id: DeckId) -> bool:
        """
        Delete a deck and its cards in one transaction.

        Cards are deleted explicitly so the result does not depend on the
        database enforcing ON DELETE CASCADE.

        Returns:
            True if deleted, False if not found
        """
        deck_orm = self.db.get(DeckORM, deck_id.value)
        if not deck_orm:
            return False

        self.db.execute(delete(CardORM).where(CardORM.deck_id == deck_id.value))
        self.db.delete(deck_orm)
        self.db.commit()
        return True
