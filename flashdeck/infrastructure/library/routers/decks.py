"""API routes for deck management."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Path, status

from flashdeck.application.library.use_cases.cards import CreateCardUseCase
from flashdeck.application.library.use_cases.decks import (
    CreateDeckUseCase,
    DeleteDeckUseCase,
    UpdateDeckUseCase,
)
from flashdeck.application.library.use_cases.queries import (
    GetDeckDetailUseCase,
    ListDecksUseCase,
)
from flashdeck.core import container
from flashdeck.domain.common.exceptions import DomainError
from flashdeck.exceptions import FlashdeckError
from flashdeck.infrastructure.common.di import inject_use_case
from flashdeck.infrastructure.common.schemas import DeletedResponse
from flashdeck.infrastructure.identity.dependencies import CurrentAuthContext
from flashdeck.infrastructure.library.schemas import (
    CardCreateRequest,
    CardCreateResponse,
    DeckCreateRequest,
    DeckCreateResponse,
    DeckDetailResponse,
    DeckListResponse,
    DeckUpdateRequest,
    DeckUpdateResponse,
    card_to_schema,
    deck_to_schema,
    deck_with_count_to_schema,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/decks", tags=["decks"])


def _unexpected(action: str, e: Exception) -> HTTPException:
    logger.error(f"Failed to {action}: {e!s}", exc_info=True)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred. Please try again later.",
    )


@router.get("", response_model=DeckListResponse, status_code=status.HTTP_200_OK)
def list_decks(
    ctx: CurrentAuthContext,
    use_case: ListDecksUseCase = Depends(inject_use_case(container.list_decks_use_case)),
) -> DeckListResponse:
    """List the caller's decks in creation order, with card counts."""
    try:
        decks = use_case.list_decks(ctx)
        return DeckListResponse(decks=[deck_with_count_to_schema(item) for item in decks])
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        raise _unexpected("list decks", e) from e


@router.post("", response_model=DeckCreateResponse, status_code=status.HTTP_201_CREATED)
def create_deck(
    request: DeckCreateRequest,
    ctx: CurrentAuthContext,
    use_case: CreateDeckUseCase = Depends(inject_use_case(container.create_deck_use_case)),
) -> DeckCreateResponse:
    """
    Create a deck.

    Free-plan callers are limited to a fixed number of decks; going over the
    limit returns 403 with ``limit`` and ``current``.
    """
    try:
        deck = use_case.create_deck(ctx, name=request.name, description=request.description)
        return DeckCreateResponse(
            success=True,
            message="Deck created successfully",
            deck=deck_to_schema(deck),
        )
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        raise _unexpected("create deck", e) from e


@router.get("/{deck_id}", response_model=DeckDetailResponse, status_code=status.HTTP_200_OK)
def get_deck(
    ctx: CurrentAuthContext,
    deck_id: int = Path(..., gt=0),
    use_case: GetDeckDetailUseCase = Depends(inject_use_case(container.get_deck_detail_use_case)),
) -> DeckDetailResponse:
    """Get a deck with its cards, oldest first."""
    try:
        detail = use_case.get_deck_detail(ctx, deck_id)
        return DeckDetailResponse(
            deck=deck_to_schema(detail.deck),
            cards=[card_to_schema(card) for card in detail.cards],
            card_count=detail.card_count,
        )
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"get deck {deck_id}", e) from e


@router.put("/{deck_id}", response_model=DeckUpdateResponse, status_code=status.HTTP_200_OK)
def update_deck(
    request: DeckUpdateRequest,
    ctx: CurrentAuthContext,
    deck_id: int = Path(..., gt=0),
    use_case: UpdateDeckUseCase = Depends(inject_use_case(container.update_deck_use_case)),
) -> DeckUpdateResponse:
    """Update a deck's name and/or description."""
    try:
        deck = use_case.update_deck(
            ctx, deck_id, name=request.name, description=request.description
        )
        return DeckUpdateResponse(
            success=True,
            message="Deck updated successfully",
            deck=deck_to_schema(deck),
        )
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"update deck {deck_id}", e) from e


@router.delete("/{deck_id}", response_model=DeletedResponse, status_code=status.HTTP_200_OK)
def delete_deck(
    ctx: CurrentAuthContext,
    deck_id: int = Path(..., gt=0),
    use_case: DeleteDeckUseCase = Depends(inject_use_case(container.delete_deck_use_case)),
) -> DeletedResponse:
    """Delete a deck and every card in it."""
    try:
        use_case.delete_deck(ctx, deck_id)
        return DeletedResponse(id=deck_id, message="Deck deleted successfully")
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"delete deck {deck_id}", e) from e


@router.post(
    "/{deck_id}/cards",
    response_model=CardCreateResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_card(
    request: CardCreateRequest,
    ctx: CurrentAuthContext,
    deck_id: int = Path(..., gt=0),
    use_case: CreateCardUseCase = Depends(inject_use_case(container.create_card_use_case)),
) -> CardCreateResponse:
    """Add a card to a deck."""
    try:
        card = use_case.create_card(ctx, deck_id, front=request.front, back=request.back)
        return CardCreateResponse(
            success=True,
            message="Card created successfully",
            card=card_to_schema(card),
        )
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"create card in deck {deck_id}", e) from e
