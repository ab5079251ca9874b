"""API routes for card management."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Path, status

from flashdeck.application.library.use_cases.cards import DeleteCardUseCase, UpdateCardUseCase
from flashdeck.core import container
from flashdeck.domain.common.exceptions import DomainError
from flashdeck.exceptions import FlashdeckError
from flashdeck.infrastructure.common.di import inject_use_case
from flashdeck.infrastructure.common.schemas import DeletedResponse
from flashdeck.infrastructure.identity.dependencies import CurrentAuthContext
from flashdeck.infrastructure.library.schemas import (
    CardUpdateRequest,
    CardUpdateResponse,
    card_to_schema,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cards", tags=["cards"])


@router.put("/{card_id}", response_model=CardUpdateResponse, status_code=status.HTTP_200_OK)
def update_card(
    request: CardUpdateRequest,
    ctx: CurrentAuthContext,
    card_id: int = Path(..., gt=0),
    use_case: UpdateCardUseCase = Depends(inject_use_case(container.update_card_use_case)),
) -> CardUpdateResponse:
    """
    Update a card's front and/or back.

    Args:
        card_id: ID of the card to update
        request: Request containing the new front and/or back
        use_case: UpdateCardUseCase injected via dependency container

    Returns:
        Updated card
    """
    try:
        card = use_case.update_card(ctx, card_id, front=request.front, back=request.back)
        return CardUpdateResponse(
            success=True,
            message="Card updated successfully",
            card=card_to_schema(card),
        )
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to update card {card_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.delete("/{card_id}", response_model=DeletedResponse, status_code=status.HTTP_200_OK)
def delete_card(
    ctx: CurrentAuthContext,
    card_id: int = Path(..., gt=0),
    use_case: DeleteCardUseCase = Depends(inject_use_case(container.delete_card_use_case)),
) -> DeletedResponse:
    """Delete a card. The rest of its deck is untouched."""
    try:
        use_case.delete_card(ctx, card_id)
        return DeletedResponse(id=card_id, message="Card deleted successfully")
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to delete card {card_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
