"""AI-powered card generation for decks."""

import structlog
from fastapi import APIRouter, Depends, HTTPException, Path, Request, status
from slowapi import Limiter
from slowapi.util import get_remote_address

from flashdeck.application.learning.use_cases import GenerateCardsUseCase
from flashdeck.config import get_settings
from flashdeck.core import container
from flashdeck.domain.common.exceptions import DomainError
from flashdeck.exceptions import FlashdeckError
from flashdeck.infrastructure.common.dependencies import require_ai_enabled
from flashdeck.infrastructure.common.di import inject_use_case
from flashdeck.infrastructure.identity.dependencies import CurrentAuthContext
from flashdeck.infrastructure.library.schemas import GeneratedCardsResponse, card_to_schema

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/decks", tags=["cards"])
limiter = Limiter(key_func=get_remote_address)


@router.post(
    "/{deck_id}/cards/generate",
    response_model=GeneratedCardsResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_ai_enabled)],
)
@limiter.limit(get_settings().AI_GENERATION_RATE_LIMIT)  # type: ignore[misc]
async def generate_cards(
    request: Request,
    ctx: CurrentAuthContext,
    deck_id: int = Path(..., gt=0),
    use_case: GenerateCardsUseCase = Depends(inject_use_case(container.generate_cards_use_case)),
) -> GeneratedCardsResponse:
    """
    Generate a batch of cards from the deck's name and description.

    Requires the AI generation entitlement. Either the whole batch is saved
    or, when the suggestion service fails, nothing is.
    """
    try:
        cards = await use_case.generate_cards(ctx, deck_id)
        return GeneratedCardsResponse(
            success=True,
            message=f"Generated {len(cards)} cards",
            cards=[card_to_schema(card) for card in cards],
        )
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(
            "failed_to_generate_cards",
            deck_id=deck_id,
            error=str(e),
            exc_info=True,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
