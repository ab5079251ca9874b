"""API routes for starting study sessions."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Path, status

from flashdeck.application.study.use_cases import StartStudyUseCase
from flashdeck.config import get_settings
from flashdeck.core import container
from flashdeck.domain.common.exceptions import DomainError
from flashdeck.exceptions import FlashdeckError
from flashdeck.infrastructure.common.di import inject_use_case
from flashdeck.infrastructure.identity.dependencies import CurrentAuthContext
from flashdeck.infrastructure.study.schemas import StudyCardItem, StudySessionResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/decks", tags=["study"])


@router.get(
    "/{deck_id}/study",
    response_model=StudySessionResponse,
    status_code=status.HTTP_200_OK,
)
def start_study(
    ctx: CurrentAuthContext,
    deck_id: int = Path(..., gt=0),
    use_case: StartStudyUseCase = Depends(inject_use_case(container.start_study_use_case)),
) -> StudySessionResponse:
    """
    Load a deck's cards for a study session.

    The session itself runs on the client; nothing about it is stored.

    Raises:
        EmptyDeckError: 409 if the deck has no cards yet
    """
    try:
        material = use_case.start_study(ctx, deck_id)
        return StudySessionResponse(
            deck_id=material.deck.id.value,
            deck_name=material.deck.name,
            cards=[
                StudyCardItem(id=card.id.value, front=card.front, back=card.back)
                for card in material.cards
            ],
            transition_ms=get_settings().STUDY_TRANSITION_MS,
        )
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to start study for deck {deck_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
