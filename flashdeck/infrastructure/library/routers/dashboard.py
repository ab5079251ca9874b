"""API route for the dashboard summary."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from flashdeck.application.library.use_cases.queries import GetDashboardUseCase
from flashdeck.core import container
from flashdeck.domain.common.exceptions import DomainError
from flashdeck.exceptions import FlashdeckError
from flashdeck.infrastructure.common.di import inject_use_case
from flashdeck.infrastructure.identity.dependencies import CurrentAuthContext
from flashdeck.infrastructure.library.schemas import DashboardResponse, deck_with_count_to_schema

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardResponse, status_code=status.HTTP_200_OK)
def get_dashboard(
    ctx: CurrentAuthContext,
    use_case: GetDashboardUseCase = Depends(inject_use_case(container.get_dashboard_use_case)),
) -> DashboardResponse:
    """Get the caller's decks with deck and card totals."""
    try:
        view = use_case.get_dashboard(ctx)
        return DashboardResponse(
            decks=[deck_with_count_to_schema(item) for item in view.summary.decks],
            deck_count=view.summary.deck_count,
            card_count=view.summary.card_count,
            can_create_deck=view.can_create_deck,
            deck_limit=view.deck_limit,
        )
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to build dashboard: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
