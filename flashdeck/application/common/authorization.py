"""
Authorization gate shared by every write operation.

Order of checks: identity present -> entitlement (where a feature is
gated) -> resource exists and belongs to the caller.
"""

import structlog

from flashdeck.domain.common.value_objects import OwnerId
from flashdeck.domain.identity.entities import AuthContext
from flashdeck.domain.library.entities import Deck
from flashdeck.exceptions import AccessDeniedError, FeatureGatedError, UnauthenticatedError

logger = structlog.get_logger(__name__)


def require_identity(ctx: AuthContext) -> OwnerId:
    """
    Return the caller's identity.

    Raises:
        UnauthenticatedError: If the context carries no identity
    """
    if not ctx.identity:
        raise UnauthenticatedError()
    return OwnerId(ctx.identity)


def require_entitlement(ctx: AuthContext, entitlement: str) -> None:
    """
    Raises:
        FeatureGatedError: If the caller's plan lacks ``entitlement``
    """
    if not ctx.has_entitlement(entitlement):
        logger.info("feature_gated", identity=ctx.identity, entitlement=entitlement)
        raise FeatureGatedError(entitlement)


def ensure_deck_owner(deck: Deck | None, owner_id: OwnerId) -> Deck:
    """
    Return the deck if the caller owns it.

    A missing deck and a deck owned by someone else raise the same error.

    Raises:
        AccessDeniedError: If the deck is missing or not owned by ``owner_id``
    """
    if deck is None or not deck.is_owned_by(owner_id):
        logger.warning(
            "deck_access_denied",
            deck_id=deck.id.value if deck is not None else None,
            identity=owner_id.value,
        )
        raise AccessDeniedError()
    return deck
