"""Custom exception hierarchy for Flashdeck application."""


class FlashdeckError(Exception):
    """Base exception for all Flashdeck errors."""

    error_type = "FlashdeckError"

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)

    def to_payload(self) -> dict[str, object]:
        """Serialize the error for an API response."""
        return {"detail": self.message, "type": self.error_type}


class UnauthenticatedError(FlashdeckError):
    """No identity was supplied with the request."""

    error_type = "Unauthenticated"

    def __init__(self, message: str = "Authentication required") -> None:
        """Initialize with message and 401 status code."""
        super().__init__(message, status_code=401)


class AccessDeniedError(FlashdeckError):
    """
    The caller does not own the resource, or the resource does not exist.

    Both cases produce the same error so that callers cannot probe for
    resources belonging to other identities.
    """

    error_type = "Forbidden"

    def __init__(self, message: str = "Access denied") -> None:
        """Initialize with message and 403 status code."""
        super().__init__(message, status_code=403)


class FeatureGatedError(FlashdeckError):
    """The caller's plan does not include the requested feature."""

    error_type = "FeatureGated"

    def __init__(self, feature: str, message: str | None = None) -> None:
        """Initialize with the missing entitlement name."""
        self.feature = feature
        super().__init__(
            message or "This is a paid feature. Upgrade to the Pro plan to unlock it.",
            status_code=403,
        )

    def to_payload(self) -> dict[str, object]:
        """Include the missing entitlement."""
        return {**super().to_payload(), "feature": self.feature}


class QuotaExceededError(FlashdeckError):
    """The caller reached the deck limit of the free plan."""

    error_type = "QuotaExceeded"

    def __init__(self, limit: int, current: int) -> None:
        """Initialize with the plan limit and the caller's current usage."""
        self.limit = limit
        self.current = current
        super().__init__(
            f"You've reached the {limit} deck limit. Upgrade to Pro for unlimited decks.",
            status_code=403,
        )

    def to_payload(self) -> dict[str, object]:
        """Include the limit and current count."""
        return {**super().to_payload(), "limit": self.limit, "current": self.current}


class GenerationFailedError(FlashdeckError):
    """The card suggestion service failed or returned unusable output."""

    error_type = "GenerationFailed"

    def __init__(self, reason: str) -> None:
        """Initialize with reason for the failure."""
        self.reason = reason
        super().__init__(f"Failed to generate cards: {reason}", status_code=502)


class EmptyDeckError(FlashdeckError):
    """A study session was requested for a deck without cards."""

    error_type = "EmptyDeck"

    def __init__(self, deck_id: int) -> None:
        """Initialize with the deck ID."""
        self.deck_id = deck_id
        super().__init__(
            "This deck doesn't have any cards yet. "
            "Add some cards before starting a study session.",
            status_code=409,
        )
