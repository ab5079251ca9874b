"""Study domain exceptions."""

from flashdeck.domain.common.exceptions import DomainError


class EmptySessionError(DomainError):
    """Raised when a study session is started without any cards."""

    def __init__(self) -> None:
        super().__init__("A study session needs at least one card")
