"""Errors raised when a domain rule rejects an input or a state change."""


class DomainError(Exception):
    """Base for rule violations; the API maps unhandled ones to 400."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(DomainError):
    """
    Input broke a field constraint.

    ``field`` names the offending attribute and ``constraint`` the rule it
    broke (``required``, ``max_length``, ``positive``, ``at_least_one``).
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        constraint: str | None = None,
    ) -> None:
        super().__init__(message)
        self.field = field
        self.constraint = constraint

    def __str__(self) -> str:
        if self.field:
            return f"{self.field}: {self.message}"
        return self.message
