"""Caller identity and plan entitlements, threaded explicitly through every operation."""

from dataclasses import dataclass, field

UNLIMITED_DECKS = "unlimited_decks"
AI_FLASHCARD_GENERATION = "ai_flashcard_generation"


@dataclass(frozen=True)
class AuthContext:
    """
    Who is calling, and what their plan allows.

    An anonymous context has no identity; operations that require one
    reject it.
    """

    identity: str | None = None
    entitlements: frozenset[str] = field(default_factory=frozenset)

    @property
    def is_authenticated(self) -> bool:
        return bool(self.identity)

    def has_entitlement(self, name: str) -> bool:
        """Check whether the caller's plan grants the named feature."""
        return name in self.entitlements

    @classmethod
    def anonymous(cls) -> "AuthContext":
        return cls()

    @classmethod
    def for_identity(cls, identity: str, *entitlements: str) -> "AuthContext":
        return cls(identity=identity, entitlements=frozenset(entitlements))
