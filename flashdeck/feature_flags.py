"""Server-wide switches for optional features."""

from flashdeck.config import get_settings


def is_ai_enabled() -> bool:
    """AI card generation is on when an AI provider is configured."""
    return get_settings().ai_enabled
