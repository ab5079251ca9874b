"""Chat model selection for the configured AI provider."""

from collections.abc import Callable
from functools import lru_cache

from pydantic_ai.models import Model
from pydantic_ai.models.anthropic import AnthropicModel
from pydantic_ai.models.google import GoogleModel
from pydantic_ai.models.openai import OpenAIChatModel
from pydantic_ai.providers.anthropic import AnthropicProvider
from pydantic_ai.providers.google import GoogleProvider
from pydantic_ai.providers.ollama import OllamaProvider
from pydantic_ai.providers.openai import OpenAIProvider

from flashdeck.config import Settings, get_settings


def _ollama(settings: Settings, model_name: str) -> Model:
    return OpenAIChatModel(
        model_name=model_name,
        provider=OllamaProvider(base_url=settings.OPENAI_BASE_URL),
    )


def _openai(settings: Settings, model_name: str) -> Model:
    return OpenAIChatModel(
        model_name=model_name,
        provider=OpenAIProvider(api_key=settings.OPENAI_API_KEY),
    )


def _anthropic(settings: Settings, model_name: str) -> Model:
    return AnthropicModel(
        model_name=model_name,
        provider=AnthropicProvider(api_key=settings.ANTHROPIC_API_KEY),
    )


def _google(settings: Settings, model_name: str) -> Model:
    return GoogleModel(
        model_name=model_name,
        provider=GoogleProvider(api_key=settings.GEMINI_API_KEY),
    )


# Provider keys and credentials are checked by Settings.validate_ai_provider_config
_MODEL_BUILDERS: dict[str, Callable[[Settings, str], Model]] = {
    "ollama": _ollama,
    "openai": _openai,
    "anthropic": _anthropic,
    "google": _google,
}


@lru_cache
def get_ai_model() -> Model:
    """
    Build the chat model on first use.

    Raises:
        RuntimeError: If no provider, or an unknown one, is configured
    """
    settings = get_settings()
    builder = _MODEL_BUILDERS.get(settings.AI_PROVIDER or "")
    if builder is None or settings.AI_MODEL_NAME is None:
        raise RuntimeError(f"No such AI model provider available: {settings.AI_PROVIDER}")
    return builder(settings, settings.AI_MODEL_NAME)
