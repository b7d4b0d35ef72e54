"""Factory for creating LLM providers."""

from typing import Optional, Dict, Type

from .base import LLMProvider
from .anthropic_provider import AnthropicProvider
from .openai_provider import OpenAIProvider
from .gemini_provider import GeminiProvider


# Registry of available providers
PROVIDERS: Dict[str, Type[LLMProvider]] = {
    "gemini": GeminiProvider,
    "google": GeminiProvider,
    "openai": OpenAIProvider,
    "gpt": OpenAIProvider,
    "anthropic": AnthropicProvider,
    "claude": AnthropicProvider,
}

# Aliases skipped when listing providers
_ALIASES = ("google", "gpt", "claude")

# Model prefix to provider mapping for auto-detection
MODEL_PROVIDERS: Dict[str, str] = {
    "gemini": "gemini",
    "gpt": "openai",
    "o1": "openai",
    "o3": "openai",
    "claude": "anthropic",
    "sonnet": "anthropic",
    "opus": "anthropic",
    "haiku": "anthropic",
}


def get_provider(
    provider_name: Optional[str] = None,
    model: Optional[str] = None,
    api_key: str = "",
    timeout_seconds: Optional[int] = None,
) -> LLMProvider:
    """Get an LLM provider instance.

    Credentials are always passed in; providers never read the environment.

    Args:
        provider_name: Explicit provider name (gemini, openai, anthropic)
        model: Model name - if provided without provider, will auto-detect provider
        api_key: API key for the selected provider
        timeout_seconds: Optional HTTP timeout

    Returns:
        LLMProvider instance

    Examples:
        get_provider("gemini", api_key=key)
        get_provider(model="gpt-4o", api_key=key)  # Returns OpenAI provider
        get_provider(api_key=key)  # Default (Gemini)
    """
    if provider_name:
        provider_key = provider_name.lower()
        if provider_key not in PROVIDERS:
            raise ValueError(
                f"Unknown provider: {provider_name}. "
                f"Available: {list(PROVIDERS.keys())}"
            )
        return PROVIDERS[provider_key](api_key=api_key, timeout_seconds=timeout_seconds)

    detected = provider_for_model(model)
    if detected:
        return PROVIDERS[detected](api_key=api_key, timeout_seconds=timeout_seconds)

    return GeminiProvider(api_key=api_key, timeout_seconds=timeout_seconds)


def provider_for_model(model: Optional[str]) -> Optional[str]:
    """Return the provider name a model belongs to, or None if unknown."""
    if not model:
        return None
    model_lower = model.lower()
    for prefix, provider in MODEL_PROVIDERS.items():
        if model_lower.startswith(prefix):
            return provider
    return None


def list_providers(api_keys: Dict[str, str]) -> Dict[str, bool]:
    """List all providers and their availability.

    Args:
        api_keys: Mapping of provider name to configured API key

    Returns:
        Dict mapping provider name to availability status
    """
    result = {}
    for name, provider_class in PROVIDERS.items():
        if name in _ALIASES:
            continue
        result[name] = provider_class(api_key=api_keys.get(name, "")).is_available()
    return result
