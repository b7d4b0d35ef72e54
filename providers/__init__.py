"""LLM Provider abstraction for the generation backend."""

from .base import GenerationRequest, LLMProvider, LLMResponse
from .factory import get_provider, list_providers, provider_for_model

__all__ = [
    "GenerationRequest",
    "LLMProvider",
    "LLMResponse",
    "get_provider",
    "list_providers",
    "provider_for_model",
]
