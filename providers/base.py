"""Base LLM provider interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from contracts import InlineData


@dataclass
class GenerationRequest:
    """Everything a provider needs for one call."""
    prompt: str
    attachments: List[InlineData] = field(default_factory=list)
    response_schema: Optional[Dict[str, Any]] = None
    response_mime_type: Optional[str] = None
    thinking_budget: int = 0
    model: Optional[str] = None
    max_tokens: int = 8192

    @property
    def wants_json(self) -> bool:
        return self.response_mime_type == "application/json" or self.response_schema is not None


@dataclass
class LLMResponse:
    """Standardized response from any LLM provider. ``content`` may be empty."""
    content: str
    input_tokens: int
    output_tokens: int
    model: str
    provider: str


class LLMProvider(ABC):
    """Abstract base class for LLM providers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name (gemini, openai, anthropic)."""
        pass

    @property
    @abstractmethod
    def default_model(self) -> str:
        """Default model for this provider."""
        pass

    @abstractmethod
    def generate(self, request: GenerationRequest) -> LLMResponse:
        """Generate a completion.

        Args:
            request: Prompt, inline attachments, optional output schema and
                reasoning budget hint

        Returns:
            LLMResponse with content (possibly empty) and token counts

        Raises:
            Exception: Whatever the SDK raises (network, auth, quota)
        """
        pass

    def is_available(self) -> bool:
        """Check if this provider is available (API key set, etc.)."""
        return True

    def _resolve_model(self, model: Optional[str]) -> str:
        if model is None:
            return self.default_model
        return getattr(self, "MODELS", {}).get(model, model)
