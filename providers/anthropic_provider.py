"""Anthropic (Claude) provider implementation."""

import json
from typing import Any, Dict, List, Optional

from .base import GenerationRequest, LLMProvider, LLMResponse

# Anthropic rejects extended thinking below this budget
MIN_THINKING_BUDGET = 1024


class AnthropicProvider(LLMProvider):
    """Provider for Anthropic Claude models.

    Claude has no response-schema parameter, so the schema goes into the
    system prompt and the reply is validated downstream like any other.
    """

    MODELS = {
        "claude-sonnet": "claude-sonnet-4-20250514",
        "claude-opus": "claude-opus-4-20250514",
        "claude-haiku": "claude-3-5-haiku-20241022",
        "sonnet": "claude-sonnet-4-20250514",
        "opus": "claude-opus-4-20250514",
        "haiku": "claude-3-5-haiku-20241022",
    }

    def __init__(self, api_key: str = "", timeout_seconds: Optional[int] = None):
        """Initialize Anthropic provider.

        Args:
            api_key: Anthropic API key, injected from settings
            timeout_seconds: Optional HTTP timeout
        """
        self.api_key = api_key
        self.timeout_seconds = timeout_seconds
        self._client = None

    @property
    def name(self) -> str:
        return "anthropic"

    @property
    def default_model(self) -> str:
        return "claude-sonnet-4-20250514"

    def _get_client(self):
        if self._client is None:
            from anthropic import Anthropic
            self._client = Anthropic(api_key=self.api_key, timeout=self.timeout_seconds)
        return self._client

    def _build_system_prompt(self, request: GenerationRequest) -> str:
        if not request.wants_json:
            return ""
        parts = ["Respond with valid JSON only. No markdown fences, no commentary."]
        if request.response_schema is not None:
            parts.append("\n\n# OUTPUT FORMAT\n")
            parts.append("You MUST respond with valid JSON matching this schema:\n\n")
            parts.append(json.dumps(request.response_schema, indent=2))
        return "".join(parts)

    def _build_content(self, request: GenerationRequest) -> List[Dict[str, Any]]:
        content: List[Dict[str, Any]] = []
        for attachment in request.attachments:
            content.append({
                "type": "image",
                "source": {
                    "type": "base64",
                    "media_type": attachment.mime_type,
                    "data": attachment.data,
                },
            })
        content.append({"type": "text", "text": request.prompt})
        return content

    def generate(self, request: GenerationRequest) -> LLMResponse:
        client = self._get_client()
        resolved_model = self._resolve_model(request.model)

        kwargs: Dict[str, Any] = {
            "model": resolved_model,
            "max_tokens": request.max_tokens,
            "messages": [{"role": "user", "content": self._build_content(request)}],
        }
        system_prompt = self._build_system_prompt(request)
        if system_prompt:
            kwargs["system"] = system_prompt
        if request.thinking_budget >= MIN_THINKING_BUDGET:
            kwargs["thinking"] = {"type": "enabled", "budget_tokens": request.thinking_budget}
            # max_tokens must exceed the thinking budget
            kwargs["max_tokens"] = request.max_tokens + request.thinking_budget

        response = client.messages.create(**kwargs)

        text = "".join(
            block.text for block in response.content if getattr(block, "type", None) == "text"
        )
        return LLMResponse(
            content=text,
            input_tokens=response.usage.input_tokens,
            output_tokens=response.usage.output_tokens,
            model=resolved_model,
            provider=self.name,
        )

    def is_available(self) -> bool:
        return bool(self.api_key)
