"""Google Gemini provider implementation (google-genai SDK)."""

import base64
from typing import Any, Dict, Optional

from .base import GenerationRequest, LLMProvider, LLMResponse


def to_gemini_schema(schema: Dict[str, Any]) -> Dict[str, Any]:
    """Translate a JSON-schema dict into Gemini's form (uppercase type names)."""
    out: Dict[str, Any] = {}
    for key, value in schema.items():
        if key == "type" and isinstance(value, str):
            out[key] = value.upper()
        elif key == "properties":
            out[key] = {name: to_gemini_schema(sub) for name, sub in value.items()}
        elif key == "items":
            out[key] = to_gemini_schema(value)
        else:
            out[key] = value
    return out


class GeminiProvider(LLMProvider):
    """Provider for Google Gemini models."""

    MODELS = {
        "gemini-pro": "gemini-3-pro-preview",
        "gemini-flash": "gemini-3-flash-preview",
        "gemini-2.5-pro": "gemini-2.5-pro",
        "gemini-2.5-flash": "gemini-2.5-flash",
    }

    def __init__(self, api_key: str = "", timeout_seconds: Optional[int] = None):
        """Initialize Gemini provider.

        Args:
            api_key: Google API key, injected from settings
            timeout_seconds: Optional HTTP timeout
        """
        self.api_key = api_key
        self.timeout_seconds = timeout_seconds
        self._client = None

    @property
    def name(self) -> str:
        return "gemini"

    @property
    def default_model(self) -> str:
        return "gemini-3-pro-preview"

    def _get_client(self):
        if self._client is None:
            from google import genai
            from google.genai import types

            http_options = None
            if self.timeout_seconds:
                http_options = types.HttpOptions(timeout=self.timeout_seconds * 1000)
            self._client = genai.Client(api_key=self.api_key, http_options=http_options)
        return self._client

    def _build_config(self, request: GenerationRequest):
        from google.genai import types

        config: Dict[str, Any] = {"max_output_tokens": request.max_tokens}
        if request.wants_json:
            config["response_mime_type"] = "application/json"
        if request.response_schema is not None:
            config["response_schema"] = to_gemini_schema(request.response_schema)
        if request.thinking_budget:
            config["thinking_config"] = types.ThinkingConfig(thinking_budget=request.thinking_budget)
        return types.GenerateContentConfig(**config)

    def _build_contents(self, request: GenerationRequest):
        from google.genai import types

        parts = [types.Part.from_text(text=request.prompt)]
        for attachment in request.attachments:
            parts.append(types.Part.from_bytes(
                data=base64.b64decode(attachment.data),
                mime_type=attachment.mime_type,
            ))
        return [types.Content(role="user", parts=parts)]

    def generate(self, request: GenerationRequest) -> LLMResponse:
        client = self._get_client()
        resolved_model = self._resolve_model(request.model)

        response = client.models.generate_content(
            model=resolved_model,
            contents=self._build_contents(request),
            config=self._build_config(request),
        )

        text = response.text or ""
        # Gemini doesn't always report usage; estimate when missing
        usage = getattr(response, "usage_metadata", None)
        input_tokens = getattr(usage, "prompt_token_count", None) or len(request.prompt) // 4
        output_tokens = getattr(usage, "candidates_token_count", None) or len(text) // 4

        return LLMResponse(
            content=text,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
            model=resolved_model,
            provider=self.name,
        )

    def is_available(self) -> bool:
        return bool(self.api_key)
