"""OpenAI provider implementation."""

from typing import Any, Dict, List, Optional

from .base import GenerationRequest, LLMProvider, LLMResponse


class OpenAIProvider(LLMProvider):
    """Provider for OpenAI models.

    Object schemas are sent as a ``json_schema`` response format. Other
    schemas (e.g. a bare array) rely on the prompt, since OpenAI's structured
    output needs an object at the top level. The reasoning budget hint is
    not used.
    """

    MODELS = {
        "gpt-4o": "gpt-4o",
        "gpt-4o-mini": "gpt-4o-mini",
        "gpt-4.1": "gpt-4.1",
        "gpt-4.1-mini": "gpt-4.1-mini",
    }

    def __init__(self, api_key: str = "", timeout_seconds: Optional[int] = None):
        """Initialize OpenAI provider.

        Args:
            api_key: OpenAI API key, injected from settings
            timeout_seconds: Optional HTTP timeout
        """
        self.api_key = api_key
        self.timeout_seconds = timeout_seconds
        self._client = None

    @property
    def name(self) -> str:
        return "openai"

    @property
    def default_model(self) -> str:
        return "gpt-4o"

    def _get_client(self):
        if self._client is None:
            from openai import OpenAI
            self._client = OpenAI(api_key=self.api_key, timeout=self.timeout_seconds)
        return self._client

    def _build_content(self, request: GenerationRequest) -> List[Dict[str, Any]]:
        content: List[Dict[str, Any]] = [{"type": "text", "text": request.prompt}]
        for attachment in request.attachments:
            content.append({
                "type": "image_url",
                "image_url": {"url": f"data:{attachment.mime_type};base64,{attachment.data}"},
            })
        return content

    def _response_format(self, request: GenerationRequest) -> Optional[Dict[str, Any]]:
        schema = request.response_schema
        if schema is not None and schema.get("type") == "object":
            return {
                "type": "json_schema",
                "json_schema": {"name": "structured_output", "schema": schema},
            }
        return None

    def generate(self, request: GenerationRequest) -> LLMResponse:
        client = self._get_client()
        resolved_model = self._resolve_model(request.model)

        kwargs: Dict[str, Any] = {
            "model": resolved_model,
            "max_tokens": request.max_tokens,
            "messages": [{"role": "user", "content": self._build_content(request)}],
        }
        response_format = self._response_format(request)
        if response_format is not None:
            kwargs["response_format"] = response_format

        response = client.chat.completions.create(**kwargs)

        usage = response.usage
        return LLMResponse(
            content=response.choices[0].message.content or "",
            input_tokens=getattr(usage, "prompt_tokens", 0) or 0,
            output_tokens=getattr(usage, "completion_tokens", 0) or 0,
            model=resolved_model,
            provider=self.name,
        )

    def is_available(self) -> bool:
        return bool(self.api_key)
