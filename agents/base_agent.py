"""Base agent class that the generation agents inherit from.

Every agent:
- Builds a prompt from its inputs
- Calls the injected LLM provider
- Turns provider failures and empty replies into GenerationError
- Parses and validates JSON replies against the expected Pydantic contract
- Tracks token usage
"""

import json
from abc import ABC, abstractmethod
from typing import Any, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from config import log
from providers import GenerationRequest, LLMProvider, LLMResponse

from .errors import GenerationError, ParseError

T = TypeVar("T", bound=BaseModel)


class TokenUsage(BaseModel):
    """Token usage accumulated across calls."""
    input_tokens: int = 0
    output_tokens: int = 0
    calls: int = 0

    def add(self, response: LLMResponse) -> None:
        self.input_tokens += response.input_tokens
        self.output_tokens += response.output_tokens
        self.calls += 1


def strip_code_fences(text: str) -> str:
    """Pull the payload out of a ```json fenced block if the model added one."""
    text = text.strip()
    if "```json" in text:
        start = text.find("```json") + 7
        end = text.find("```", start)
        text = text[start:end if end != -1 else None].strip()
    elif text.startswith("```"):
        start = text.find("\n") + 1
        end = text.find("```", start)
        text = text[start:end if end != -1 else None].strip()
    return text


class BaseAgent(ABC):
    """Base class for the generation agents.

    The provider and model are injected; agents never read configuration or
    credentials themselves.
    """

    def __init__(
        self,
        provider: LLMProvider,
        model: Optional[str] = None,
        thinking_budget: int = 0,
        max_tokens: int = 8192,
        usage: Optional[TokenUsage] = None,
    ):
        """Initialize the agent.

        Args:
            provider: LLM provider to call
            model: Model override (defaults to the provider's default)
            thinking_budget: Reasoning budget hint, 0 to disable
            max_tokens: Maximum tokens in the response
            usage: Shared usage counter (a fresh one if omitted)
        """
        self.provider = provider
        self.model = model
        self.thinking_budget = thinking_budget
        self.max_tokens = max_tokens
        self.total_usage = usage if usage is not None else TokenUsage()

    def _request(self, prompt: str, **kwargs: Any) -> GenerationRequest:
        return GenerationRequest(
            prompt=prompt,
            model=self.model,
            thinking_budget=self.thinking_budget,
            max_tokens=self.max_tokens,
            **kwargs,
        )

    def _call(self, request: GenerationRequest) -> str:
        """Send a request and return non-empty text.

        Raises:
            GenerationError: If the provider raises or returns no text
        """
        try:
            response = self.provider.generate(request)
        except Exception as e:
            log(f"{self.get_task_description()} failed: {type(e).__name__}: {e}")
            raise GenerationError(str(e)) from e

        self.total_usage.add(response)
        if not response.content or not response.content.strip():
            log(f"{self.get_task_description()} returned no text")
            raise GenerationError("The model returned an empty response")
        return response.content

    def _parse_json(self, response_text: str) -> Any:
        """Parse JSON from a model reply.

        Raises:
            ParseError: If the reply isn't valid JSON
        """
        try:
            return json.loads(response_text.strip())
        except json.JSONDecodeError:
            pass
        # Fences only come into play when the bare reply is not JSON
        text = strip_code_fences(response_text)
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise ParseError(f"Response is not valid JSON: {e}", raw_text=response_text) from e

    def _parse_and_validate(self, response_text: str, output_schema: Type[T]) -> T:
        """Parse a model reply and validate it against a contract.

        Raises:
            ParseError: If the reply isn't JSON or doesn't match the contract
        """
        data = self._parse_json(response_text)
        try:
            return output_schema.model_validate(data)
        except ValidationError as e:
            raise ParseError(
                f"Response does not match {output_schema.__name__}: {e.error_count()} error(s)",
                raw_text=response_text,
            ) from e

    @abstractmethod
    def get_task_description(self) -> str:
        """Return a description of what this agent does.

        Used for logging and debugging.
        """
        pass
