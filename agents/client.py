"""Generation client - the three backend operations behind one object.

The calls are independent: detail plans and alternatives are requested
lazily from the view, long after the template exists, and never regenerate it.
"""

from typing import List, Optional, Union

from config import Settings
from contracts import GenerateInput, ProjectTemplate, TechKind
from providers import LLMProvider, get_provider, provider_for_model

from .alternatives_agent import AlternativesAgent
from .base_agent import TokenUsage
from .detail_plan_agent import DetailPlanAgent
from .template_agent import TemplateAgent


class GenerationClient:
    """Schema-constrained generation of project templates and their subsections."""

    def __init__(
        self,
        provider: LLMProvider,
        template_model: Optional[str] = None,
        suggestion_model: Optional[str] = None,
        thinking_budget: int = 4000,
        max_tokens: int = 16384,
        max_alternatives: int = 4,
    ):
        """Initialize the client.

        Args:
            provider: LLM provider, constructed with its credentials already
            template_model: Model for template and detail-plan generation
            suggestion_model: Model for alternative suggestions
            thinking_budget: Reasoning budget hint for the heavy calls
            max_tokens: Maximum tokens per response
            max_alternatives: Cap on suggestions per lookup
        """
        self.provider = provider
        self.usage = TokenUsage()
        self.template_agent = TemplateAgent(
            provider, model=template_model, thinking_budget=thinking_budget,
            max_tokens=max_tokens, usage=self.usage,
        )
        self.detail_agent = DetailPlanAgent(
            provider, model=template_model, thinking_budget=thinking_budget,
            max_tokens=max_tokens, usage=self.usage,
        )
        self.alternatives_agent = AlternativesAgent(
            provider, model=suggestion_model, max_tokens=1024,
            usage=self.usage, max_alternatives=max_alternatives,
        )

    def generate_template(self, input_data: GenerateInput) -> ProjectTemplate:
        """Generate a whole template. Raises GenerationError / ParseError."""
        return self.template_agent.generate(input_data)

    def generate_detailed_plan(
        self,
        kind: Union[TechKind, str],
        summary_json: str,
        project_name: str,
    ) -> str:
        """Generate Markdown detail for one subsection. Raises GenerationError."""
        return self.detail_agent.generate(kind, summary_json, project_name)

    def get_alternatives(
        self,
        kind: Union[TechKind, str],
        current_item: str,
        project_context: str,
    ) -> List[str]:
        """Suggest replacements for a tag. Never raises; [] on failure."""
        return self.alternatives_agent.suggest(kind, current_item, project_context)


def _model_for(provider: LLMProvider, model: str) -> Optional[str]:
    """Use a configured model only when it belongs to the active provider."""
    return model if provider_for_model(model) == provider.name else None


def build_client(settings: Settings) -> GenerationClient:
    """Build a client from settings. The only place credentials are read."""
    provider = get_provider(
        settings.provider,
        api_key=settings.api_key_for(settings.provider),
        timeout_seconds=settings.api_timeout_seconds,
    )
    return GenerationClient(
        provider,
        template_model=_model_for(provider, settings.template_model),
        suggestion_model=_model_for(provider, settings.suggestion_model),
        thinking_budget=settings.thinking_budget,
        max_tokens=settings.max_output_tokens,
        max_alternatives=settings.max_alternatives,
    )
