"""Generation agents for PMO Genius.

Each agent owns one backend operation; GenerationClient bundles them.
"""

from .errors import GenerationError, ParseError
from .base_agent import BaseAgent, TokenUsage, strip_code_fences
from .template_agent import TemplateAgent
from .detail_plan_agent import DetailPlanAgent, clean_markdown
from .alternatives_agent import AlternativesAgent
from .client import GenerationClient, build_client

__all__ = [
    # Errors
    "GenerationError",
    "ParseError",
    # Base
    "BaseAgent",
    "TokenUsage",
    "strip_code_fences",
    # Specialized agents
    "TemplateAgent",
    "DetailPlanAgent",
    "clean_markdown",
    "AlternativesAgent",
    # Client
    "GenerationClient",
    "build_client",
]
