"""Configuration settings for PMO Genius."""

# Load .env into os.environ so SDK fallbacks (e.g. GOOGLE_API_KEY) work
try:
    from dotenv import load_dotenv
    load_dotenv()
except ImportError:
    pass

import sys

from pydantic_settings import BaseSettings
from pydantic import Field
from typing import Dict, List


class Settings(BaseSettings):
    """Global settings for PMO Genius.

    Settings can be overridden via environment variables with PMO_GENIUS_ prefix.
    Example: PMO_GENIUS_THINKING_BUDGET=8000
    """

    app_title: str = Field(
        default="PMO Genius",
        description="Title shown in the browser tab and navbar"
    )

    # Provider / model config
    provider: str = Field(
        default="gemini",
        description="Generation backend: gemini, openai or anthropic"
    )
    template_model: str = Field(
        default="gemini-3-pro-preview",
        description="Model used for full template and detail-plan generation"
    )
    suggestion_model: str = Field(
        default="gemini-3-flash-preview",
        description="Model used for short alternative-suggestion lookups"
    )
    thinking_budget: int = Field(
        default=4000,
        ge=0,
        description="Reasoning budget hint passed to the backend (0 disables)"
    )
    max_output_tokens: int = Field(
        default=16384,
        description="Maximum tokens per backend call"
    )
    max_alternatives: int = Field(
        default=4,
        ge=1,
        description="Maximum number of alternatives offered in the tag editor"
    )

    # API settings (env: PMO_GENIUS_<KEY>)
    google_api_key: str = Field(
        default="",
        description="Google/Gemini API key (env: PMO_GENIUS_GOOGLE_API_KEY)",
    )
    openai_api_key: str = Field(
        default="",
        description="OpenAI API key (env: PMO_GENIUS_OPENAI_API_KEY)",
    )
    anthropic_api_key: str = Field(
        default="",
        description="Anthropic API key (env: PMO_GENIUS_ANTHROPIC_API_KEY)",
    )
    api_timeout_seconds: int = Field(
        default=300,
        description="API call timeout in seconds, passed to SDKs that accept one"
    )

    model_config = {
        "env_prefix": "PMO_GENIUS_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",  # ignore extra env vars (e.g. GOOGLE_API_KEY) not in schema
    }

    def api_key_for(self, provider: str) -> str:
        """Return the configured API key for a provider name."""
        keys = {
            "gemini": self.google_api_key,
            "google": self.google_api_key,
            "openai": self.openai_api_key,
            "anthropic": self.anthropic_api_key,
        }
        return keys.get(provider.lower(), "")


# Form options offered by the requirement form
TEAM_SIZE_OPTIONS: Dict[str, str] = {
    "1-5人": "1-5人 (小型团队)",
    "6-10人": "6-10人 (中型团队)",
    "11-20人": "11-20人 (大型团队)",
    "20人以上": "20人以上 (企业级)",
}
DURATION_MONTHS_RANGE = (1, 60)
DOCUMENT_EXTENSIONS: List[str] = ["pdf", "doc", "docx", "txt"]
IMAGE_EXTENSIONS: List[str] = ["png", "jpg", "jpeg", "gif", "webp", "bmp"]


def log(message: str) -> None:
    """Print a tagged operational message to stderr (the Streamlit server log)."""
    print(f"[PMO Genius] {message}", file=sys.stderr)


# Create singleton instance
settings = Settings()
