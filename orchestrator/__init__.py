"""Orchestrator module: session state and tag editing."""

from .tag_editor import (
    TagState,
    SuggestionStatus,
    EditSession,
    TagEditor,
)
from .planning_session import (
    PlanningSession,
    to_file_input,
    MISSING_INPUT_MESSAGE,
    GENERATION_FALLBACK_MESSAGE,
    DETAIL_PLAN_FAILED_MESSAGE,
)

__all__ = [
    "TagState",
    "SuggestionStatus",
    "EditSession",
    "TagEditor",
    "PlanningSession",
    "to_file_input",
    "MISSING_INPUT_MESSAGE",
    "GENERATION_FALLBACK_MESSAGE",
    "DETAIL_PLAN_FAILED_MESSAGE",
]
