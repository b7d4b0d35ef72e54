"""Alternatives Agent - short replacement suggestions for an editable tag.

Best effort: any failure yields an empty list.
"""

from typing import Any, List, Union

from config import log
from agents.base_agent import BaseAgent
from agents.errors import GenerationError, ParseError
from contracts import ALTERNATIVES_SCHEMA, TechKind


class AlternativesAgent(BaseAgent):
    """Suggests up to ``max_alternatives`` options for a component or framework."""

    PROMPT_TEMPLATE = """Context: A project named "{project_context}".
The user is selecting a {subject}.
Current selection: "{item}".
Task: List {count} viable alternatives or related options that could replace or complement "{item}" for this project.
Output: A simple JSON array of strings (e.g., ["Option A", "Option B"]). No markdown."""

    SUBJECTS = {
        TechKind.HARDWARE: "hardware component",
        TechKind.SOFTWARE: "software technology/language/framework",
    }

    def __init__(self, *args: Any, max_alternatives: int = 4, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.max_alternatives = max_alternatives

    def get_task_description(self) -> str:
        return "Suggest alternatives"

    def build_prompt(self, kind: Union[TechKind, str], item: str, project_context: str) -> str:
        return self.PROMPT_TEMPLATE.format(
            project_context=project_context,
            subject=self.SUBJECTS[TechKind(kind)],
            item=item,
            count=self.max_alternatives,
        )

    def _normalize(self, data: Any, current: str) -> List[str]:
        # Some models wrap the array in an object: {"alternatives": [...]}
        if isinstance(data, dict) and len(data) == 1:
            data = next(iter(data.values()))
        if not isinstance(data, list):
            raise ParseError("Expected a JSON array of strings")

        seen = {current.strip().lower()}
        options: List[str] = []
        for entry in data:
            if not isinstance(entry, str):
                continue
            option = entry.strip()
            if not option or option.lower() in seen:
                continue
            seen.add(option.lower())
            options.append(option)
            if len(options) == self.max_alternatives:
                break
        return options

    def suggest(self, kind: Union[TechKind, str], item: str, project_context: str) -> List[str]:
        """Return at most ``max_alternatives`` suggestions, or [] on any failure."""
        request = self._request(
            self.build_prompt(kind, item, project_context),
            response_schema=ALTERNATIVES_SCHEMA,
            response_mime_type="application/json",
        )
        try:
            text = self._call(request)
            return self._normalize(self._parse_json(text), item)
        except GenerationError as e:
            # ParseError is a GenerationError too
            log(f"Suggestion lookup for '{item}' degraded to no suggestions: {e}")
            return []
