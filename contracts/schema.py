"""Structured-output schemas sent to the generation backend.

Plain JSON-schema dicts that mirror ``ProjectTemplate`` field for field.
Providers translate them into their native form. The backend is not
guaranteed to honor them, so responses are always validated with pydantic.
"""

from typing import Any, Dict, List

from .template_contracts import RiskLevel


def _string() -> Dict[str, Any]:
    return {"type": "string"}


def _string_list() -> Dict[str, Any]:
    return {"type": "array", "items": {"type": "string"}}


def _object(properties: Dict[str, Any], required: List[str]) -> Dict[str, Any]:
    return {"type": "object", "properties": properties, "required": required}


TASK_SCHEMA = _object(
    {
        "name": _string(),
        "description": _string(),
        "output": _string(),
        "role": _string(),
        "dependencies": _string_list(),
    },
    ["name", "description", "output", "role", "dependencies"],
)

PHASE_SCHEMA = _object(
    {
        "name": _string(),
        "goal": _string(),
        "keyOutput": _string(),
        "isMilestone": {"type": "boolean"},
        "tasks": {"type": "array", "items": TASK_SCHEMA},
    },
    ["name", "goal", "keyOutput", "isMilestone", "tasks"],
)

HARDWARE_SCHEMA = _object(
    {
        "scheme": _string(),
        "components": _string_list(),
        "designPoints": _string_list(),
    },
    ["scheme", "components", "designPoints"],
)

SOFTWARE_SCHEMA = _object(
    {
        "languages": _string_list(),
        "frameworks": _string_list(),
        "architecture": _string(),
    },
    ["languages", "frameworks", "architecture"],
)

TEMPLATE_SCHEMA: Dict[str, Any] = _object(
    {
        "basicInfo": _object(
            {
                "name": _string(),
                "type": _string(),
                "iconSuggestion": _string(),
                "scenario": _string(),
                "features": _string_list(),
            },
            ["name", "type", "iconSuggestion", "scenario", "features"],
        ),
        # Optional: only present when the requirements call for hardware and/or software
        "technicalSolution": {
            "type": "object",
            "properties": {
                "hardware": HARDWARE_SCHEMA,
                "software": SOFTWARE_SCHEMA,
            },
        },
        "phases": {"type": "array", "items": PHASE_SCHEMA},
        "estimates": _object(
            {
                "totalDuration": _string(),
                "phaseDurations": {
                    "type": "array",
                    "items": _object(
                        {"phaseName": _string(), "days": {"type": "integer"}},
                        ["phaseName", "days"],
                    ),
                },
                "teamStructure": {
                    "type": "array",
                    "items": _object(
                        {"role": _string(), "count": {"type": "integer"}},
                        ["role", "count"],
                    ),
                },
            },
            ["totalDuration", "phaseDurations", "teamStructure"],
        ),
        "risks": {
            "type": "array",
            "items": _object(
                {
                    "description": _string(),
                    "impactPhase": _string(),
                    "level": {"type": "string", "enum": [level.value for level in RiskLevel]},
                    "strategy": _string(),
                },
                ["description", "impactPhase", "level", "strategy"],
            ),
        },
        "usage": _object(
            {
                "suitability": _string(),
                "notes": _string(),
                "complexity": _string(),
            },
            ["suitability", "notes", "complexity"],
        ),
    },
    ["basicInfo", "phases", "estimates", "risks", "usage"],
)

ALTERNATIVES_SCHEMA: Dict[str, Any] = _string_list()
