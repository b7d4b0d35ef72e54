"""Pydantic contracts for PMO Genius.

Everything that crosses the generation boundary is typed through these contracts.
"""

from .template_contracts import (
    TechKind,
    RiskLevel,
    TAG_PLACEHOLDERS,
    TemplateInfo,
    HardwareSpecs,
    SoftwareSpecs,
    TechnicalSolution,
    Task,
    Phase,
    PhaseDuration,
    TeamMember,
    Estimates,
    Risk,
    UsageGuide,
    ProjectTemplate,
)

from .request_contracts import (
    InlineData,
    FileInput,
    GenerateInput,
)

from .schema import (
    TEMPLATE_SCHEMA,
    ALTERNATIVES_SCHEMA,
)

__all__ = [
    # Template
    "TechKind",
    "RiskLevel",
    "TAG_PLACEHOLDERS",
    "TemplateInfo",
    "HardwareSpecs",
    "SoftwareSpecs",
    "TechnicalSolution",
    "Task",
    "Phase",
    "PhaseDuration",
    "TeamMember",
    "Estimates",
    "Risk",
    "UsageGuide",
    "ProjectTemplate",
    # Requests
    "InlineData",
    "FileInput",
    "GenerateInput",
    # Schemas
    "TEMPLATE_SCHEMA",
    "ALTERNATIVES_SCHEMA",
]
