"""Project template contracts - the generated planning document.

The aggregate is validated in one go from the backend's JSON and is never
mutated afterwards. Edits build a new value with ``model_copy(update=...)``
along the path to the changed field, so untouched branches are shared.
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class TechKind(str, Enum):
    """Which half of the technical solution an operation targets."""
    HARDWARE = "hardware"
    SOFTWARE = "software"


class RiskLevel(str, Enum):
    """Risk severity. Stored values stay in English whatever the prompt locale."""
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

    @property
    def label(self) -> str:
        """Localized label for display."""
        return _RISK_LABELS[self]


_RISK_LABELS = {
    RiskLevel.HIGH: "高",
    RiskLevel.MEDIUM: "中",
    RiskLevel.LOW: "低",
}

# Seed values for a freshly appended tag
TAG_PLACEHOLDERS = {
    TechKind.HARDWARE: "新组件",
    TechKind.SOFTWARE: "新技术",
}


class TemplateContract(BaseModel):
    """Base for every template model: camelCase on the wire, immutable in memory."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class TemplateInfo(TemplateContract):
    """Basic information about the generated template."""
    name: str = Field(..., description="Project / template name")
    type: str = Field(..., description="Category, e.g. 软件 / 硬件 / AI")
    icon_suggestion: str = Field(..., description="Icon hint for the category")
    scenario: str = Field(..., description="Scenario description")
    features: List[str] = Field(default_factory=list, description="Ordered feature list")


class HardwareSpecs(TemplateContract):
    """Hardware half of the technical solution."""
    scheme: str = Field(...)
    components: List[str] = Field(default_factory=list)
    design_points: List[str] = Field(default_factory=list)
    detailed_plan: Optional[str] = Field(None, description="Markdown detail, filled on demand")


class SoftwareSpecs(TemplateContract):
    """Software half of the technical solution."""
    languages: List[str] = Field(default_factory=list)
    frameworks: List[str] = Field(default_factory=list)
    architecture: str = Field(...)
    detailed_plan: Optional[str] = Field(None, description="Markdown detail, filled on demand")


class TechnicalSolution(TemplateContract):
    """Optional hardware and/or software blocks."""
    hardware: Optional[HardwareSpecs] = None
    software: Optional[SoftwareSpecs] = None

    def section(self, kind: Union[TechKind, str]) -> Optional[Union[HardwareSpecs, SoftwareSpecs]]:
        return getattr(self, TechKind(kind).value)

    @property
    def is_empty(self) -> bool:
        return self.hardware is None and self.software is None


class Task(TemplateContract):
    """A WBS task.

    ``dependencies`` are task names and may dangle; they are only displayed.
    """
    name: str = Field(...)
    description: str = Field(...)
    output: str = Field(..., description="Artifact produced by the task")
    role: str = Field(..., description="Responsible role")
    dependencies: List[str] = Field(default_factory=list)


class Phase(TemplateContract):
    """A project phase with its tasks."""
    name: str = Field(...)
    goal: str = Field(...)
    key_output: str = Field(...)
    is_milestone: bool = Field(False)
    tasks: List[Task] = Field(default_factory=list)


class PhaseDuration(TemplateContract):
    phase_name: str = Field(...)
    days: int = Field(..., ge=0)


class TeamMember(TemplateContract):
    role: str = Field(...)
    count: int = Field(..., ge=0)


class Estimates(TemplateContract):
    """Duration and team estimates."""
    total_duration: str = Field(..., description="Free text, e.g. '6个月'")
    phase_durations: List[PhaseDuration] = Field(default_factory=list)
    team_structure: List[TeamMember] = Field(default_factory=list)


class Risk(TemplateContract):
    """A project risk. ``impact_phase`` is free text, not a phase reference."""
    description: str = Field(...)
    impact_phase: str = Field(...)
    level: RiskLevel = Field(...)
    strategy: str = Field(...)


class UsageGuide(TemplateContract):
    suitability: str = Field(...)
    notes: str = Field(...)
    complexity: str = Field(...)


class ProjectTemplate(TemplateContract):
    """The aggregate root: one generated project plan."""
    basic_info: TemplateInfo = Field(...)
    technical_solution: Optional[TechnicalSolution] = None
    phases: List[Phase] = Field(...)
    estimates: Estimates = Field(...)
    risks: List[Risk] = Field(...)
    usage: UsageGuide = Field(...)

    @property
    def has_hardware(self) -> bool:
        return self.technical_solution is not None and self.technical_solution.hardware is not None

    @property
    def has_software(self) -> bool:
        return self.technical_solution is not None and self.technical_solution.software is not None

    def section(self, kind: Union[TechKind, str]) -> Optional[Union[HardwareSpecs, SoftwareSpecs]]:
        """Return the hardware or software block, or None when absent."""
        if self.technical_solution is None:
            return None
        return self.technical_solution.section(kind)

    def tags(self, kind: Union[TechKind, str]) -> List[str]:
        """Editable tag list: hardware components or software frameworks."""
        kind = TechKind(kind)
        section = self.section(kind)
        if section is None:
            return []
        return list(section.components if kind == TechKind.HARDWARE else section.frameworks)

    def _with_section(self, kind: TechKind, update: Dict[str, Any]) -> "ProjectTemplate":
        section = self.section(kind)
        if section is None:
            raise ValueError(f"Template has no {kind.value} section")
        solution = self.technical_solution.model_copy(
            update={kind.value: section.model_copy(update=update)}
        )
        return self.model_copy(update={"technical_solution": solution})

    def with_tags(self, kind: Union[TechKind, str], tags: List[str]) -> "ProjectTemplate":
        """Return a copy whose component/framework list is replaced by ``tags``."""
        kind = TechKind(kind)
        field = "components" if kind == TechKind.HARDWARE else "frameworks"
        return self._with_section(kind, {field: list(tags)})

    def with_detailed_plan(self, kind: Union[TechKind, str], detail: str) -> "ProjectTemplate":
        """Return a copy with the detail plan of one subsection set."""
        return self._with_section(TechKind(kind), {"detailed_plan": detail})

    def to_json(self) -> str:
        """Pretty-printed JSON using the wire (camelCase) field names."""
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=2)

    def chart_rows(self, max_label: int = 8) -> List[Dict[str, Any]]:
        """Rows for the timeline chart.

        Long phase names are truncated; the position prefix keeps labels unique
        and in phase order.
        """
        rows = []
        for i, p in enumerate(self.estimates.phase_durations, 1):
            short = p.phase_name if len(p.phase_name) <= max_label else p.phase_name[:max_label] + "..."
            label = f"{i}. {short}"
            rows.append({"name": label, "days": p.days, "full_name": p.phase_name})
        return rows

    def to_markdown(self) -> str:
        """Convert the template to a human-readable markdown document."""
        info = self.basic_info
        sections = [
            f"# {info.name}",
            f"\n**类型:** {info.type}",
            f"\n**场景:** {info.scenario}",
        ]
        if info.features:
            sections.append("\n**核心功能:**\n")
            sections.extend(f"- {f}" for f in info.features)

        if self.technical_solution and not self.technical_solution.is_empty:
            sections.append("\n## 技术实施方案\n")
            hw = self.technical_solution.hardware
            if hw:
                sections.append("### 硬件架构\n")
                sections.append(f"**方案概述:** {hw.scheme}\n")
                if hw.components:
                    sections.append(f"**核心器件:** {', '.join(hw.components)}\n")
                if hw.design_points:
                    sections.append("**设计要点:**\n")
                    sections.extend(f"- {p}" for p in hw.design_points)
                if hw.detailed_plan:
                    sections.append("\n#### 详细实施方案\n")
                    sections.append(hw.detailed_plan)
                sections.append("")
            sw = self.technical_solution.software
            if sw:
                sections.append("### 软件技术栈\n")
                sections.append(f"**架构模式:** {sw.architecture}\n")
                if sw.languages:
                    sections.append(f"**开发语言:** {', '.join(sw.languages)}\n")
                if sw.frameworks:
                    sections.append(f"**核心框架:** {', '.join(sw.frameworks)}\n")
                if sw.detailed_plan:
                    sections.append("#### 详细实施方案\n")
                    sections.append(sw.detailed_plan)
                sections.append("")

        sections.append("\n## 时间轴与估算\n")
        sections.append(f"**总周期:** {self.estimates.total_duration}\n")
        if self.estimates.phase_durations:
            sections.append("| 阶段 | 天数 |")
            sections.append("|------|------|")
            for p in self.estimates.phase_durations:
                sections.append(f"| {_cell(p.phase_name)} | {p.days} |")
        if self.estimates.team_structure:
            sections.append("\n**推荐团队配置:**\n")
            sections.extend(f"- {m.role} × {m.count}" for m in self.estimates.team_structure)

        sections.append("\n## 项目阶段拆解 (WBS)\n")
        for i, phase in enumerate(self.phases, 1):
            milestone = " (里程碑)" if phase.is_milestone else ""
            sections.append(f"### {i}. {phase.name}{milestone}\n")
            sections.append(f"**目标:** {phase.goal}  ")
            sections.append(f"**输出:** {phase.key_output}\n")
            for t in phase.tasks:
                sections.append(f"- **{t.name}** ({t.role}): {t.description} [输出: {t.output}]")
                if t.dependencies:
                    sections.append(f"  - 前置: {', '.join(t.dependencies)}")
            sections.append("")

        if self.risks:
            sections.append("\n## 风险评估\n")
            sections.append("| 风险描述 | 影响阶段 | 等级 | 应对策略 |")
            sections.append("|----------|----------|------|----------|")
            for r in self.risks:
                sections.append(
                    f"| {_cell(r.description)} | {_cell(r.impact_phase)} | {r.level.label} | {_cell(r.strategy)} |"
                )

        sections.extend([
            "\n## 使用指南\n",
            f"**适用范围:** {self.usage.suitability}\n",
            f"**复杂度:** {self.usage.complexity}\n",
            f"**注意事项:** {self.usage.notes}",
        ])

        return "\n".join(sections)


def _cell(text: str) -> str:
    """Make free text safe inside a markdown table cell."""
    return text.replace("|", "\\|").replace("\n", " ")
