"""Word export.

Word opens an HTML document saved with a .doc extension when it carries the
Office XML namespaces, so no docx library is involved.
"""

from html import escape
from typing import List

from contracts import ProjectTemplate

from .base import ExportArtifact, export_filename

WORD_MIME_TYPE = "application/msword"

WORD_STYLE = """
body { font-family: 'Microsoft YaHei', 'SimSun', sans-serif; font-size: 11pt; line-height: 1.5; }
h1 { font-size: 20pt; color: #1e293b; }
h2 { font-size: 15pt; color: #1d4ed8; border-bottom: 1px solid #cbd5e1; margin-top: 18pt; }
h3 { font-size: 12pt; color: #334155; }
table { border-collapse: collapse; width: 100%; }
th, td { border: 1px solid #94a3b8; padding: 4pt 6pt; vertical-align: top; }
th { background: #f1f5f9; }
.milestone { color: #b45309; }
.muted { color: #64748b; }
"""


def _list(items: List[str]) -> str:
    if not items:
        return ""
    return "<ul>" + "".join(f"<li>{escape(i)}</li>" for i in items) + "</ul>"


def _tech_section(template: ProjectTemplate) -> str:
    solution = template.technical_solution
    if solution is None or solution.is_empty:
        return ""
    parts = ["<h2>技术实施方案</h2>"]
    if solution.hardware:
        hw = solution.hardware
        parts.append("<h3>硬件架构</h3>")
        parts.append(f"<p><strong>方案概述:</strong> {escape(hw.scheme)}</p>")
        parts.append(f"<p><strong>核心器件:</strong> {escape(', '.join(hw.components))}</p>")
        parts.append("<p><strong>设计要点:</strong></p>" + _list(hw.design_points))
        if hw.detailed_plan:
            parts.append(f"<pre>{escape(hw.detailed_plan)}</pre>")
    if solution.software:
        sw = solution.software
        parts.append("<h3>软件技术栈</h3>")
        parts.append(f"<p><strong>架构模式:</strong> {escape(sw.architecture)}</p>")
        parts.append(f"<p><strong>开发语言:</strong> {escape(', '.join(sw.languages))}</p>")
        parts.append(f"<p><strong>核心框架:</strong> {escape(', '.join(sw.frameworks))}</p>")
        if sw.detailed_plan:
            parts.append(f"<pre>{escape(sw.detailed_plan)}</pre>")
    return "\n".join(parts)


def _phases_section(template: ProjectTemplate) -> str:
    parts = ["<h2>项目阶段</h2>"]
    for phase in template.phases:
        milestone = ' <span class="milestone">(里程碑)</span>' if phase.is_milestone else ""
        parts.append(f"<h3>{escape(phase.name)}{milestone}</h3>")
        parts.append(f"<p>目标: {escape(phase.goal)}<br/>输出: {escape(phase.key_output)}</p>")
        items = []
        for t in phase.tasks:
            deps = ""
            if t.dependencies:
                deps = f' <span class="muted">前置: {escape(", ".join(t.dependencies))}</span>'
            items.append(
                f"<li><strong>{escape(t.name)}</strong> ({escape(t.role)}): "
                f"{escape(t.description)} [输出: {escape(t.output)}]{deps}</li>"
            )
        parts.append("<ul>" + "".join(items) + "</ul>")
    return "\n".join(parts)


def _estimates_section(template: ProjectTemplate) -> str:
    est = template.estimates
    rows = "".join(
        f"<tr><td>{escape(p.phase_name)}</td><td>{p.days}</td></tr>" for p in est.phase_durations
    )
    team = "".join(
        f"<tr><td>{escape(m.role)}</td><td>{m.count}</td></tr>" for m in est.team_structure
    )
    return (
        "<h2>时间轴与估算</h2>"
        f"<p><strong>总周期:</strong> {escape(est.total_duration)}</p>"
        f"<table><tr><th>阶段</th><th>天数</th></tr>{rows}</table>"
        "<h3>推荐团队配置</h3>"
        f"<table><tr><th>角色</th><th>人数</th></tr>{team}</table>"
    )


def _risks_section(template: ProjectTemplate) -> str:
    rows = "".join(
        f"<tr><td>{escape(r.description)}</td><td>{escape(r.impact_phase)}</td>"
        f"<td>{r.level.label}</td><td>{escape(r.strategy)}</td></tr>"
        for r in template.risks
    )
    return (
        "<h2>风险评估</h2>"
        "<table><tr><th>风险</th><th>影响阶段</th><th>等级</th><th>应对</th></tr>"
        f"{rows}</table>"
    )


def build_word_html(template: ProjectTemplate) -> str:
    """Render the template as a self-contained Word-compatible HTML document."""
    info = template.basic_info
    usage = template.usage
    body = "\n".join([
        f"<h1>{escape(info.name)}</h1>",
        f"<p><strong>类型:</strong> {escape(info.type)}</p>",
        f"<p><strong>场景:</strong> {escape(info.scenario)}</p>",
        _list(info.features),
        _tech_section(template),
        _phases_section(template),
        _estimates_section(template),
        _risks_section(template),
        "<h2>使用指南</h2>",
        f"<p><strong>适用范围:</strong> {escape(usage.suitability)}</p>",
        f"<p><strong>复杂度:</strong> {escape(usage.complexity)}</p>",
        f"<p><strong>注意事项:</strong> {escape(usage.notes)}</p>",
    ])
    return (
        "<html xmlns:o='urn:schemas-microsoft-com:office:office' "
        "xmlns:w='urn:schemas-microsoft-com:office:word' "
        "xmlns='http://www.w3.org/TR/REC-html40'>\n"
        f"<head><meta charset='utf-8'><title>{escape(info.name)}</title>"
        f"<style>{WORD_STYLE}</style></head>\n"
        f"<body>\n{body}\n</body>\n</html>"
    )


def export_word(template: ProjectTemplate) -> ExportArtifact:
    # BOM so Word detects UTF-8
    data = ("\ufeff" + build_word_html(template)).encode("utf-8")
    return ExportArtifact(
        filename=export_filename(template.basic_info.name, ".doc"),
        data=data,
        mime_type=WORD_MIME_TYPE,
    )
