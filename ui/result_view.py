"""Read-only sections of the result view."""

import pandas as pd
import streamlit as st

from contracts import ProjectTemplate, RiskLevel

from .tech_view import render_technical_solution

RISK_BADGES = {
    RiskLevel.HIGH: "🔴",
    RiskLevel.MEDIUM: "🟠",
    RiskLevel.LOW: "🟢",
}


def type_icon(template_type: str) -> str:
    """Icon for a template category."""
    lower = template_type.lower()
    if "software" in lower or "软件" in lower:
        return "📦"
    if "hardware" in lower or "硬件" in lower:
        return "🔌"
    if "ai" in lower or "智能" in lower:
        return "🧠"
    return "🗂️"


def risk_badge(level: RiskLevel) -> str:
    return f"{RISK_BADGES[level]} {level.label}"


def timeline_frame(template: ProjectTemplate) -> pd.DataFrame:
    """Timeline chart data, one row per phase duration, in phase order."""
    rows = template.chart_rows()
    return pd.DataFrame(rows, columns=["name", "days", "full_name"])


def risk_frame(template: ProjectTemplate) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "风险描述": r.description,
                "影响阶段": r.impact_phase,
                "等级": risk_badge(r.level),
                "应对策略": r.strategy,
            }
            for r in template.risks
        ],
        columns=["风险描述", "影响阶段", "等级", "应对策略"],
    )


def render_header(template: ProjectTemplate) -> None:
    info = template.basic_info
    st.title(f"{type_icon(info.type)} {info.name}")
    st.caption(f"{info.type} · {info.scenario}")
    features = info.features[:3]
    if features:
        for col, feature in zip(st.columns(len(features)), features):
            col.info(feature)


def render_timeline(template: ProjectTemplate) -> None:
    est = template.estimates
    st.subheader("时间轴与估算")
    st.metric("总周期", est.total_duration)
    col_chart, col_team = st.columns([3, 2])
    with col_chart:
        frame = timeline_frame(template)
        if not frame.empty:
            st.bar_chart(
                frame, x="name", y="days", horizontal=True, sort=False, x_label="天数", y_label="",
            )
    with col_team:
        st.markdown("**推荐团队配置**")
        for member in est.team_structure:
            st.markdown(f"- {member.role} × {member.count}")


def render_usage(template: ProjectTemplate) -> None:
    usage = template.usage
    st.subheader("使用指南")
    col_fit, col_complexity = st.columns(2)
    col_fit.markdown(f"**适用范围:** {usage.suitability}")
    col_complexity.markdown(f"**复杂度:** {usage.complexity}")
    st.warning(usage.notes)


def render_phases(template: ProjectTemplate) -> None:
    st.subheader("项目阶段")
    for i, phase in enumerate(template.phases, 1):
        flag = " 🚩 里程碑" if phase.is_milestone else ""
        with st.expander(f"{i}. {phase.name}{flag}"):
            st.markdown(f"**目标:** {phase.goal}")
            st.markdown(f"**关键输出:** {phase.key_output}")
            for task in phase.tasks:
                with st.container(border=True):
                    st.markdown(f"**{task.name}** · {task.role}")
                    st.write(task.description)
                    st.caption(f"输出: {task.output}")
                    if task.dependencies:
                        st.caption("前置: " + ", ".join(task.dependencies))


def render_risks(template: ProjectTemplate) -> None:
    st.subheader("风险评估")
    st.dataframe(risk_frame(template), hide_index=True, use_container_width=True)


def render_result(session) -> None:
    """Render every section of the current template."""
    template = session.template
    render_header(template)
    render_technical_solution(session)
    render_timeline(template)
    render_usage(template)
    render_phases(template)
    render_risks(template)
