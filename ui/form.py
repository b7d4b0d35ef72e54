"""Requirement form: free-text requirements, team size, duration and uploads."""

import streamlit as st

from config import (
    DOCUMENT_EXTENSIONS,
    DURATION_MONTHS_RANGE,
    IMAGE_EXTENSIONS,
    TEAM_SIZE_OPTIONS,
)
from orchestrator import PlanningSession

from .state import widget_key

NOT_SET = ""


def _duration_options():
    low, high = DURATION_MONTHS_RANGE
    return [NOT_SET] + [str(m) for m in range(low, high + 1)]


def _on_upload(session: PlanningSession, base: str, key: str) -> None:
    uploads = st.session_state.get(key) or []
    session.add_uploads(uploads)
    # New key next run so the uploader starts empty; the session owns the files
    st.session_state[f"{base}_round"] = st.session_state.get(f"{base}_round", 0) + 1


def render_uploads(session: PlanningSession) -> None:
    base = widget_key("uploads")
    key = f"{base}_{st.session_state.get(f'{base}_round', 0)}"
    st.file_uploader(
        "上传参考资料 (文档或图片)",
        type=DOCUMENT_EXTENSIONS + IMAGE_EXTENSIONS,
        accept_multiple_files=True,
        key=key,
        on_change=_on_upload,
        args=(session, base, key),
    )
    for i, f in enumerate(session.files):
        col_name, col_remove = st.columns([6, 1])
        icon = "🖼️" if f.is_inline else "📄"
        col_name.write(f"{icon} {f.name}")
        if col_remove.button("移除", key=f"remove_file_{i}"):
            session.remove_file(i)
            st.rerun()


def render_form(session: PlanningSession) -> bool:
    """Render the form and copy its values into the session.

    Returns:
        True when the generate button was pressed
    """
    st.subheader("项目需求")
    session.functional_req = st.text_area(
        "功能需求说明",
        value=session.functional_req,
        placeholder="描述项目需要实现的核心功能、目标用户和使用场景...",
        height=160,
        key=widget_key("functional_req"),
    )
    session.tech_req = st.text_area(
        "技术要求 (可选)",
        value=session.tech_req,
        placeholder="例如: 基于 ESP32, 需要低功耗蓝牙, 云端使用 Python...",
        height=100,
        key=widget_key("tech_req"),
    )

    col_team, col_duration = st.columns(2)
    team_values = [NOT_SET] + list(TEAM_SIZE_OPTIONS)
    session.team_size = col_team.selectbox(
        "团队规模",
        team_values,
        index=team_values.index(session.team_size) if session.team_size in team_values else 0,
        format_func=lambda v: TEAM_SIZE_OPTIONS.get(v, "未指定"),
        key=widget_key("team_size"),
    )
    durations = _duration_options()
    session.duration = col_duration.selectbox(
        "期望周期",
        durations,
        index=durations.index(session.duration) if session.duration in durations else 0,
        format_func=lambda v: f"{v}个月" if v else "未指定",
        key=widget_key("duration"),
    )

    render_uploads(session)

    if session.error and session.error_is_validation:
        st.warning(session.error)

    label = "正在生成..." if session.loading else "生成项目模板"
    return st.button(label, type="primary", disabled=session.loading, use_container_width=True)
