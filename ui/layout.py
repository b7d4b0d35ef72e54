"""Page layout: form, error banner, then the result view once a template exists."""

import streamlit as st

from config import Settings
from orchestrator import PlanningSession

from .export_bar import render_export_bar
from .form import render_form
from .result_view import render_result
from .sidebar import render_sidebar


def render_error_banner(session: PlanningSession) -> None:
    """Generation failures are shown as a dismissible banner."""
    if not session.error or session.error_is_validation:
        return
    st.error(session.error)
    if st.button("关闭", key="dismiss_error"):
        session.dismiss_error()
        st.rerun()


def render_app(session: PlanningSession, settings: Settings) -> None:
    render_sidebar(session, settings)

    if session.template is None:
        st.title(settings.app_title)
        st.caption("输入项目需求, 自动生成可复用的项目实施模板")
        if render_form(session):
            with st.spinner("正在生成项目模板, 这可能需要一分钟..."):
                session.generate()
            st.rerun()
        render_error_banner(session)
        return

    render_export_bar(session)
    render_error_banner(session)
    render_result(session)
