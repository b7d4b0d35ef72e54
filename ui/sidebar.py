"""Sidebar: backend status and token usage for this session."""

import streamlit as st

from config import Settings
from orchestrator import PlanningSession
from providers import list_providers


def render_sidebar(session: PlanningSession, settings: Settings) -> None:
    with st.sidebar:
        st.header(settings.app_title)
        st.caption(f"后端: {settings.provider}")

        with st.expander("模型服务状态"):
            keys = {
                name: settings.api_key_for(name)
                for name in ("gemini", "openai", "anthropic")
            }
            for name, available in list_providers(keys).items():
                st.write(f"{'✅' if available else '⚪'} {name}")

        usage = session.client.usage
        st.metric("调用次数", usage.calls)
        col_in, col_out = st.columns(2)
        col_in.metric("输入 tokens", usage.input_tokens)
        col_out.metric("输出 tokens", usage.output_tokens)
