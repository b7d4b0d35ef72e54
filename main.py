#!/usr/bin/env python3
"""PMO Genius - Entry point for the project template generator.

Usage:
    streamlit run main.py

    # Use another backend
    PMO_GENIUS_PROVIDER=anthropic streamlit run main.py
"""

import traceback

import streamlit as st

from config import log, settings
from agents import build_client
from ui import get_session, render_app


def render_fatal_error(error: BaseException) -> None:
    """Last-resort page shown when rendering itself fails."""
    st.error("页面出现错误 / Something went wrong")
    st.write(f"{type(error).__name__}: {error}")
    with st.expander("错误详情"):
        st.code("".join(traceback.format_exception(type(error), error, error.__traceback__)), language=None)
    if st.button("重新加载"):
        st.session_state.clear()
        st.rerun()


def main() -> None:
    st.set_page_config(page_title=settings.app_title, page_icon="📋", layout="wide")
    try:
        session = get_session(lambda: build_client(settings))
        render_app(session, settings)
    except Exception as e:
        log(f"Unhandled error while rendering: {type(e).__name__}: {e}")
        render_fatal_error(e)


if __name__ == "__main__":
    main()
