"""Streamlit view layer."""

from .state import get_session, reset_form, widget_key
from .layout import render_app, render_error_banner
from .result_view import risk_badge, risk_frame, timeline_frame, type_icon

__all__ = [
    # Session state
    "get_session",
    "reset_form",
    "widget_key",
    # Pages
    "render_app",
    "render_error_banner",
    # View helpers
    "risk_badge",
    "risk_frame",
    "timeline_frame",
    "type_icon",
]
