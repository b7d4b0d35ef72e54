"""Session-state plumbing: one PlanningSession per browser session."""

from typing import Callable

import streamlit as st

from agents import GenerationClient
from orchestrator import PlanningSession

SESSION_KEY = "planning_session"
FORM_NONCE_KEY = "form_nonce"


def get_session(client_factory: Callable[[], GenerationClient]) -> PlanningSession:
    """Return this browser session's PlanningSession, creating it on first run."""
    if SESSION_KEY not in st.session_state:
        st.session_state[SESSION_KEY] = PlanningSession(client_factory())
        st.session_state[FORM_NONCE_KEY] = 0
    return st.session_state[SESSION_KEY]


def widget_key(name: str) -> str:
    """Key for a form widget; bumping the nonce gives every widget a fresh key."""
    return f"{name}_{st.session_state.get(FORM_NONCE_KEY, 0)}"


def reset_form(session: PlanningSession) -> None:
    """Clear the session and drop the widgets' own copies of the form values."""
    session.reset()
    st.session_state[FORM_NONCE_KEY] = st.session_state.get(FORM_NONCE_KEY, 0) + 1
