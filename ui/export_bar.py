"""Export bar: downloads, browser print and reset."""

import streamlit as st
import streamlit.components.v1 as components

from config import log
from exporters import ExportArtifact
from orchestrator import PlanningSession

from .state import reset_form

PRINT_SCRIPT = "<script>window.parent.print();</script>"


def _download(col, label: str, artifact: ExportArtifact, key: str) -> None:
    col.download_button(
        label,
        data=artifact.data,
        file_name=artifact.filename,
        mime=artifact.mime_type,
        key=key,
        use_container_width=True,
    )


def render_export_bar(session: PlanningSession) -> None:
    cols = st.columns(6)

    try:
        pdf = session.export_pdf()
    except Exception as e:
        log(f"PDF export failed: {type(e).__name__}: {e}")
        cols[0].button("PDF 不可用", disabled=True, use_container_width=True)
    else:
        _download(cols[0], "下载 PDF", pdf, "export_pdf")

    if cols[1].button("打印", use_container_width=True):
        components.html(PRINT_SCRIPT, height=0)

    _download(cols[2], "导出 Word", session.export_word(), "export_word")
    _download(cols[3], "导出 JSON", session.export_json(), "export_json")
    _download(cols[4], "导出 Markdown", session.export_markdown(), "export_markdown")

    if cols[5].button("新建项目", use_container_width=True):
        reset_form(session)
        st.rerun()
