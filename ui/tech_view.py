"""Technical solution cards with editable tags and detail-plan expansion."""

import streamlit as st

from contracts import HardwareSpecs, SoftwareSpecs, TechKind
from orchestrator import PlanningSession, SuggestionStatus, TagState

CARD_TITLES = {TechKind.HARDWARE: "硬件架构", TechKind.SOFTWARE: "软件技术栈"}
TAG_TITLES = {TechKind.HARDWARE: "核心器件", TechKind.SOFTWARE: "核心框架"}


def _render_editing_tag(session: PlanningSession, kind: TechKind, index: int) -> None:
    edit = session.edit_tag(kind, index)
    if edit.status == SuggestionStatus.LOADING:
        with st.spinner("正在获取替代方案..."):
            session.load_suggestions(kind, index)

    draft = st.text_input(
        "修改为",
        value=edit.draft,
        key=f"{kind.value}_draft_{edit.nonce}",
        label_visibility="collapsed",
    )

    if edit.status == SuggestionStatus.EMPTY:
        st.caption("暂无推荐")
    elif edit.suggestions:
        st.caption("推荐替代:")
        cols = st.columns(len(edit.suggestions))
        for col, suggestion in zip(cols, edit.suggestions):
            if col.button(suggestion, key=f"{kind.value}_pick_{edit.nonce}_{suggestion}"):
                session.save_tag(kind, index, suggestion)
                st.rerun()

    col_save, col_cancel, col_refresh, col_delete = st.columns(4)
    if col_save.button("保存", key=f"{kind.value}_save_{edit.nonce}"):
        try:
            session.save_tag(kind, index, draft)
        except ValueError:
            st.warning("内容不能为空")
        else:
            st.rerun()
    if col_cancel.button("取消", key=f"{kind.value}_cancel_{edit.nonce}"):
        session.cancel_tag_edit(kind, index)
        st.rerun()
    if col_refresh.button("换一批", key=f"{kind.value}_refresh_{edit.nonce}"):
        with st.spinner("正在获取替代方案..."):
            session.load_suggestions(kind, index, refresh=True)
        st.rerun()
    if col_delete.button("删除", key=f"{kind.value}_del_edit_{edit.nonce}"):
        session.delete_tag(kind, index)
        st.rerun()


def render_tags(session: PlanningSession, kind: TechKind) -> None:
    """Render the editable tag list for one subsection."""
    editor = session.editor(kind)
    st.markdown(f"**{TAG_TITLES[kind]}**")
    for i, tag in enumerate(session.template.tags(kind)):
        if editor.state(i) == TagState.EDITING:
            with st.container(border=True):
                st.caption(f"正在编辑: {tag}")
                _render_editing_tag(session, kind, i)
            continue
        col_tag, col_edit, col_delete = st.columns([5, 1, 1])
        col_tag.markdown(f"`{tag}`")
        if col_edit.button("✏️", key=f"{kind.value}_edit_{i}", help="编辑"):
            session.edit_tag(kind, i)
            st.rerun()
        if col_delete.button("✖", key=f"{kind.value}_delete_{i}", help="删除"):
            session.delete_tag(kind, i)
            st.rerun()
    if st.button("＋ 添加", key=f"{kind.value}_append"):
        session.append_tag(kind)
        st.rerun()


def _render_detail(session: PlanningSession, kind: TechKind, detailed_plan) -> None:
    if detailed_plan:
        with st.expander("详细方案", expanded=True):
            st.markdown(detailed_plan)
        return
    busy = session.tech_loading is not None
    if st.button("生成详细方案", key=f"{kind.value}_detail", disabled=busy):
        with st.spinner("正在生成详细方案..."):
            session.expand_detail(kind)
        st.rerun()


def _render_hardware(session: PlanningSession, hw: HardwareSpecs) -> None:
    st.markdown(f"#### 🔌 {CARD_TITLES[TechKind.HARDWARE]}")
    st.write(hw.scheme)
    render_tags(session, TechKind.HARDWARE)
    if hw.design_points:
        st.markdown("**设计要点**")
        st.markdown("\n".join(f"- {p}" for p in hw.design_points))
    _render_detail(session, TechKind.HARDWARE, hw.detailed_plan)


def _render_software(session: PlanningSession, sw: SoftwareSpecs) -> None:
    st.markdown(f"#### 💻 {CARD_TITLES[TechKind.SOFTWARE]}")
    st.write(sw.architecture)
    st.markdown("**开发语言:** " + " ".join(f"`{lang}`" for lang in sw.languages))
    render_tags(session, TechKind.SOFTWARE)
    _render_detail(session, TechKind.SOFTWARE, sw.detailed_plan)


def render_technical_solution(session: PlanningSession) -> None:
    solution = session.template.technical_solution
    if solution is None or solution.is_empty:
        return
    st.subheader("技术实施方案")
    if session.alert:
        st.error(session.alert)
        if st.button("知道了", key="dismiss_alert"):
            session.dismiss_alert()
            st.rerun()
    cards = [(solution.hardware, _render_hardware), (solution.software, _render_software)]
    present = [(spec, render) for spec, render in cards if spec is not None]
    for col, (spec, render) in zip(st.columns(len(present)), present):
        with col:
            with st.container(border=True):
                render(session, spec)
