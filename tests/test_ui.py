"""Tests for the view helpers and session plumbing with a fake streamlit."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

import main
from contracts import ProjectTemplate, RiskLevel
from orchestrator import PlanningSession
from ui import layout, result_view, state
from ui.result_view import risk_badge, risk_frame, timeline_frame, type_icon


class DummyExpander:
    def __enter__(self):
        return None

    def __exit__(self, exc_type, exc, tb):
        return False


def make_streamlit(buttons=None, session_state=None):
    buttons = buttons or {}
    return SimpleNamespace(
        session_state=session_state if session_state is not None else {},
        error=MagicMock(),
        write=MagicMock(),
        code=MagicMock(),
        expander=lambda *a, **k: DummyExpander(),
        button=lambda label, **k: buttons.get(label, False),
        rerun=MagicMock(),
    )


class TestViewHelpers:

    @pytest.mark.parametrize("category, icon", [
        ("SaaS Software", "📦"),
        ("软件项目", "📦"),
        ("硬件研发", "🔌"),
        ("AI 平台", "🧠"),
        ("咨询", "🗂️"),
    ])
    def test_type_icon(self, category, icon):
        assert type_icon(category) == icon

    def test_risk_badge(self):
        assert risk_badge(RiskLevel.HIGH) == "🔴 高"
        assert risk_badge(RiskLevel.LOW) == "🟢 低"

    def test_timeline_frame_in_phase_order(self, template):
        frame = timeline_frame(template)
        assert list(frame["name"]) == ["1. 需求分析", "2. 硬件原型开发与验..."]
        assert list(frame["days"]) == [10, 45]

    def test_risk_frame(self, template):
        frame = risk_frame(template)
        assert len(frame) == 3
        assert list(frame["等级"]) == ["🔴 高", "🟠 中", "🟢 低"]


class TestSessionState:

    def test_session_created_once(self, monkeypatch, make_client):
        st = make_streamlit()
        monkeypatch.setattr(state, "st", st)
        factory = MagicMock(side_effect=lambda: make_client()[0])

        first = state.get_session(factory)
        second = state.get_session(factory)

        assert isinstance(first, PlanningSession)
        assert first is second
        factory.assert_called_once()

    def test_reset_form_bumps_widget_keys(self, monkeypatch, make_client):
        st = make_streamlit()
        monkeypatch.setattr(state, "st", st)
        session = state.get_session(lambda: make_client()[0])
        session.functional_req = "x"
        before = state.widget_key("functional_req")

        state.reset_form(session)

        assert session.functional_req == ""
        assert state.widget_key("functional_req") != before


class TestErrorBanner:

    def _session(self, make_client):
        return PlanningSession(make_client()[0])

    def test_generation_error_shown(self, monkeypatch, make_client):
        st = make_streamlit()
        monkeypatch.setattr(layout, "st", st)
        session = self._session(make_client)
        session.error = "timeout"
        layout.render_error_banner(session)
        st.error.assert_called_once_with("timeout")

    def test_validation_error_not_in_banner(self, monkeypatch, make_client):
        st = make_streamlit()
        monkeypatch.setattr(layout, "st", st)
        session = self._session(make_client)
        session.generate()
        layout.render_error_banner(session)
        st.error.assert_not_called()

    def test_dismiss(self, monkeypatch, make_client):
        st = make_streamlit(buttons={"关闭": True})
        monkeypatch.setattr(layout, "st", st)
        session = self._session(make_client)
        session.error = "boom"
        layout.render_error_banner(session)
        assert session.error is None
        st.rerun.assert_called_once()


class TestFatalErrorFallback:

    def test_shows_error_and_traceback(self, monkeypatch):
        st = make_streamlit()
        monkeypatch.setattr(main, "st", st)
        try:
            raise RuntimeError("render failed")
        except RuntimeError as e:
            main.render_fatal_error(e)
        st.error.assert_called_once()
        st.write.assert_called_once_with("RuntimeError: render failed")
        assert "render failed" in st.code.call_args.args[0]

    def test_reload_clears_state(self, monkeypatch):
        st = make_streamlit(buttons={"重新加载": True}, session_state={"planning_session": object()})
        monkeypatch.setattr(main, "st", st)
        main.render_fatal_error(ValueError("x"))
        assert st.session_state == {}
        st.rerun.assert_called_once()

    def test_main_catches_render_errors(self, monkeypatch):
        st = make_streamlit()
        st.set_page_config = MagicMock()
        monkeypatch.setattr(main, "st", st)
        monkeypatch.setattr(main, "get_session", MagicMock(return_value=MagicMock()))
        monkeypatch.setattr(main, "render_app", MagicMock(side_effect=KeyError("missing")))
        main.main()
        st.error.assert_called_once()


class TestTimelineChart:

    def _streamlit(self):
        return SimpleNamespace(
            subheader=MagicMock(),
            metric=MagicMock(),
            markdown=MagicMock(),
            bar_chart=MagicMock(),
            columns=lambda spec: [DummyExpander() for _ in spec],
        )

    def test_chart_keeps_phase_order(self, monkeypatch, sample_data):
        sample_data["estimates"]["phaseDurations"] = [
            {"phaseName": "验收", "days": 5},
            {"phaseName": "开发", "days": 30},
            {"phaseName": "测试", "days": 10},
        ]
        template = ProjectTemplate.model_validate(sample_data)
        st = self._streamlit()
        monkeypatch.setattr(result_view, "st", st)

        result_view.render_timeline(template)

        st.bar_chart.assert_called_once()
        frame = st.bar_chart.call_args.args[0]
        assert list(frame["name"]) == ["1. 验收", "2. 开发", "3. 测试"]
        assert st.bar_chart.call_args.kwargs["sort"] is False
        assert st.bar_chart.call_args.kwargs["horizontal"] is True

    def test_no_chart_without_durations(self, monkeypatch, sample_data):
        sample_data["estimates"]["phaseDurations"] = []
        st = self._streamlit()
        monkeypatch.setattr(result_view, "st", st)
        result_view.render_timeline(ProjectTemplate.model_validate(sample_data))
        st.bar_chart.assert_not_called()
