"""Tests for in-place tag editing."""

import pytest

from contracts import TechKind
from orchestrator import SuggestionStatus, TagEditor, TagState

from conftest import NetworkError


class TestTagEditorLifecycle:

    def test_display_until_edited(self, template):
        editor = TagEditor("hardware")
        assert editor.state(0) == TagState.DISPLAY
        session = editor.start_edit(0, template)
        assert editor.state(0) == TagState.EDITING
        assert session.draft == "ESP32-S3"
        assert session.status == SuggestionStatus.LOADING

    def test_start_edit_out_of_range(self, template):
        with pytest.raises(IndexError):
            TagEditor(TechKind.SOFTWARE).start_edit(5, template)

    def test_start_edit_reuses_session(self, template):
        editor = TagEditor(TechKind.SOFTWARE)
        assert editor.start_edit(1, template) is editor.start_edit(1, template)

    def test_reopened_editor_gets_new_nonce(self, template):
        editor = TagEditor(TechKind.SOFTWARE)
        first = editor.start_edit(0, template).nonce
        editor.cancel(0)
        second = editor.start_edit(0, template).nonce
        other = TagEditor(TechKind.HARDWARE).start_edit(0, template).nonce
        assert len({first, second, other}) == 3

    def test_cancel_returns_to_display(self, template):
        editor = TagEditor(TechKind.SOFTWARE)
        editor.start_edit(0, template)
        editor.cancel(0)
        assert editor.state(0) == TagState.DISPLAY
        assert editor.session(0) is None


class TestTagEditorEdits:

    def test_save_changes_only_that_entry(self, template):
        editor = TagEditor(TechKind.HARDWARE)
        editor.start_edit(1, template)
        updated = editor.save(1, "  SHT31 ", template)
        assert updated.tags(TechKind.HARDWARE) == ["ESP32-S3", "SHT31", "继电器模块"]
        assert template.tags(TechKind.HARDWARE)[1] == "DS18B20"
        assert editor.state(1) == TagState.DISPLAY

    @pytest.mark.parametrize("value", ["", "   "])
    def test_save_rejects_blank(self, template, value):
        editor = TagEditor(TechKind.HARDWARE)
        editor.start_edit(0, template)
        with pytest.raises(ValueError):
            editor.save(0, value, template)
        assert editor.state(0) == TagState.EDITING

    def test_delete_preserves_order(self, template):
        updated = TagEditor(TechKind.HARDWARE).delete(0, template)
        assert updated.tags(TechKind.HARDWARE) == ["DS18B20", "继电器模块"]

    def test_delete_while_editing(self, template):
        editor = TagEditor(TechKind.HARDWARE)
        editor.start_edit(1, template)
        updated = editor.delete(1, template)
        assert len(updated.tags(TechKind.HARDWARE)) == 2
        assert editor.state(1) == TagState.DISPLAY

    def test_delete_shifts_later_sessions(self, template):
        editor = TagEditor(TechKind.HARDWARE)
        session = editor.start_edit(2, template)
        editor.delete(0, template)
        assert editor.session(1) is session
        assert session.index == 1
        assert editor.state(2) == TagState.DISPLAY

    def test_append_placeholder_and_edit(self, template):
        editor = TagEditor(TechKind.SOFTWARE)
        updated = editor.append(template)
        tags = updated.tags(TechKind.SOFTWARE)
        assert tags == ["FastAPI", "React", "新技术"]
        assert editor.state(2) == TagState.EDITING
        assert editor.session(2).draft == "新技术"

    def test_clear(self, template):
        editor = TagEditor(TechKind.SOFTWARE)
        editor.start_edit(0, template)
        editor.clear()
        assert editor.state(0) == TagState.DISPLAY


class TestTagEditorSuggestions:

    def test_fetched_once_per_session(self, template, make_client):
        client, provider = make_client('["Django", "Flask"]')
        editor = TagEditor(TechKind.SOFTWARE)
        editor.start_edit(0, template)
        assert editor.load_suggestions(0, template, client) == ["Django", "Flask"]
        assert editor.load_suggestions(0, template, client) == ["Django", "Flask"]
        assert len(provider.requests) == 1
        assert editor.session(0).status == SuggestionStatus.LOADED
        assert "智能温控 系统" in provider.requests[0].prompt

    def test_refresh_refetches(self, template, make_client):
        client, provider = make_client('["Django"]', '["Sanic"]')
        editor = TagEditor(TechKind.SOFTWARE)
        editor.start_edit(0, template)
        editor.load_suggestions(0, template, client)
        assert editor.refresh_suggestions(0, template, client) == ["Sanic"]
        assert len(provider.requests) == 2

    def test_cache_dropped_with_session(self, template, make_client):
        client, provider = make_client('["Django"]', '["Sanic"]')
        editor = TagEditor(TechKind.SOFTWARE)
        editor.start_edit(0, template)
        editor.load_suggestions(0, template, client)
        editor.cancel(0)
        editor.start_edit(0, template)
        assert editor.load_suggestions(0, template, client) == ["Sanic"]

    def test_failure_yields_empty_and_save_still_works(self, template, make_client):
        client, _ = make_client(NetworkError("down"))
        editor = TagEditor(TechKind.HARDWARE)
        editor.start_edit(0, template)
        assert editor.load_suggestions(0, template, client) == []
        assert editor.session(0).status == SuggestionStatus.EMPTY
        updated = editor.save(0, "STM32", template)
        assert updated.tags(TechKind.HARDWARE)[0] == "STM32"

    def test_requires_open_session(self, template, make_client):
        client, _ = make_client()
        with pytest.raises(KeyError):
            TagEditor(TechKind.HARDWARE).load_suggestions(0, template, client)
