"""Tests for the JSON, Word, PDF and Markdown exports."""

import json
from unittest.mock import MagicMock, patch

from contracts import ProjectTemplate, TechKind
from exporters import (
    build_word_html,
    export_filename,
    export_json,
    export_markdown,
    export_pdf,
    export_word,
    load_json,
    render_pdf,
)
from exporters.pdf_export import BORDER_PT, PAPER_SIZE


class TestFilenames:

    def test_whitespace_runs_collapsed(self):
        assert export_filename("My  New\tProject", ".doc") == "My_New_Project.doc"

    def test_no_whitespace(self):
        assert export_filename("温控", ".md") == "温控.md"


class TestJsonExport:

    def test_artifact(self, template):
        artifact = export_json(template)
        assert artifact.filename == "智能温控_系统_template.json"
        assert artifact.mime_type == "application/json"

    def test_pretty_printed_with_wire_names(self, template):
        text = export_json(template).data.decode("utf-8")
        assert text.startswith('{\n  "basicInfo"')
        assert "智能温控" in text
        assert json.loads(text)["estimates"]["totalDuration"] == "3个月"

    def test_round_trip(self, template):
        edited = template.with_detailed_plan(TechKind.SOFTWARE, "## API")
        assert load_json(export_json(edited).data.decode("utf-8")) == edited

    def test_round_trip_without_solution(self, sample_data):
        del sample_data["technicalSolution"]
        template = ProjectTemplate.model_validate(sample_data)
        assert load_json(export_json(template).data) == template


class TestWordExport:

    def test_artifact(self, template):
        artifact = export_word(template)
        assert artifact.filename == "智能温控_系统.doc"
        assert artifact.mime_type == "application/msword"
        assert artifact.data.startswith("\ufeff".encode("utf-8"))

    def test_office_namespaces(self, template):
        html = build_word_html(template)
        assert "xmlns:o='urn:schemas-microsoft-com:office:office'" in html
        assert "xmlns:w='urn:schemas-microsoft-com:office:word'" in html
        assert "xmlns='http://www.w3.org/TR/REC-html40'" in html
        assert "<meta charset='utf-8'>" in html
        assert "<style>" in html

    def test_sections_present(self, template):
        html = build_word_html(template)
        for heading in ("技术实施方案", "项目阶段", "时间轴与估算", "风险评估", "使用指南"):
            assert heading in html
        assert "前置: 用户调研" in html
        assert "<td>高</td>" in html

    def test_text_escaped(self, sample_data):
        sample_data["basicInfo"]["name"] = "<script>alert(1)</script>"
        sample_data["phases"][0]["tasks"][0]["description"] = "A & B"
        html = build_word_html(ProjectTemplate.model_validate(sample_data))
        assert "<script>" not in html
        assert "&lt;script&gt;" in html
        assert "A &amp; B" in html

    def test_detail_plan_included(self, template):
        html = build_word_html(template.with_detailed_plan("hardware", "BOM <table>"))
        assert "BOM &lt;table&gt;" in html

    def test_no_solution_section(self, sample_data):
        del sample_data["technicalSolution"]
        html = build_word_html(ProjectTemplate.model_validate(sample_data))
        assert "技术实施方案" not in html


class TestPdfExport:

    def test_render_uses_a4_and_borders(self):
        pdf = MagicMock()
        pdf.meta = {}
        with patch("exporters.pdf_export.MarkdownPdf", return_value=pdf), \
                patch("exporters.pdf_export.Section") as section, \
                patch("pathlib.Path.read_bytes", return_value=b"%PDF-fake"):
            data = render_pdf("# Title", title="Title")

        assert data == b"%PDF-fake"
        section.assert_called_once_with(
            "# Title",
            paper_size=PAPER_SIZE,
            borders=(BORDER_PT, BORDER_PT, -BORDER_PT, -BORDER_PT),
        )
        assert "page-break-inside: avoid" in pdf.add_section.call_args.kwargs["user_css"]
        assert pdf.meta["title"] == "Title"
        pdf.save.assert_called_once()

    def test_real_render(self, template):
        artifact = export_pdf(template)
        assert artifact.filename == "智能温控_系统.pdf"
        assert artifact.mime_type == "application/pdf"
        assert artifact.data.startswith(b"%PDF")


class TestMarkdownExport:

    def test_artifact(self, template):
        artifact = export_markdown(template)
        assert artifact.filename == "智能温控_系统.md"
        assert artifact.data.decode("utf-8") == template.to_markdown()
