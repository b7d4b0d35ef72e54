"""Client-local exports of a template snapshot. None of them change the template."""

from contracts import ProjectTemplate

from .base import ExportArtifact, export_filename
from .json_export import export_json, load_json
from .word_export import build_word_html, export_word
from .pdf_export import export_pdf, render_pdf


def export_markdown(template: ProjectTemplate) -> ExportArtifact:
    return ExportArtifact(
        filename=export_filename(template.basic_info.name, ".md"),
        data=template.to_markdown().encode("utf-8"),
        mime_type="text/markdown",
    )


__all__ = [
    "ExportArtifact",
    "export_filename",
    "export_json",
    "load_json",
    "build_word_html",
    "export_word",
    "export_pdf",
    "render_pdf",
    "export_markdown",
]
