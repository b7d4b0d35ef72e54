"""PDF export via markdown-pdf (PyMuPDF underneath).

A4 portrait with 10 mm borders; block sections avoid page breaks.
"""

import tempfile
from pathlib import Path

from markdown_pdf import MarkdownPdf, Section

from contracts import ProjectTemplate

from .base import ExportArtifact, export_filename

PAPER_SIZE = "A4"
# 10 mm in PDF points
BORDER_PT = 28

PDF_CSS = """
body { font-family: sans-serif; font-size: 10pt; }
h1 { color: #1e293b; }
h2 { color: #1d4ed8; border-bottom: 1px solid #cbd5e1; }
table, ul, ol, pre, blockquote { page-break-inside: avoid; }
h2, h3 { page-break-after: avoid; }
table { border-collapse: collapse; width: 100%; }
th, td { border: 1px solid #94a3b8; padding: 3px 5px; text-align: left; }
"""


def render_pdf(markdown_text: str, title: str = "") -> bytes:
    """Render markdown to PDF bytes."""
    pdf = MarkdownPdf(toc_level=2)
    pdf.add_section(
        Section(
            markdown_text,
            paper_size=PAPER_SIZE,
            borders=(BORDER_PT, BORDER_PT, -BORDER_PT, -BORDER_PT),
        ),
        user_css=PDF_CSS,
    )
    if title:
        pdf.meta["title"] = title
    with tempfile.TemporaryDirectory() as tmp:
        out_path = Path(tmp) / "template.pdf"
        pdf.save(str(out_path))
        return out_path.read_bytes()


def export_pdf(template: ProjectTemplate) -> ExportArtifact:
    return ExportArtifact(
        filename=export_filename(template.basic_info.name, ".pdf"),
        data=render_pdf(template.to_markdown(), title=template.basic_info.name),
        mime_type="application/pdf",
    )
