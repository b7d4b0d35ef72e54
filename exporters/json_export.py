"""JSON export - the aggregate exactly as the backend shaped it."""

from contracts import ProjectTemplate

from .base import ExportArtifact, export_filename


def export_json(template: ProjectTemplate) -> ExportArtifact:
    return ExportArtifact(
        filename=export_filename(template.basic_info.name, "_template.json"),
        data=template.to_json().encode("utf-8"),
        mime_type="application/json",
    )


def load_json(data: str) -> ProjectTemplate:
    """Re-read an exported template."""
    return ProjectTemplate.model_validate_json(data)
