"""Shared export types."""

import re
from dataclasses import dataclass

_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class ExportArtifact:
    """A downloadable file produced from a template snapshot."""
    filename: str
    data: bytes
    mime_type: str


def export_filename(project_name: str, suffix: str) -> str:
    """Project name with whitespace runs collapsed to underscores, plus suffix."""
    return _WHITESPACE.sub("_", project_name) + suffix
