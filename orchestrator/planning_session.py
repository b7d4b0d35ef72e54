"""Planning Session - the application shell's state machine.

Owns the form fields, uploaded files, the loading flag, the current template
(or None) and the current error (or None). Every template change is a whole
value swap; remote failures are caught here and turned into state.
"""

import base64
from typing import Any, Callable, Dict, Iterable, List, Optional, Union

from config import log
from agents import GenerationClient
from contracts import FileInput, GenerateInput, InlineData, ProjectTemplate, TechKind
from exporters import (
    ExportArtifact,
    export_json,
    export_markdown,
    export_pdf,
    export_word,
)
from orchestrator.tag_editor import EditSession, TagEditor

MISSING_INPUT_MESSAGE = "请至少填写功能需求说明或上传文件"
GENERATION_FALLBACK_MESSAGE = "Failed to generate template. Please try again."
DETAIL_PLAN_FAILED_MESSAGE = "生成详细方案失败"


def to_file_input(name: str, mime_type: str, read: Callable[[], bytes]) -> FileInput:
    """Turn an upload into a FileInput.

    Images are base64-encoded for inline transmission. Anything else is kept
    by name only and ``read`` is never called for it.
    """
    if not (mime_type or "").startswith("image/"):
        return FileInput(name=name)
    try:
        data = base64.b64encode(read()).decode("ascii")
    except OSError as e:
        log(f"Error reading file {name}: {e}")
        return FileInput(name=name)
    return FileInput(name=name, inline_data=InlineData(data=data, mime_type=mime_type))


class PlanningSession:
    """State for one browser session.

    Responsibilities:
    - Hold the requirement form and uploads
    - Run generation, at most one at a time
    - Swap in new templates from generation, detail expansion and tag edits
    - Produce exports from the current snapshot
    """

    def __init__(self, client: GenerationClient):
        """Initialize the session.

        Args:
            client: Generation client, built with its credentials already
        """
        self.client = client
        self._clear()

    def _clear(self) -> None:
        self.functional_req = ""
        self.tech_req = ""
        self.team_size = ""
        self.duration = ""
        self.files: List[FileInput] = []

        self.loading = False
        self.template: Optional[ProjectTemplate] = None
        self.error: Optional[str] = None
        self.error_is_validation = False

        self.tech_loading: Optional[TechKind] = None
        self.alert: Optional[str] = None
        self.editors: Dict[TechKind, TagEditor] = {kind: TagEditor(kind) for kind in TechKind}

    # Form

    def add_uploads(self, uploads: Iterable[Any]) -> None:
        """Add uploaded files (anything with name, type and getvalue())."""
        new_files = [to_file_input(u.name, u.type or "", u.getvalue) for u in uploads]
        self.files = self.files + new_files

    def remove_file(self, index: int) -> None:
        self.files = [f for i, f in enumerate(self.files) if i != index]

    def build_input(self) -> GenerateInput:
        return GenerateInput(
            functional_req=self.functional_req,
            tech_req=self.tech_req,
            team_size=self.team_size,
            duration=self.duration,
            files=list(self.files),
        )

    # Generation

    def generate(self) -> bool:
        """Generate a template from the form.

        Returns:
            True if a new template is now in place
        """
        if self.loading:
            return False

        input_data = self.build_input()
        if not input_data.has_content():
            self.error = MISSING_INPUT_MESSAGE
            self.error_is_validation = True
            return False

        self.loading = True
        self.error = None
        self.error_is_validation = False
        self.template = None
        try:
            template = self.client.generate_template(input_data)
        except Exception as e:
            log(f"Template generation failed: {type(e).__name__}: {e}")
            self.error = str(e) or GENERATION_FALLBACK_MESSAGE
            return False
        finally:
            self.loading = False

        self._replace_template(template, reset_editors=True)
        log(f"Generated template '{template.basic_info.name}' with {len(template.phases)} phases")
        return True

    def reset(self) -> None:
        """Clear every field, the uploads and the template in one step."""
        self._clear()

    def dismiss_error(self) -> None:
        self.error = None
        self.error_is_validation = False

    def dismiss_alert(self) -> None:
        self.alert = None

    def _replace_template(self, template: ProjectTemplate, reset_editors: bool = False) -> None:
        self.template = template
        if reset_editors:
            for editor in self.editors.values():
                editor.clear()

    # Detail plans

    def expand_detail(self, kind: Union[TechKind, str]) -> bool:
        """Generate the detail plan for one subsection and merge it in.

        Returns:
            True if the template now carries the new detail plan
        """
        kind = TechKind(kind)
        if self.tech_loading is not None or self.template is None:
            return False
        section = self.template.section(kind)
        if section is None:
            return False

        self.tech_loading = kind
        try:
            detail = self.client.generate_detailed_plan(
                kind,
                section.model_dump_json(by_alias=True, exclude_none=True),
                self.template.basic_info.name,
            )
        except Exception as e:
            log(f"Detail plan ({kind.value}) failed: {type(e).__name__}: {e}")
            self.alert = DETAIL_PLAN_FAILED_MESSAGE
            return False
        finally:
            self.tech_loading = None

        self._replace_template(self.template.with_detailed_plan(kind, detail))
        return True

    # Tags

    def editor(self, kind: Union[TechKind, str]) -> TagEditor:
        return self.editors[TechKind(kind)]

    def edit_tag(self, kind: Union[TechKind, str], index: int) -> EditSession:
        return self.editor(kind).start_edit(index, self._require_template())

    def load_suggestions(self, kind: Union[TechKind, str], index: int, refresh: bool = False) -> List[str]:
        editor = self.editor(kind)
        if refresh:
            return editor.refresh_suggestions(index, self._require_template(), self.client)
        return editor.load_suggestions(index, self._require_template(), self.client)

    def cancel_tag_edit(self, kind: Union[TechKind, str], index: int) -> None:
        self.editor(kind).cancel(index)

    def save_tag(self, kind: Union[TechKind, str], index: int, value: str) -> None:
        self._replace_template(self.editor(kind).save(index, value, self._require_template()))

    def delete_tag(self, kind: Union[TechKind, str], index: int) -> None:
        self._replace_template(self.editor(kind).delete(index, self._require_template()))

    def append_tag(self, kind: Union[TechKind, str]) -> None:
        self._replace_template(self.editor(kind).append(self._require_template()))

    def _require_template(self) -> ProjectTemplate:
        if self.template is None:
            raise RuntimeError("No template has been generated")
        return self.template

    # Exports

    def export_json(self) -> ExportArtifact:
        return export_json(self._require_template())

    def export_word(self) -> ExportArtifact:
        return export_word(self._require_template())

    def export_pdf(self) -> ExportArtifact:
        return export_pdf(self._require_template())

    def export_markdown(self) -> ExportArtifact:
        return export_markdown(self._require_template())
