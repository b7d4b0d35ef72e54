"""Request contracts - what the form hands to the generation client."""

from pydantic import BaseModel, Field
from typing import List, Optional


class InlineData(BaseModel):
    """Binary file content embedded directly in a generation request."""
    data: str = Field(..., description="Base64-encoded file bytes")
    mime_type: str = Field(..., description="MIME type, e.g. image/png")


class FileInput(BaseModel):
    """An uploaded file. Only images carry their bytes; others are names only."""
    name: str = Field(...)
    inline_data: Optional[InlineData] = Field(None)

    @property
    def is_inline(self) -> bool:
        return self.inline_data is not None


class GenerateInput(BaseModel):
    """Input for a full template generation."""
    functional_req: str = Field("", description="Functional requirement text")
    tech_req: str = Field("", description="Technical constraints / indicators")
    team_size: str = Field("", description="Team size bucket, e.g. '6-10人'")
    duration: str = Field("", description="Planned duration in months")
    files: List[FileInput] = Field(default_factory=list)

    def has_content(self) -> bool:
        """True when there is something to plan from."""
        return bool(self.functional_req.strip()) or bool(self.files)

    @property
    def attachments(self) -> List[InlineData]:
        return [f.inline_data for f in self.files if f.inline_data is not None]
