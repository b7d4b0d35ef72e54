"""Tag Editor - in-place editing of hardware components / software frameworks.

Per tag: display -> editing -> display. While editing, suggestions are
loading, loaded or empty. Deleting removes the tag from either state.
Suggestions are fetched lazily on the first edit of an entry and cached in
that entry's edit session only.
"""

import itertools
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Union

from agents import GenerationClient
from contracts import TAG_PLACEHOLDERS, ProjectTemplate, TechKind


# Distinct per edit session, used for widget keys
_NONCES = itertools.count(1)


class TagState(str, Enum):
    DISPLAY = "display"
    EDITING = "editing"


class SuggestionStatus(str, Enum):
    LOADING = "loading"
    LOADED = "loaded"
    EMPTY = "empty"


@dataclass
class EditSession:
    """One open editor. The suggestion cache lives and dies with it."""
    index: int
    draft: str
    suggestions: List[str] = field(default_factory=list)
    status: SuggestionStatus = SuggestionStatus.LOADING
    nonce: int = field(default_factory=lambda: next(_NONCES))


class TagEditor:
    """Edit sessions for one editable list (components or frameworks)."""

    def __init__(self, kind: Union[TechKind, str]):
        self.kind = TechKind(kind)
        self.sessions: Dict[int, EditSession] = {}

    @property
    def placeholder(self) -> str:
        return TAG_PLACEHOLDERS[self.kind]

    def state(self, index: int) -> TagState:
        return TagState.EDITING if index in self.sessions else TagState.DISPLAY

    def session(self, index: int) -> Optional[EditSession]:
        return self.sessions.get(index)

    def start_edit(self, index: int, template: ProjectTemplate) -> EditSession:
        """Open the editor on a tag, pre-filled with its current value."""
        tags = template.tags(self.kind)
        if not 0 <= index < len(tags):
            raise IndexError(f"No {self.kind.value} tag at index {index}")
        if index not in self.sessions:
            self.sessions[index] = EditSession(index=index, draft=tags[index])
        return self.sessions[index]

    def load_suggestions(
        self,
        index: int,
        template: ProjectTemplate,
        client: GenerationClient,
        refresh: bool = False,
    ) -> List[str]:
        """Fetch suggestions once per session, or again when ``refresh`` is set."""
        session = self.sessions.get(index)
        if session is None:
            raise KeyError(f"{self.kind.value} tag {index} is not being edited")
        if session.status != SuggestionStatus.LOADING and not refresh:
            return session.suggestions

        session.status = SuggestionStatus.LOADING
        item = template.tags(self.kind)[index]
        session.suggestions = client.get_alternatives(self.kind, item, template.basic_info.name)
        session.status = SuggestionStatus.LOADED if session.suggestions else SuggestionStatus.EMPTY
        return session.suggestions

    def refresh_suggestions(self, index: int, template: ProjectTemplate, client: GenerationClient) -> List[str]:
        return self.load_suggestions(index, template, client, refresh=True)

    def cancel(self, index: int) -> None:
        self.sessions.pop(index, None)

    def save(self, index: int, value: str, template: ProjectTemplate) -> ProjectTemplate:
        """Replace tag ``index`` with ``value`` and close its editor."""
        value = value.strip()
        if not value:
            raise ValueError("Tag value cannot be empty")
        tags = template.tags(self.kind)
        if not 0 <= index < len(tags):
            raise IndexError(f"No {self.kind.value} tag at index {index}")
        tags[index] = value
        self.sessions.pop(index, None)
        return template.with_tags(self.kind, tags)

    def delete(self, index: int, template: ProjectTemplate) -> ProjectTemplate:
        """Remove tag ``index``; open editors after it shift down by one."""
        tags = template.tags(self.kind)
        if not 0 <= index < len(tags):
            raise IndexError(f"No {self.kind.value} tag at index {index}")
        del tags[index]
        shifted: Dict[int, EditSession] = {}
        for i, session in self.sessions.items():
            if i == index:
                continue
            if i > index:
                session.index = i - 1
            shifted[session.index] = session
        self.sessions = shifted
        return template.with_tags(self.kind, tags)

    def append(self, template: ProjectTemplate) -> ProjectTemplate:
        """Append the placeholder tag and open its editor."""
        tags = template.tags(self.kind) + [self.placeholder]
        updated = template.with_tags(self.kind, tags)
        self.start_edit(len(tags) - 1, updated)
        return updated

    def clear(self) -> None:
        self.sessions = {}
