"""Errors raised by the generation client."""

from typing import Optional


class GenerationError(Exception):
    """The backend call failed or returned no usable text."""


class ParseError(GenerationError):
    """The backend text is not JSON of the expected shape."""

    def __init__(self, message: str, raw_text: Optional[str] = None):
        super().__init__(message)
        self.raw_text = raw_text
