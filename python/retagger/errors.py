"""Error types raised by Retagger."""

from typing import Optional

from retagger.utils import display_text


class RetaggerError(Exception):
    """Base class for errors that abort a retag run."""

    def __init__(self, message: str, file_path: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.file_path = file_path

    def __str__(self) -> str:
        if self.file_path:
            return display_text(f"{self.message} in file: {self.file_path}")
        return display_text(self.message)


class ScanError(RetaggerError):
    """The directory tree could not be enumerated."""


class ParseError(RetaggerError):
    """The tag header of a file is missing or unreadable."""


class ApplyError(RetaggerError):
    """A modified tag could not be written back to disk."""
