"""Exception types raised while loading and building content."""

from __future__ import annotations

from pathlib import Path


class DroidNotesError(Exception):
    """Base class for all Android Notes errors."""


class ContentError(DroidNotesError):
    """A content document could not be read or is invalid."""

    def __init__(self, path: Path | str, message: str):
        self.path = Path(path)
        self.message = message
        super().__init__(f"{self.path}: {message}")


class FrontMatterError(ContentError):
    """The front-matter block of a document is malformed."""
