"""Error taxonomy for the notes core.

Every error is non-fatal to the application: ``description`` carries the
single message shown to the user.
"""

from __future__ import annotations

from typing import Optional


class NotesError(Exception):
    description = "Unknown error"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.description)

    def __str__(self) -> str:
        return self.description


class SaveError(NotesError):
    description = "Failed to save notes"


class LoadError(NotesError):
    description = "Failed to load notes"


class ExportError(NotesError):
    description = "Failed to export note"


class InvalidInput(NotesError):
    description = "Invalid input"


class NoteImportError(NotesError):
    """Reading an external file into a note failed; ``reason`` says why."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)

    @property
    def description(self) -> str:  # type: ignore[override]
        return f"Import failed: {self.reason}"


__all__ = [
    "ExportError",
    "InvalidInput",
    "LoadError",
    "NoteImportError",
    "NotesError",
    "SaveError",
]
