"""Note collection ownership, mutation and autosave."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Tuple

from ..db import Database, KeyValueStore
from ..logger import configure_logging
from . import search
from .dev_seed import seed_if_requested
from .errors import LoadError, NotesError, SaveError
from .export_import import ExportImportManager
from .models import Note
from .persistence import NoteStore, sort_notes
from .search import Span

_LOG = configure_logging()


class NoteManager:
    """Owns the note collection and persists it after every mutation.

    Save and load failures never escape: they are logged and kept in
    ``last_error`` for the shell to report. Export and import failures are
    raised to the caller.
    """

    def __init__(
        self,
        store: Optional[KeyValueStore] = None,
        exporter: Optional[ExportImportManager] = None,
    ) -> None:
        if store is None:
            database = Database()
            database.initialise()
            store = database
        self.persistence = NoteStore(store)
        self.exporter = exporter or ExportImportManager()
        self.last_error: Optional[NotesError] = None
        self.backup_key: Optional[str] = None
        self._notes: List[Note] = []
        self.load_notes()
        seed_if_requested(self)

    @property
    def notes(self) -> Tuple[Note, ...]:
        return tuple(self._notes)

    def __len__(self) -> int:
        return len(self._notes)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------
    def save_notes(self) -> None:
        try:
            self.persistence.save(self._notes)
        except SaveError as exc:
            _LOG.exception("Could not save %s notes", len(self._notes))
            self.last_error = exc

    def load_notes(self) -> None:
        try:
            self._notes = self.persistence.load()
        except LoadError as exc:
            _LOG.exception("Stored notes are unreadable; starting with an empty collection")
            self.last_error = exc
            self._notes = []
            try:
                self.backup_key = self.persistence.backup_corrupt_blob()
            except Exception:
                _LOG.exception("Could not back up unreadable notes")
            return
        _LOG.info("Loaded %s notes", len(self._notes))

    def clear_error(self) -> None:
        self.last_error = None

    # ------------------------------------------------------------------
    # Collection operations
    # ------------------------------------------------------------------
    def add_note(self) -> Note:
        note = Note()
        self._notes.insert(0, note)
        self.save_notes()
        return note

    def add_imported_note(self, note: Note) -> Note:
        """Insert at the front; a note whose id is already held replaces that entry."""
        index = self._index_of(note.id)
        if index is None:
            self._notes.insert(0, note)
        else:
            self._notes[index] = note
        self.save_notes()
        return note

    def delete_note_at(self, index: int) -> None:
        del self._notes[index]
        self.save_notes()

    def delete_note(self, note_id: str) -> None:
        index = self._index_of(note_id)
        if index is None:
            _LOG.debug("Delete requested for unknown note %s", note_id)
            return
        self.delete_note_at(index)

    def update_note(self, note: Note) -> bool:
        """Replace the stored note with the same id; unknown ids are ignored."""
        index = self._index_of(note.id)
        if index is None:
            _LOG.debug("Update requested for unknown note %s", note.id)
            return False
        self._notes[index] = note
        self.save_notes()
        return True

    def toggle_pin(self, note_id: str) -> Optional[Note]:
        note = self.get_note(note_id)
        if note is None:
            return None
        pinned = note.copy(is_pinned=not note.is_pinned)
        self.update_note(pinned)
        return pinned

    def get_note(self, note_id: str) -> Optional[Note]:
        index = self._index_of(note_id)
        return None if index is None else self._notes[index]

    def sort(self) -> None:
        self._notes = sort_notes(self._notes)

    def filter_notes(self, query: str) -> List[Note]:
        return search.filter_notes(self._notes, query)

    # ------------------------------------------------------------------
    # Find/replace
    # ------------------------------------------------------------------
    def find_all_occurrences(self, note: Note, query: str) -> List[Span]:
        return search.find_all_occurrences(note, query)

    def replace_all_occurrences(self, note: Note, query: str, replacement: str) -> Note:
        return search.replace_all_occurrences(note, query, replacement)

    # ------------------------------------------------------------------
    # Export/import
    # ------------------------------------------------------------------
    def export_note(self, note: Note) -> Path:
        return self.exporter.export_note(note)

    def export_all_notes(self) -> Path:
        return self.exporter.export_all(self._notes)

    def import_note(self, source: Path) -> Note:
        return self.exporter.import_note(source)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _index_of(self, note_id: str) -> Optional[int]:
        for index, note in enumerate(self._notes):
            if note.id == note_id:
                return index
        return None


__all__ = ["NoteManager"]
