"""Whole-collection persistence of notes in a key-value store."""

from __future__ import annotations

import json
from datetime import UTC, datetime
from typing import Iterable, List, Optional

from .. import config
from ..db import KeyValueStore
from ..logger import configure_logging
from .errors import LoadError, SaveError
from .models import Note

_LOG = configure_logging()


def sort_notes(notes: Iterable[Note]) -> List[Note]:
    """Pinned notes first, newest first within each group."""
    by_date = sorted(notes, key=lambda note: note.date, reverse=True)
    return sorted(by_date, key=lambda note: not note.is_pinned)


class NoteStore:
    """Serializes the full note collection as one JSON blob under a fixed key."""

    def __init__(self, store: KeyValueStore, key: Optional[str] = None) -> None:
        self._store = store
        self.key = key or config.NOTES_KEY

    def save(self, notes: Iterable[Note]) -> None:
        try:
            payload = json.dumps([note.to_dict() for note in notes], ensure_ascii=False)
            self._store.set_value(self.key, payload)
        except Exception as exc:
            raise SaveError(str(exc)) from exc
        _LOG.debug("Saved note collection under %r", self.key)

    def load(self) -> List[Note]:
        blob = self._store.get_value(self.key)
        if blob is None:
            # first run: nothing has been saved yet
            return []
        try:
            entries = json.loads(blob)
            if not isinstance(entries, list):
                raise TypeError(f"expected a list of notes, got {type(entries).__name__}")
            notes = [Note.from_dict(entry) for entry in entries]
        except (ValueError, KeyError, TypeError, OverflowError) as exc:
            raise LoadError(str(exc)) from exc
        return sort_notes(notes)

    def backup_corrupt_blob(self) -> Optional[str]:
        """Copy the stored blob aside; returns the backup key, if anything was stored."""
        blob = self._store.get_value(self.key)
        if blob is None:
            return None
        timestamp = datetime.now(UTC).strftime("%Y%m%d-%H%M%S")
        backup_key = f"{self.key}.corrupt-{timestamp}"
        self._store.set_value(backup_key, blob)
        _LOG.warning("Backed up unreadable note collection to %r", backup_key)
        return backup_key

    # ------------------------------------------------------------------
    # Onboarding flag
    # ------------------------------------------------------------------
    def has_completed_onboarding(self) -> bool:
        value = self._store.get_value(config.ONBOARDING_KEY)
        return value == "true"

    def set_onboarding_completed(self, completed: bool = True) -> None:
        self._store.set_value(config.ONBOARDING_KEY, "true" if completed else "false")


__all__ = ["NoteStore", "sort_notes"]
