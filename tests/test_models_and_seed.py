from __future__ import annotations

import dataclasses
import sys
import uuid
from datetime import UTC, datetime
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from allium import config
from allium.db import MemoryStore
from allium.notes import dev_seed
from allium.notes.manager import NoteManager
from allium.notes.models import NEW_NOTE, UNTITLED, Note


def test_new_note_defaults() -> None:
    note = Note()
    uuid.UUID(note.id)
    assert note.title == ""
    assert note.content == ""
    assert note.is_pinned is False
    assert note.date.tzinfo is not None
    assert Note().id != note.id


def test_notes_are_immutable() -> None:
    note = Note(title="Fixed")
    with pytest.raises(dataclasses.FrozenInstanceError):
        note.title = "Changed"  # type: ignore[misc]
    assert note.copy(title="Changed").title == "Changed"
    assert note.title == "Fixed"


def test_display_title() -> None:
    assert Note().display_title() == NEW_NOTE
    assert Note().display_title(UNTITLED) == UNTITLED
    assert Note(title="Kept").display_title(UNTITLED) == "Kept"


def test_equality_covers_all_fields() -> None:
    date = datetime(2025, 1, 1, tzinfo=UTC)
    note = Note(id="n", title="a", content="b", date=date)
    assert note == Note(id="n", title="a", content="b", date=date)
    assert note != note.copy(is_pinned=True)


def test_from_dict_rejects_bad_types() -> None:
    with pytest.raises(TypeError):
        Note.from_dict({"id": "n", "date": "2025-01-01T00:00:00", "isPinned": "yes"})
    with pytest.raises(TypeError):
        Note.from_dict({"id": "n", "date": True})
    with pytest.raises(ValueError):
        Note.from_dict({"id": "", "date": 0})
    with pytest.raises(ValueError):
        Note.from_dict({"id": "n", "date": 1e20})


def test_naive_iso_dates_are_utc() -> None:
    note = Note.from_dict({"id": "n", "date": "2025-05-15T10:00:00"})
    assert note.date == datetime(2025, 5, 15, 10, 0, tzinfo=UTC)


def test_seed_only_with_dev_profile(monkeypatch) -> None:
    monkeypatch.setattr(config, "DEV_PROFILE_ENABLED", False)
    manager = NoteManager(store=MemoryStore())
    dev_seed.seed_if_requested(manager)
    assert len(manager) == 0

    monkeypatch.setattr(config, "DEV_PROFILE_ENABLED", True)
    dev_seed.seed_if_requested(manager)
    assert [note.title for note in manager.notes] == ["Welcome", "Shopping list"]
    dev_seed.seed_if_requested(manager)
    assert len(manager) == 2


def test_manager_seeds_empty_collection_on_construction(monkeypatch) -> None:
    monkeypatch.setattr(config, "DEV_PROFILE_ENABLED", True)
    store = MemoryStore()
    manager = NoteManager(store=store)
    assert [note.title for note in manager.notes] == ["Welcome", "Shopping list"]
    assert manager.notes[0].is_pinned

    reopened = NoteManager(store=store)
    assert len(reopened) == 2
