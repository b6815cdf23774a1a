"""Development fixtures for offline UI testing."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

from .. import config
from ..logger import configure_logging
from .models import Note

if TYPE_CHECKING:  # pragma: no cover - type checking only
    from .manager import NoteManager

_LOG = configure_logging()


def seed_if_requested(notes: "NoteManager") -> None:
    if not config.DEV_PROFILE_ENABLED:
        return
    if len(notes):
        _LOG.info("Dev profile requested but notes already exist; skipping seed")
        return

    now = datetime.now(UTC)
    notes.add_imported_note(
        Note(
            title="Shopping list",
            content="- eggs\n- **coffee**\n- bread",
            date=now - timedelta(days=2),
        )
    )
    notes.add_imported_note(
        Note(
            title="Welcome",
            content="# Welcome to Allium\n\nWrite in *markdown*, pin what matters, and use `Find & Replace`.",
            date=now,
            is_pinned=True,
        )
    )
    _LOG.info("Seeded development notes at %s", now.isoformat())
