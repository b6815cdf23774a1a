"""Data model for notes."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from typing import Any, Dict

UNTITLED = "Untitled"
NEW_NOTE = "New Note"


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _new_id() -> str:
    return str(uuid.uuid4())


def _parse_date(value: Any) -> datetime:
    if isinstance(value, bool):
        raise TypeError("note date must be a timestamp, not a boolean")
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value, UTC)
        except (OverflowError, OSError) as exc:
            raise ValueError(f"note date out of range: {value!r}") from exc
    if isinstance(value, str):
        parsed = datetime.fromisoformat(value)
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=UTC)
        return parsed
    raise TypeError(f"unsupported note date: {value!r}")


@dataclass(frozen=True, slots=True)
class Note:
    id: str = field(default_factory=_new_id)
    title: str = ""
    content: str = ""
    date: datetime = field(default_factory=_utcnow)
    is_pinned: bool = False

    def display_title(self, fallback: str = NEW_NOTE) -> str:
        return self.title if self.title else fallback

    def copy(self, **changes: Any) -> "Note":
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "date": self.date.isoformat(),
            "isPinned": self.is_pinned,
        }

    @classmethod
    def from_dict(cls, entry: Dict[str, Any]) -> "Note":
        if not isinstance(entry, dict):
            raise TypeError(f"note entry must be an object, got {type(entry).__name__}")
        note_id = entry["id"]
        title = entry.get("title", "")
        content = entry.get("content", "")
        pinned = entry.get("isPinned", False)
        if not isinstance(note_id, str) or not note_id:
            raise ValueError("note id must be a non-empty string")
        if not isinstance(title, str) or not isinstance(content, str):
            raise TypeError("note title and content must be strings")
        if not isinstance(pinned, bool):
            raise TypeError("isPinned must be a boolean")
        return cls(
            id=note_id,
            title=title,
            content=content,
            date=_parse_date(entry["date"]),
            is_pinned=pinned,
        )


__all__ = ["NEW_NOTE", "Note", "UNTITLED"]
