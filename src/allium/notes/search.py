"""Case-insensitive find/replace over note content.

All matching is literal substring matching with case folded the way ``re``
folds it under ``IGNORECASE``, so offsets always index the original string.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, List, NamedTuple, Optional, Pattern

from .errors import InvalidInput
from .models import Note

CODE_BLOCK_PLACEHOLDER = "\n```\n// Your code here\n```"


class Span(NamedTuple):
    """Half-open ``[start, end)`` range of character offsets."""

    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start

    def slice(self, text: str) -> str:
        return text[self.start:self.end]


def _compile(query: str) -> Pattern[str]:
    return re.compile(re.escape(query), re.IGNORECASE)


def find_spans(content: str, query: str) -> List[Span]:
    if not query:
        return []
    return [Span(*match.span()) for match in _compile(query).finditer(content)]


def find_all_occurrences(note: Note, query: str) -> List[Span]:
    """Non-overlapping matches of ``query`` in ``note.content``, left to right."""
    return find_spans(note.content, query)


def replace_all_occurrences(note: Note, query: str, replacement: str) -> Note:
    """Return a copy of ``note`` with every match replaced; ``note`` is untouched."""
    if not query:
        return note.copy()
    content = _compile(query).sub(lambda _match: replacement, note.content)
    return note.copy(content=content)


def replace_next(content: str, query: str, replacement: str) -> str:
    if not query:
        return content
    return _compile(query).sub(lambda _match: replacement, content, count=1)


def find_next(content: str, query: str, start: int = 0, wrap: bool = True) -> Optional[Span]:
    """First match starting at or after ``start``, optionally wrapping around."""
    if not query:
        return None
    pattern = _compile(query)
    start = max(0, min(start, len(content)))
    match = pattern.search(content, start)
    if match is None and wrap and start > 0:
        match = pattern.search(content)
    if match is None:
        return None
    return Span(*match.span())


@dataclass
class FindSession:
    """Match list plus a cursor, for stepping through results in an editor."""

    content: str
    query: str
    matches: List[Span] = field(init=False)
    index: int = field(init=False, default=-1)

    def __post_init__(self) -> None:
        self.matches = find_spans(self.content, self.query)

    @property
    def count(self) -> int:
        return len(self.matches)

    @property
    def current(self) -> Optional[Span]:
        if self.index < 0 or not self.matches:
            return None
        return self.matches[self.index]

    def next(self) -> Optional[Span]:
        if not self.matches:
            return None
        self.index = (self.index + 1) % len(self.matches)
        return self.matches[self.index]

    def previous(self) -> Optional[Span]:
        if not self.matches:
            return None
        if self.index < 0:
            self.index = len(self.matches) - 1
        else:
            self.index = (self.index - 1) % len(self.matches)
        return self.matches[self.index]


def filter_notes(notes: Iterable[Note], query: str) -> List[Note]:
    """Notes whose title or content contains ``query``, ignoring case."""
    notes = list(notes)
    if not query:
        return notes
    needle = query.casefold()
    return [
        note
        for note in notes
        if needle in note.title.casefold() or needle in note.content.casefold()
    ]


def wrap_selection(content: str, selection: Optional[Span], prefix: str, suffix: str) -> str:
    """Surround the selected range with ``prefix``/``suffix``; no selection is a no-op."""
    if selection is None:
        return content
    start, end = selection
    if start < 0 or end < start or end > len(content):
        raise InvalidInput(f"selection {start}..{end} outside text of length {len(content)}")
    return f"{content[:start]}{prefix}{content[start:end]}{suffix}{content[end:]}"


def append_code_block(content: str) -> str:
    return content + CODE_BLOCK_PLACEHOLDER


__all__ = [
    "FindSession",
    "Span",
    "append_code_block",
    "filter_notes",
    "find_all_occurrences",
    "find_next",
    "find_spans",
    "replace_all_occurrences",
    "replace_next",
    "wrap_selection",
]
