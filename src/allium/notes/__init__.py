"""Notes subsystem for Allium."""

from .errors import ExportError, InvalidInput, LoadError, NoteImportError, NotesError, SaveError
from .export_import import ExportImportManager
from .highlighter import HighlightedText, SyntaxHighlighter
from .manager import NoteManager
from .models import Note
from .persistence import NoteStore
from .renderer import MarkdownRenderer
from .search import FindSession, Span

__all__ = [
    "ExportError",
    "ExportImportManager",
    "FindSession",
    "HighlightedText",
    "InvalidInput",
    "LoadError",
    "MarkdownRenderer",
    "Note",
    "NoteImportError",
    "NoteManager",
    "NoteStore",
    "NotesError",
    "SaveError",
    "Span",
    "SyntaxHighlighter",
]
