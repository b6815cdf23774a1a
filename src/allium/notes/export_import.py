"""Local export of notes as markdown files and zip archives, and text import."""

from __future__ import annotations

import re
import tempfile
import time
import zipfile
from pathlib import Path
from typing import Iterable, Optional, Set

from .. import config
from ..data_paths import exports_dir
from ..logger import configure_logging
from .errors import ExportError, NoteImportError
from .models import UNTITLED, Note

_LOG = configure_logging()

NOTE_SUFFIX = ".md"

_ILLEGAL_FILENAME_CHARS = re.compile(r'[<>:"/\\|?*\x00-\x1f\x7f]')


def sanitize_title(title: str) -> str:
    """Filesystem-safe file stem: path-illegal characters dropped, spaces to underscores."""
    stem = _ILLEGAL_FILENAME_CHARS.sub("", title).replace(" ", "_")
    if not stem.strip("."):
        return UNTITLED
    return stem


def unique_filename(stem: str, used: Set[str], suffix: str = NOTE_SUFFIX) -> str:
    """Reserve ``stem + suffix`` in ``used``, appending ``_2``, ``_3``... on collision."""
    candidate = f"{stem}{suffix}"
    counter = 2
    while candidate in used:
        candidate = f"{stem}_{counter}{suffix}"
        counter += 1
    used.add(candidate)
    return candidate


def _write_text(path: Path, text: str) -> None:
    with path.open("w", encoding="utf-8", newline="") as handle:
        handle.write(text)


class ExportImportManager:
    """Writes notes out as ``.md`` files or a single archive and reads them back."""

    def __init__(self, export_root: Optional[Path] = None, archive_name: Optional[str] = None) -> None:
        self._export_root = export_root
        self.archive_name = archive_name or config.ARCHIVE_NAME

    @property
    def export_root(self) -> Path:
        if self._export_root is None:
            return exports_dir()
        self._export_root.mkdir(parents=True, exist_ok=True)
        return self._export_root

    def export_note(self, note: Note) -> Path:
        stem = sanitize_title(note.display_title(UNTITLED))
        stamp = time.time_ns() // 1_000_000
        try:
            destination = self.export_root / f"{stem}_{stamp}{NOTE_SUFFIX}"
            _write_text(destination, note.content)
        except (OSError, ValueError) as exc:
            raise ExportError(str(exc)) from exc
        _LOG.info("Exported note %s to %s", note.id, destination)
        return destination

    def export_all(self, notes: Iterable[Note]) -> Path:
        """Write every note into a fresh staging directory and zip it up."""
        try:
            root = self.export_root
            staging = Path(tempfile.mkdtemp(prefix="notes-", dir=root))
            used: Set[str] = set()
            count = 0
            for note in notes:
                filename = unique_filename(sanitize_title(note.display_title(UNTITLED)), used)
                _write_text(staging / filename, note.content)
                count += 1
            archive = root / self.archive_name
            with zipfile.ZipFile(archive, "w", compression=zipfile.ZIP_DEFLATED) as bundle:
                for path in sorted(staging.iterdir()):
                    bundle.write(path, arcname=path.name)
        except (OSError, ValueError, zipfile.LargeZipFile) as exc:
            raise ExportError(str(exc)) from exc
        _LOG.info("Exported %s notes to %s", count, archive)
        return archive

    def import_note(self, source: Path) -> Note:
        source = Path(source)
        try:
            with source.open("r", encoding="utf-8", newline="") as handle:
                content = handle.read()
        except PermissionError as exc:
            raise NoteImportError("Access denied") from exc
        except FileNotFoundError as exc:
            raise NoteImportError(f"File not found: {source.name}") from exc
        except UnicodeDecodeError as exc:
            raise NoteImportError(f"{source.name} is not valid UTF-8 text") from exc
        except OSError as exc:
            raise NoteImportError(exc.strerror or str(exc)) from exc
        note = Note(title=source.stem, content=content)
        _LOG.info("Imported note %s from %s", note.id, source)
        return note


__all__ = ["ExportImportManager", "sanitize_title", "unique_filename"]
