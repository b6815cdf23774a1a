"""Markdown rendering helpers for note preview."""

from __future__ import annotations

import html
import importlib
from functools import cached_property

from ..logger import configure_logging

_LOG = configure_logging()


class MarkdownRenderer:
    @cached_property
    def _converter(self):
        markdown2 = importlib.import_module("markdown2")
        return markdown2.Markdown(extras=["fenced-code-blocks", "tables", "strike", "task_list"])

    def render(self, text: str) -> str:
        converter = self._converter
        try:
            return converter.convert(text)
        except Exception:
            _LOG.exception("Markdown conversion failed; showing plain text")
            return f"<pre>{html.escape(text)}</pre>"
