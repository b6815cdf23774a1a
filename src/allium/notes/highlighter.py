"""Lexical markdown highlighting for the note editor.

This is a best-effort pass, not a markdown parser. Each rule is matched
against the original text and overwrites the style attributes it names on
every matched range, so the last rule in ``RULES`` wins where matches overlap.
"""

from __future__ import annotations

import html
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Pattern, Sequence, Tuple

BODY_SIZE = 17
HEADING_SIZE = 24
CODE_SIZE = 15

HEADING_COLOR = "#3584e4"
TEXT_COLOR = "#1e1e1e"
CODE_BACKGROUND = "#ebebed"


@dataclass(frozen=True, slots=True)
class Font:
    family: str
    size: int
    bold: bool = False
    italic: bool = False

    def description(self) -> str:
        """Pango font description, e.g. ``Sans Bold 24``."""
        parts = [self.family]
        if self.bold:
            parts.append("Bold")
        if self.italic:
            parts.append("Italic")
        parts.append(str(self.size))
        return " ".join(parts)


@dataclass(frozen=True, slots=True)
class Style:
    font: Font
    foreground: Optional[str] = None
    background: Optional[str] = None

    def merged(self, attributes: Mapping[str, Any]) -> "Style":
        return Style(
            font=attributes.get("font", self.font),
            foreground=attributes.get("foreground", self.foreground),
            background=attributes.get("background", self.background),
        )


@dataclass(frozen=True, slots=True)
class StyledRun:
    start: int
    end: int
    style: Style


@dataclass(frozen=True, slots=True)
class HighlightRule:
    name: str
    pattern: Pattern[str]
    attributes: Mapping[str, Any]


BASE_STYLE = Style(font=Font("Monospace", BODY_SIZE), foreground=TEXT_COLOR)

_CODE_ATTRIBUTES = {"background": CODE_BACKGROUND, "font": Font("Monospace", CODE_SIZE)}

RULES: Tuple[HighlightRule, ...] = (
    HighlightRule("bold", re.compile(r"\*\*(.*?)\*\*"), {"font": Font("Sans", BODY_SIZE, bold=True)}),
    HighlightRule("italic", re.compile(r"\*(.*?)\*"), {"font": Font("Sans", BODY_SIZE, italic=True)}),
    HighlightRule(
        "heading",
        re.compile(r"#{1,6}[ \t](.*?)$", re.MULTILINE),
        {"font": Font("Sans", HEADING_SIZE, bold=True), "foreground": HEADING_COLOR},
    ),
    HighlightRule("code_block", re.compile(r"`{3}.*?`{3}", re.DOTALL), _CODE_ATTRIBUTES),
    HighlightRule("inline_code", re.compile(r"`(.*?)`"), _CODE_ATTRIBUTES),
)


class HighlightedText:
    """The source text plus its styled runs, covering every character once."""

    def __init__(self, text: str, runs: List[StyledRun]) -> None:
        self.text = text
        self.runs = runs

    def style_at(self, index: int) -> Style:
        if not 0 <= index < len(self.text):
            raise IndexError(index)
        for run in self.runs:
            if run.start <= index < run.end:
                return run.style
        raise IndexError(index)  # pragma: no cover - runs cover the text

    def to_markup(self) -> str:
        """Pango markup suitable for ``Gtk.TextBuffer.insert_markup``."""
        chunks: List[str] = []
        for run in self.runs:
            escaped = html.escape(self.text[run.start:run.end], quote=False)
            attrs = [f'font_desc="{run.style.font.description()}"']
            if run.style.foreground:
                attrs.append(f'foreground="{run.style.foreground}"')
            if run.style.background:
                attrs.append(f'background="{run.style.background}"')
            chunks.append(f"<span {' '.join(attrs)}>{escaped}</span>")
        return "".join(chunks)


class SyntaxHighlighter:
    def __init__(self, rules: Sequence[HighlightRule] = RULES, base_style: Style = BASE_STYLE) -> None:
        self.rules = tuple(rules)
        self.base_style = base_style

    def highlight(self, text: str) -> HighlightedText:
        overrides: List[Dict[str, Any]] = [{} for _ in text]
        for rule in self.rules:
            for match in rule.pattern.finditer(text):
                for index in range(match.start(), match.end()):
                    overrides[index].update(rule.attributes)
        return HighlightedText(text, self._coalesce(overrides))

    def _coalesce(self, overrides: List[Dict[str, Any]]) -> List[StyledRun]:
        runs: List[StyledRun] = []
        start = 0
        for index in range(1, len(overrides) + 1):
            if index < len(overrides) and overrides[index] == overrides[start]:
                continue
            runs.append(StyledRun(start, index, self.base_style.merged(overrides[start])))
            start = index
        return runs


__all__ = [
    "BASE_STYLE",
    "Font",
    "HighlightRule",
    "HighlightedText",
    "RULES",
    "Style",
    "StyledRun",
    "SyntaxHighlighter",
]
