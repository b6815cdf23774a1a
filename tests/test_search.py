from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from allium.notes.errors import InvalidInput
from allium.notes.models import Note
from allium.notes.search import (
    FindSession,
    Span,
    append_code_block,
    filter_notes,
    find_all_occurrences,
    find_next,
    replace_all_occurrences,
    replace_next,
    wrap_selection,
)


def naive_scan(content: str, query: str) -> list[int]:
    starts = []
    lowered, needle = content.lower(), query.lower()
    index = 0
    while index <= len(lowered) - len(needle):
        if lowered[index:index + len(needle)] == needle:
            starts.append(index)
            index += len(needle)
        else:
            index += 1
    return starts


def test_empty_query_finds_nothing() -> None:
    assert find_all_occurrences(Note(content="anything"), "") == []


def test_matches_are_case_insensitive_and_ordered() -> None:
    note = Note(content="Cat, cat and CAT.")
    spans = find_all_occurrences(note, "cAt")
    assert spans == [Span(0, 3), Span(5, 8), Span(13, 16)]
    assert [span.slice(note.content) for span in spans] == ["Cat", "cat", "CAT"]


def test_overlapping_matches_are_not_reported() -> None:
    assert find_all_occurrences(Note(content="aaaa"), "aa") == [Span(0, 2), Span(2, 4)]
    assert find_all_occurrences(Note(content="aaa"), "aa") == [Span(0, 2)]


def test_regex_metacharacters_are_literal() -> None:
    assert find_all_occurrences(Note(content="a.b axb (a.b)"), "a.b") == [Span(0, 3), Span(9, 12)]


@pytest.mark.parametrize(
    ("content", "query"),
    [
        ("Hello hello HELLO", "hello"),
        ("abababab", "aba"),
        ("no match here", "zzz"),
        ("Mixed CASE mixed case", "Case"),
        ("", "x"),
    ],
)
def test_find_matches_naive_scan(content: str, query: str) -> None:
    spans = find_all_occurrences(Note(content=content), query)
    assert [span.start for span in spans] == naive_scan(content, query)


def test_replace_all_returns_copy() -> None:
    note = Note(title="t", content="Foo bar FOO baz foo")
    replaced = replace_all_occurrences(note, "foo", "qux")
    assert replaced.content == "qux bar qux baz qux"
    assert replaced.id == note.id
    assert note.content == "Foo bar FOO baz foo"
    assert find_all_occurrences(replaced, "foo") == []


def test_replace_all_treats_replacement_literally() -> None:
    replaced = replace_all_occurrences(Note(content="path"), "path", r"C:\new\1")
    assert replaced.content == r"C:\new\1"


def test_replace_all_with_empty_query_is_unchanged() -> None:
    note = Note(content="same")
    assert replace_all_occurrences(note, "", "x") == note


def test_replace_next_only_touches_first_match() -> None:
    assert replace_next("one ONE one", "one", "1") == "1 ONE one"
    assert replace_next("one", "", "1") == "one"
    assert replace_next("one", "two", "2") == "one"


def test_find_next_wraps() -> None:
    content = "alpha beta alpha"
    assert find_next(content, "alpha") == Span(0, 5)
    assert find_next(content, "alpha", start=1) == Span(11, 16)
    assert find_next(content, "alpha", start=12) == Span(0, 5)
    assert find_next(content, "alpha", start=12, wrap=False) is None
    assert find_next(content, "") is None


def test_find_session_cycles() -> None:
    session = FindSession("x-x-x", "X")
    assert session.count == 3
    assert session.current is None
    assert session.next() == Span(0, 1)
    assert session.next() == Span(2, 3)
    assert session.next() == Span(4, 5)
    assert session.next() == Span(0, 1)
    assert session.previous() == Span(4, 5)
    assert FindSession("abc", "").next() is None


def test_filter_notes_checks_title_and_content() -> None:
    notes = [Note(title="Recipes", content="flour"), Note(title="Trip", content="Pack FLOUR?"), Note(title="Work")]
    assert [note.title for note in filter_notes(notes, "flour")] == ["Recipes", "Trip"]
    assert [note.title for note in filter_notes(notes, "recipe")] == ["Recipes"]
    assert filter_notes(notes, "") == notes


def test_wrap_selection() -> None:
    assert wrap_selection("make this bold", Span(5, 9), "**", "**") == "make **this** bold"
    assert wrap_selection("unchanged", None, "*", "*") == "unchanged"
    assert wrap_selection("", Span(0, 0), "*", "*") == "**"
    with pytest.raises(InvalidInput):
        wrap_selection("short", Span(2, 10), "*", "*")


def test_append_code_block() -> None:
    assert append_code_block("intro") == "intro\n```\n// Your code here\n```"
