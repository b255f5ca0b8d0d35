"""Unit tests for task document discovery, titles, and ordinals.

These tests cover ``workshop_pages.documents``: the first-heading title rule
and its filename fallback, leading-zero ordinal parsing, and the plain string
ordering used when enumerating the task directory.

Usage
-----
Run ``pytest tests/test_documents.py -v``. Only pytest's ``tmp_path`` fixture
is required.
"""

from __future__ import annotations

import typing as typ

import pytest

from workshop_pages.documents import (
    SourceDocument,
    discover_documents,
    extract_title,
    parse_ordinal,
)

if typ.TYPE_CHECKING:
    from pathlib import Path


def test_title_comes_from_first_level_one_heading() -> None:
    """The first ``# `` heading provides the document title."""
    markdown = "Intro line\n\n# My Title\n\n## Later\n\n# Second Title\n"
    actual = extract_title(markdown, "01-intro.md")
    assert actual == "My Title", f"expected 'My Title', got {actual!r}"


def test_title_ignores_deeper_headings() -> None:
    """Second-level headings never count as the page title."""
    actual = extract_title("## Not a title\nBody\n", "03-setup.md")
    assert actual == "03-setup", f"expected filename fallback, got {actual!r}"


@pytest.mark.parametrize("markdown", ["", "#hashtag without space\n", "#   \n"])
def test_title_falls_back_to_filename_stem(markdown: str) -> None:
    """Documents without a usable heading are titled after their filename."""
    actual = extract_title(markdown, "03-setup.md")
    assert actual == "03-setup", f"expected '03-setup', got {actual!r}"


@pytest.mark.parametrize(
    ("filename", "expected"),
    [
        ("007-intro.md", 7),
        ("03-setup.md", 3),
        ("10-y.md", 10),
        ("0-zero.md", 0),
        ("intro.md", None),
        ("v2-notes.md", None),
        ("\u0663-x.md", None),
        ("\uff11-wide.md", None),
    ],
)
def test_parse_ordinal(filename: str, expected: int | None) -> None:
    """Leading digits are parsed as an integer with leading zeros dropped."""
    actual = parse_ordinal(filename)
    assert actual == expected, f"expected {expected!r} for {filename}, got {actual!r}"


def test_source_document_reads_file(tmp_path: Path) -> None:
    """``SourceDocument.from_path`` derives title and ordinal from the file."""
    path = tmp_path / "02-build.md"
    path.write_text("# Build the project\n\nRun the workflow.\n", encoding="utf-8")
    document = SourceDocument.from_path(path)
    assert document.filename == "02-build.md"
    assert document.title == "Build the project"
    assert document.ordinal == 2
    assert "Run the workflow." in document.markdown


def test_discover_documents_sorts_lexicographically(tmp_path: Path) -> None:
    """Filenames sort as strings, so ``10-y.md`` precedes ``2-x.md``."""
    for name in ("2-x.md", "10-y.md", "a-notes.md", "01-first.md"):
        (tmp_path / name).write_text(f"# {name}\n", encoding="utf-8")
    actual = [document.filename for document in discover_documents(tmp_path)]
    assert actual == ["01-first.md", "10-y.md", "2-x.md", "a-notes.md"], (
        f"expected string ordering, got {actual!r}"
    )


def test_discover_documents_skips_other_files(tmp_path: Path) -> None:
    """Only regular ``.md`` files in the top-level directory are discovered."""
    (tmp_path / "01-task.md").write_text("# Task\n", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("ignore me\n", encoding="utf-8")
    (tmp_path / "README.markdown").write_text("# Other\n", encoding="utf-8")
    nested = tmp_path / "drafts.md"
    nested.mkdir()
    (nested / "02-draft.md").write_text("# Draft\n", encoding="utf-8")
    actual = [document.filename for document in discover_documents(tmp_path)]
    assert actual == ["01-task.md"], f"expected only 01-task.md, got {actual!r}"


def test_invalid_utf8_is_replaced(tmp_path: Path) -> None:
    """Undecodable bytes become U+FFFD instead of aborting the read."""
    path = tmp_path / "04-cafe.md"
    path.write_bytes(b"# Caf\xe9\n\nMenu.\n")
    document = SourceDocument.from_path(path)
    assert document.title == "Caf\ufffd", f"unexpected title {document.title!r}"
    assert "Menu." in document.markdown
