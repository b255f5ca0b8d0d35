r"""Discover Markdown task documents and derive their titles and ordinals.

Task documents live in a flat directory. Each one is read once, titled from
its first level-one heading (or its filename when it has none), and numbered
from any leading digits in its filename. Discovery order is plain string order
on the filename, so ``10-deploy.md`` sorts before ``2-build.md``.

Example
-------
>>> from workshop_pages.documents import extract_title, parse_ordinal
>>> extract_title("# Hello Actions\nBody", "01-hello.md")
'Hello Actions'
>>> parse_ordinal("007-intro.md")
7
"""

from __future__ import annotations

import dataclasses as dc
import re
import typing as typ

from ._constants import MARKDOWN_SUFFIX

if typ.TYPE_CHECKING:
    from pathlib import Path

TITLE_PATTERN = re.compile(r"^#[ \t]+(.+)$", re.MULTILINE)
ORDINAL_PATTERN = re.compile(r"^([0-9]+)")


@dc.dataclass(frozen=True, slots=True)
class SourceDocument:
    """A Markdown task document read from the task directory.

    Attributes
    ----------
    filename : str
        Name of the file within the task directory, e.g. ``"03-setup.md"``.
    markdown : str
        Raw Markdown content.
    title : str
        First level-one heading, or the filename without its extension.
    ordinal : int or None
        Leading numeric prefix of the filename, if any.
    """

    filename: str
    markdown: str
    title: str
    ordinal: int | None

    @classmethod
    def from_path(cls, path: Path) -> SourceDocument:
        """Read ``path`` and derive the document's title and ordinal."""
        markdown = path.read_text(encoding="utf-8", errors="replace")
        return cls(
            filename=path.name,
            markdown=markdown,
            title=extract_title(markdown, path.name),
            ordinal=parse_ordinal(path.name),
        )


def _strip_extension(filename: str) -> str:
    stem, dot, _suffix = filename.rpartition(".")
    return stem if dot and stem else filename


def extract_title(markdown_text: str, filename: str) -> str:
    """Return the first level-one heading, falling back to the filename stem."""
    match = TITLE_PATTERN.search(markdown_text)
    if match:
        title = match.group(1).strip()
        if title:
            return title
    return _strip_extension(filename)


def parse_ordinal(filename: str) -> int | None:
    """Return the leading digits of ``filename`` as an integer, if present."""
    match = ORDINAL_PATTERN.match(filename)
    return int(match.group(1)) if match else None


def discover_documents(task_dir: Path) -> list[SourceDocument]:
    """Read every Markdown document in ``task_dir`` in lexicographic order.

    Parameters
    ----------
    task_dir : Path
        Flat directory holding ``*.md`` task documents. Subdirectories and
        files with other extensions are ignored.

    Returns
    -------
    list[SourceDocument]
        Documents sorted by filename using plain string comparison.
    """
    paths = [
        path
        for path in task_dir.iterdir()
        if path.name.endswith(MARKDOWN_SUFFIX) and path.is_file()
    ]
    return [SourceDocument.from_path(path) for path in sorted(paths, key=_name_key)]


def _name_key(path: Path) -> str:
    return path.name


__all__ = [
    "ORDINAL_PATTERN",
    "TITLE_PATTERN",
    "SourceDocument",
    "discover_documents",
    "extract_title",
    "parse_ordinal",
]
