"""Shared dataclasses used by the task page generation pipeline."""

from __future__ import annotations

import dataclasses as dc

from workshop_pages._constants import TASKS_SUBDIR
from workshop_pages.documents import parse_ordinal


@dc.dataclass(frozen=True, slots=True)
class RenderedPage:
    """HTML produced from one task document.

    Attributes
    ----------
    output_filename : str
        Document filename with ``.md`` swapped for ``.html``.
    title : str
        Title derived from the source document.
    body_html : str
        Rendered Markdown fragment placed inside the article container.
    """

    output_filename: str
    title: str
    body_html: str


@dc.dataclass(frozen=True, slots=True)
class PageIndexEntry:
    """Index card data collected for each rendered task page.

    Attributes
    ----------
    filename : str
        Rendered page filename within the ``tasks/`` directory.
    title : str
        Title derived from the source document.
    original_file : str
        Markdown filename the page was generated from.
    """

    filename: str
    title: str
    original_file: str

    @property
    def href(self) -> str:
        """Link to the rendered page relative to the output root."""
        return f"{TASKS_SUBDIR}/{self.filename}"

    @property
    def display_title(self) -> str:
        """Return ``"Task N: title"`` for numbered files, else the bare title."""
        ordinal = parse_ordinal(self.original_file)
        if ordinal is None:
            return self.title
        return f"Task {ordinal}: {self.title}"


__all__ = ["PageIndexEntry", "RenderedPage"]
