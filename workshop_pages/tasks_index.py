"""Build and render the workshop ``tasks.html`` index page.

This module takes the :class:`~workshop_pages.generator.PageIndexEntry` list
collected while rendering task documents and produces a single landing page
with one card per task, in the order the documents were processed. Numbered
task files are labelled ``Task N: <title>``.

>>> from pathlib import Path
>>> from workshop_pages.config import SiteChrome
>>> from workshop_pages.tasks_index import TasksIndexBuilder
>>> builder = TasksIndexBuilder(SiteChrome(), Path("dist"))  # doctest: +SKIP
>>> builder.run(entries)  # doctest: +SKIP
PosixPath('dist/tasks.html')

The page uses root-relative chrome links because it lives at the top of the
output tree. The HTML is rendered fully in memory before a single write.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from ._constants import TASKS_INDEX_FILENAME
from .errors import SiteBuildError

if typ.TYPE_CHECKING:  # pragma: no cover - import for type hints only
    from .config import SiteChrome
    from .generator import PageIndexEntry


class TasksIndexBuilder:
    """Render a landing page enumerating every generated task page."""

    def __init__(
        self,
        chrome: SiteChrome,
        output_dir: Path,
        *,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the tasks index builder.

        Parameters
        ----------
        chrome : SiteChrome
            Header, navigation, and footer settings shared by every page.
        output_dir : Path
            Output root that receives ``tasks.html``.
        templates_dir : Path, optional
            Directory containing the Jinja templates. Defaults to the
            ``workshop_pages/templates`` directory when ``None``.
        """
        self.chrome = chrome
        self.output_path = output_dir / TASKS_INDEX_FILENAME
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("tasks_index.jinja")

    def render(self, entries: typ.Sequence[PageIndexEntry]) -> str:
        """Return the index HTML for ``entries``."""
        html = self.template.render(chrome=self.chrome, root="", entries=entries)
        if not html.endswith("\n"):
            html += "\n"
        return html

    def run(self, entries: typ.Sequence[PageIndexEntry]) -> Path:
        """Render the index and write it to ``tasks.html`` in the output root.

        Raises
        ------
        SiteBuildError
            If the index page cannot be written.
        """
        html = self.render(entries)
        try:
            self.output_path.write_text(html, encoding="utf-8")
        except OSError as exc:
            msg = f"could not write tasks index '{self.output_path}': {exc}"
            raise SiteBuildError("index", msg) from exc
        return self.output_path


__all__ = ["TasksIndexBuilder"]
