"""Render Markdown task documents into standalone HTML pages.

:class:`TaskPageGenerator` takes the documents discovered in the task
directory, renders each through a :class:`MarkdownRenderer`, wraps the result
in the shared site chrome, and writes ``tasks/<name>.html`` under the output
root. It returns one :class:`PageIndexEntry` per page, in processing order,
for the index builder.

Example
-------
>>> from pathlib import Path
>>> from workshop_pages.config import SiteChrome
>>> from workshop_pages.documents import discover_documents
>>> from workshop_pages.generator import TaskPageGenerator
>>> generator = TaskPageGenerator(SiteChrome(), Path("dist"))  # doctest: +SKIP
>>> generator.run(discover_documents(Path("tasks")))  # doctest: +SKIP
[PageIndexEntry(filename='01-intro.html', ...)]
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from workshop_pages._constants import HTML_SUFFIX, TASKS_SUBDIR, VENDOR_CSS_RELPATH
from workshop_pages.errors import SiteBuildError
from workshop_pages.reporting import BuildReporter

from .models import PageIndexEntry, RenderedPage
from .renderer import HtmlContentRenderer, MarkdownRenderer

if typ.TYPE_CHECKING:
    from workshop_pages.config import SiteChrome
    from workshop_pages.documents import SourceDocument

PARENT_PREFIX = "../"


def output_filename_for(markdown_filename: str) -> str:
    """Swap the Markdown extension of ``markdown_filename`` for ``.html``."""
    return Path(markdown_filename).with_suffix(HTML_SUFFIX).name


class TaskPageGenerator:
    """Render task documents and write themed HTML pages to ``tasks/``."""

    def __init__(
        self,
        chrome: SiteChrome,
        output_dir: Path,
        *,
        renderer: MarkdownRenderer | None = None,
        templates_dir: Path | None = None,
        reporter: BuildReporter | None = None,
    ) -> None:
        """Initialize the generator with chrome, renderer, and template context.

        Parameters
        ----------
        chrome : SiteChrome
            Header, navigation, and footer settings shared by every page.
        output_dir : Path
            Output root; pages are written to its ``tasks/`` subdirectory.
        renderer : MarkdownRenderer, optional
            Markdown backend; defaults to :class:`HtmlContentRenderer`.
        templates_dir : Path, optional
            Directory containing Jinja templates; defaults to the package
            templates.
        reporter : BuildReporter, optional
            Progress sink; defaults to printing on the console.
        """
        self.chrome = chrome
        self.tasks_dir = output_dir / TASKS_SUBDIR
        self.renderer: MarkdownRenderer = renderer or HtmlContentRenderer()
        self.reporter = reporter or BuildReporter()
        default_templates = Path(__file__).resolve().parents[1] / "templates"
        self.templates_dir = templates_dir or default_templates
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("task_page.jinja")

    def run(self, documents: typ.Sequence[SourceDocument]) -> list[PageIndexEntry]:
        """Render and write every document, returning index entries in order.

        The ``tasks/`` directory is only created when ``documents`` is not
        empty.

        Raises
        ------
        SiteBuildError
            If the ``tasks/`` directory or a page cannot be written.
        """
        if not documents:
            return []
        try:
            self.tasks_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            msg = f"could not create task page directory '{self.tasks_dir}': {exc}"
            raise SiteBuildError("render", msg) from exc

        entries: list[PageIndexEntry] = []
        for document in documents:
            page = self.render_page(document)
            try:
                self.write_page(page)
            except OSError as exc:
                msg = f"could not write task page '{page.output_filename}': {exc}"
                raise SiteBuildError("render", msg) from exc
            self.reporter.item(f"Generated {page.output_filename}")
            entries.append(
                PageIndexEntry(
                    filename=page.output_filename,
                    title=page.title,
                    original_file=document.filename,
                )
            )
        return entries

    def render_page(self, document: SourceDocument) -> RenderedPage:
        """Render ``document`` into a :class:`RenderedPage`."""
        return RenderedPage(
            output_filename=output_filename_for(document.filename),
            title=document.title,
            body_html=self.renderer.render(document.markdown),
        )

    def render_html(self, page: RenderedPage) -> str:
        """Wrap a rendered page in the full HTML document."""
        html = self.template.render(
            page=page,
            chrome=self.chrome,
            root=PARENT_PREFIX,
            vendor_css=VENDOR_CSS_RELPATH.as_posix(),
            pygments_css=getattr(self.renderer, "stylesheet", ""),
        )
        if not html.endswith("\n"):
            html += "\n"
        return html

    def write_page(self, page: RenderedPage) -> Path:
        """Write ``page`` into the ``tasks/`` directory and return its path."""
        output_path = self.tasks_dir / page.output_filename
        output_path.write_text(self.render_html(page), encoding="utf-8")
        return output_path


__all__ = ["TaskPageGenerator", "output_filename_for"]
