"""High-level orchestration for the workshop static-site build.

The build runs four stages strictly in order:

1. reset the output directory,
2. copy the static asset tree (and the vendored Markdown stylesheet),
3. render each Markdown task document into ``tasks/<name>.html``,
4. write the ``tasks.html`` index when at least one page was rendered.

Failures in the first two stages raise :class:`SiteBuildError`. A missing task
directory only produces a warning and an empty page set.

Example
-------
>>> from pathlib import Path
>>> from workshop_pages.builder import build_site
>>> from workshop_pages.config import BuildConfig
>>> result = build_site(BuildConfig(output_dir=Path("dist")))  # doctest: +SKIP
>>> result.index_path  # doctest: +SKIP
PosixPath('dist/tasks.html')
"""

from __future__ import annotations

import dataclasses as dc
import time
import typing as typ

from .assets import copy_tree, copy_vendor_stylesheet, reset_output_dir
from .config import SiteChrome
from .documents import discover_documents
from .generator import TaskPageGenerator
from .reporting import BuildReporter
from .tasks_index import TasksIndexBuilder

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from .config import BuildConfig
    from .documents import SourceDocument
    from .generator import MarkdownRenderer, PageIndexEntry


@dc.dataclass(slots=True)
class BuildResult:
    """Summary of one completed build.

    Attributes
    ----------
    output_dir : Path
        Root of the generated site.
    copied_assets : list[Path]
        Files mirrored from the asset tree.
    entries : list[PageIndexEntry]
        One entry per rendered task page, in processing order.
    index_path : Path or None
        Location of ``tasks.html``; ``None`` when no documents were rendered.
    """

    output_dir: Path
    copied_assets: list[Path]
    entries: list[PageIndexEntry]
    index_path: Path | None

    @property
    def page_count(self) -> int:
        """Number of task pages generated."""
        return len(self.entries)


class SiteBuilder:
    """Run the reset, asset, render, and index stages for one configuration."""

    def __init__(
        self,
        config: BuildConfig,
        *,
        chrome: SiteChrome | None = None,
        renderer: MarkdownRenderer | None = None,
        sleep: cabc.Callable[[float], None] = time.sleep,
        reporter: BuildReporter | None = None,
    ) -> None:
        """Initialize the builder.

        Parameters
        ----------
        config : BuildConfig
            Asset, task, output, and vendored CSS locations plus the delay.
        chrome : SiteChrome, optional
            Page header, navigation, and footer; defaults to the workshop chrome.
        renderer : MarkdownRenderer, optional
            Markdown backend passed to the page generator.
        sleep : Callable[[float], None], optional
            Called with ``config.build_delay`` before documents are processed.
        reporter : BuildReporter, optional
            Progress sink; defaults to printing on the console.
        """
        self.config = config
        self.chrome = chrome or SiteChrome()
        self.renderer = renderer
        self.sleep = sleep
        self.reporter = reporter or BuildReporter()

    def run(self) -> BuildResult:
        """Build the site and return a summary of what was produced.

        Raises
        ------
        SiteBuildError
            When the output directory cannot be reset or the asset tree is
            missing or cannot be copied.
        """
        output_dir = self.config.output_dir
        self.reporter.step("Building project...")

        self.reporter.step(f"Cleaning {output_dir} directory...")
        reset_output_dir(output_dir)

        self.reporter.step(
            f"Copying files from {self.config.asset_source_dir} to {output_dir}..."
        )
        copied = copy_tree(self.config.asset_source_dir, output_dir)

        self.reporter.step("Copying GitHub markdown CSS...")
        copy_vendor_stylesheet(self.config.css_vendor_path, output_dir, self.reporter)

        entries = self._render_documents()

        index_path = None
        if entries:
            self.reporter.step("Generating tasks index page...")
            index_path = TasksIndexBuilder(self.chrome, output_dir).run(entries)
            self.reporter.item(f"Generated {index_path.name}")

        self.reporter.step("Build completed successfully!")
        self.reporter.step(f"Output directory: {output_dir}")
        self.reporter.step(f"Generated {len(entries)} task pages")
        return BuildResult(
            output_dir=output_dir,
            copied_assets=copied,
            entries=entries,
            index_path=index_path,
        )

    def _render_documents(self) -> list[PageIndexEntry]:
        documents = self._load_documents()
        if documents is None:
            return []
        generator = TaskPageGenerator(
            self.chrome,
            self.config.output_dir,
            renderer=self.renderer,
            reporter=self.reporter,
        )
        return generator.run(documents)

    def _load_documents(self) -> list[SourceDocument] | None:
        task_dir = self.config.task_source_dir
        self.reporter.step(f"Processing markdown files from {task_dir} directory...")
        if not task_dir.is_dir():
            self.reporter.warn(
                f"{task_dir} directory not found, skipping markdown processing"
            )
            return None
        if self.config.build_delay > 0:
            self.sleep(self.config.build_delay)
        return discover_documents(task_dir)


def build_site(
    config: BuildConfig,
    *,
    chrome: SiteChrome | None = None,
    renderer: MarkdownRenderer | None = None,
    sleep: cabc.Callable[[float], None] = time.sleep,
    reporter: BuildReporter | None = None,
) -> BuildResult:
    """Build the site described by ``config``; see :class:`SiteBuilder`."""
    builder = SiteBuilder(
        config, chrome=chrome, renderer=renderer, sleep=sleep, reporter=reporter
    )
    return builder.run()


__all__ = ["BuildResult", "SiteBuilder", "build_site"]
