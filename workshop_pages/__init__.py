"""Static-site builder for the GitHub Actions workshop.

This package copies the workshop's static assets into an output tree, renders
each Markdown task document into a standalone HTML page, and writes a
``tasks.html`` index linking them all.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``build_site``: Library entry point running the whole pipeline.

Examples
--------
>>> from workshop_pages import main
>>> main()  # doctest: +SKIP
>>> from workshop_pages import app
>>> app(["build", "--delay", "0"])  # doctest: +SKIP
"""

from __future__ import annotations

from .builder import BuildResult, SiteBuilder, build_site
from .cli import app, main
from .errors import SiteBuildError

__all__ = ["BuildResult", "SiteBuildError", "SiteBuilder", "app", "build_site", "main"]
