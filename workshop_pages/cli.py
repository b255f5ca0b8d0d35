"""Cyclopts CLI entrypoint for building the workshop static site.

The ``pages`` console script defined here resets the output directory, copies
the static asset tree, renders every Markdown task document into HTML, and
writes the ``tasks.html`` index. Typical usage is ``pages build`` locally or
in CI; every option may also be supplied through an ``INPUT_*`` environment
variable.

Examples
--------
Build with the checked-in configuration:

>>> from workshop_pages.cli import main
>>> main()  # doctest: +SKIP

Build into a custom directory without the artificial delay:

>>> from workshop_pages.cli import app
>>> app(["build", "--output-dir", "site", "--delay", "0"])  # doctest: +SKIP
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .builder import build_site
from .config import SiteConfigError, load_site_config
from .errors import SiteBuildError
from .reporting import BuildReporter

DEFAULT_CONFIG = Path("config/site.yaml")

app = App(name="pages", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


@app.command(help="Build the static site from public assets and Markdown tasks.")
def build(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    asset_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the static asset directory", env_var="INPUT_ASSET_DIR"),
    ] = None,
    task_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the Markdown task directory", env_var="INPUT_TASK_DIR"),
    ] = None,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
    css_vendor_path: typ.Annotated[
        Path | None,
        Parameter(
            help="Override the vendored Markdown stylesheet",
            env_var="INPUT_CSS_VENDOR_PATH",
        ),
    ] = None,
    delay: typ.Annotated[
        float | None,
        Parameter(
            help="Seconds to pause before processing Markdown",
            env_var="INPUT_DELAY",
        ),
    ] = None,
) -> None:
    """Build the workshop site described by ``config``.

    Parameters
    ----------
    config : Path, optional
        Path to the ``site.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``). The default path may be absent, in which case the
        built-in defaults apply.
    asset_dir, task_dir, output_dir, css_vendor_path : Path or None, optional
        Override the matching ``build`` setting from the configuration.
    delay : float or None, optional
        Override ``build.delay_seconds``.

    Raises
    ------
    SystemExit
        With status ``1`` when the configuration is invalid or a fatal build
        stage fails.
    """
    reporter = BuildReporter()
    try:
        site_config = load_site_config(config, missing_ok=config == DEFAULT_CONFIG)
    except (FileNotFoundError, SiteConfigError) as exc:
        reporter.error(str(exc))
        raise SystemExit(1) from exc

    overrides = {
        "asset_source_dir": asset_dir,
        "task_source_dir": task_dir,
        "output_dir": output_dir,
        "css_vendor_path": css_vendor_path,
        "build_delay": delay,
    }
    build_config = dc.replace(
        site_config.build,
        **{key: value for key, value in overrides.items() if value is not None},
    )
    if build_config.build_delay < 0:
        reporter.error("delay must not be negative")
        raise SystemExit(1)

    try:
        build_site(build_config, chrome=site_config.chrome, reporter=reporter)
    except SiteBuildError as exc:
        reporter.error(f"{exc} (stage: {exc.stage})")
        raise SystemExit(1) from exc


def main() -> None:
    """Invoke the Cyclopts application that powers the `pages` console command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
