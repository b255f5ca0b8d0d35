"""Prepare the output tree: reset it, mirror static assets, vendor CSS.

Each helper either completes or raises :class:`SiteBuildError`; there is no
partial-success mode for the reset and asset stages. The vendored stylesheet
is the exception: a missing source file only produces a warning.
"""

from __future__ import annotations

import shutil
import typing as typ

from ._constants import VENDOR_CSS_RELPATH
from .errors import SiteBuildError

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .reporting import BuildReporter


def reset_output_dir(output_dir: Path) -> None:
    """Remove ``output_dir`` if present and recreate it empty.

    Raises
    ------
    SiteBuildError
        If the directory cannot be removed or created.
    """
    try:
        if output_dir.exists():
            shutil.rmtree(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        msg = f"could not reset output directory '{output_dir}': {exc}"
        raise SiteBuildError("reset", msg) from exc


def copy_tree(source: Path, destination: Path) -> list[Path]:
    """Mirror regular files and directories from ``source`` into ``destination``.

    Directories are created before their children; files are copied
    byte-for-byte. Anything that is neither a regular file nor a directory is
    skipped.

    Returns
    -------
    list[Path]
        Destination paths of the copied files.

    Raises
    ------
    SiteBuildError
        If ``source`` is not a directory or a filesystem operation fails.
    """
    if not source.is_dir():
        msg = f"asset source directory '{source}' not found"
        raise SiteBuildError("assets", msg)

    copied: list[Path] = []
    try:
        _copy_children(source, destination, copied)
    except OSError as exc:
        msg = f"could not copy assets from '{source}': {exc}"
        raise SiteBuildError("assets", msg) from exc
    return copied


def _copy_children(source: Path, destination: Path, copied: list[Path]) -> None:
    destination.mkdir(parents=True, exist_ok=True)
    for child in source.iterdir():
        target = destination / child.name
        if child.is_symlink():
            continue
        if child.is_dir():
            _copy_children(child, target, copied)
        elif child.is_file():
            shutil.copyfile(child, target)
            copied.append(target)


def copy_vendor_stylesheet(
    css_source: Path | None, output_dir: Path, reporter: BuildReporter
) -> Path | None:
    """Copy the third-party Markdown stylesheet into ``css/`` of the output.

    Returns the written path, or ``None`` when the source is not configured or
    missing; both cases are reported as warnings rather than failures.

    Raises
    ------
    SiteBuildError
        If an existing stylesheet cannot be copied into the output tree.
    """
    if css_source is None:
        reporter.warn("GitHub markdown CSS path not configured, skipping copy")
        return None
    if not css_source.is_file():
        reporter.warn(f"GitHub markdown CSS not found at '{css_source}'")
        return None
    destination = output_dir / VENDOR_CSS_RELPATH
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(css_source, destination)
    except OSError as exc:
        msg = f"could not copy GitHub markdown CSS to '{destination}': {exc}"
        raise SiteBuildError("assets", msg) from exc
    reporter.item(f"Copied {destination.name}")
    return destination


__all__ = ["copy_tree", "copy_vendor_stylesheet", "reset_output_dir"]
