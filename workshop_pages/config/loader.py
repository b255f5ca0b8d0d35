"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import (
    _build_chrome,
    _optional_path,
    _parse_delay,
    _require_mapping,
)
from .models import BuildConfig, SiteConfig, SiteConfigError


def load_site_config(path: Path, *, missing_ok: bool = False) -> SiteConfig:
    """Load the YAML configuration describing the build inputs and page chrome.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/site.yaml``).
    missing_ok : bool, optional
        Return the built-in defaults instead of raising when ``path`` does
        not exist.

    Returns
    -------
    SiteConfig
        Parsed configuration with every missing key filled from defaults.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist and ``missing_ok`` is false.
    SiteConfigError
        If the YAML structure or one of its values is invalid.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from workshop_pages.config import load_site_config
    >>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
    >>> config.build.output_dir  # doctest: +SKIP
    PosixPath('dist')
    """
    if not path.exists():
        if missing_ok:
            return SiteConfig()
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise SiteConfigError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    chrome = _build_chrome(_require_mapping(raw.get("site"), "site"))
    build = _build_build_config(_require_mapping(raw.get("build"), "build"))
    return SiteConfig(build=build, chrome=chrome)


def _build_build_config(payload: typ.Mapping[str, typ.Any]) -> BuildConfig:
    """Build a BuildConfig from the ``build`` section, applying defaults."""
    base = BuildConfig()
    return BuildConfig(
        asset_source_dir=_optional_path(payload.get("asset_dir"), None)
        or base.asset_source_dir,
        task_source_dir=_optional_path(payload.get("task_dir"), None)
        or base.task_source_dir,
        output_dir=_optional_path(payload.get("output_dir"), None) or base.output_dir,
        css_vendor_path=_optional_path(
            payload.get("css_vendor_path"), base.css_vendor_path
        ),
        build_delay=_parse_delay(payload.get("delay_seconds")),
    )


__all__ = ["load_site_config"]
