"""Load and validate site configuration YAML for workshop site builds.

This subpackage parses the project's ``site.yaml`` file, merges it onto the
built-in defaults, and produces typed dataclasses (:class:`SiteConfig`,
:class:`BuildConfig`, :class:`SiteChrome`) that the builder consumes. The
primary entry point is :func:`load_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from workshop_pages.config import load_site_config
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> site.build.asset_source_dir  # doctest: +SKIP
PosixPath('public')
"""

from .loader import load_site_config
from .models import (
    BuildConfig,
    NavLinkConfig,
    SiteChrome,
    SiteConfig,
    SiteConfigError,
)

__all__ = [
    "BuildConfig",
    "NavLinkConfig",
    "SiteChrome",
    "SiteConfig",
    "SiteConfigError",
    "load_site_config",
]
