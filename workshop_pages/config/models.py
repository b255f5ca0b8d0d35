"""Typed dataclasses describing workshop site configuration structures."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from workshop_pages._constants import DEFAULT_CSS_VENDOR_PATH


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class NavLinkConfig:
    """Header navigation link, expressed relative to the output root."""

    label: str
    href: str


def _default_nav_links() -> list[NavLinkConfig]:
    return [
        NavLinkConfig("Home", "index.html"),
        NavLinkConfig("About", "about.html"),
        NavLinkConfig("Tasks", "tasks.html"),
        NavLinkConfig("Demo", "demo.html"),
        NavLinkConfig("Snake", "snake.html"),
    ]


@dc.dataclass(slots=True)
class SiteChrome:
    """Header, navigation, and footer shared by every generated page."""

    site_name: str = "GitHub Actions Workshop"
    copyright: str = "2025 GitHub Actions Workshop"
    nav_links: list[NavLinkConfig] = dc.field(default_factory=_default_nav_links)
    stylesheet: str = "css/styles.css"
    script: str = "js/main.js"


@dc.dataclass(slots=True)
class BuildConfig:
    """Filesystem inputs and outputs for a single site build.

    Attributes
    ----------
    asset_source_dir : Path
        Static asset tree copied verbatim into the output root.
    task_source_dir : Path
        Flat directory of Markdown task documents.
    output_dir : Path
        Destination tree; recreated on every build.
    css_vendor_path : Path or None
        Third-party Markdown stylesheet copied to ``css/github-markdown.css``;
        ``None`` skips the copy.
    build_delay : float
        Seconds to pause before document processing begins.
    """

    asset_source_dir: Path = Path("public")
    task_source_dir: Path = Path("tasks")
    output_dir: Path = Path("dist")
    css_vendor_path: Path | None = Path(DEFAULT_CSS_VENDOR_PATH)
    build_delay: float = 0.0


@dc.dataclass(slots=True)
class SiteConfig:
    """Build inputs alongside the page chrome used by the templates."""

    build: BuildConfig = dc.field(default_factory=BuildConfig)
    chrome: SiteChrome = dc.field(default_factory=SiteChrome)


__all__ = [
    "BuildConfig",
    "NavLinkConfig",
    "SiteChrome",
    "SiteConfig",
    "SiteConfigError",
]
