"""Utility helpers shared by the workshop configuration loader."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from .models import NavLinkConfig, SiteChrome, SiteConfigError


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _require_mapping(value: object, section: str) -> typ.Mapping[str, typ.Any]:
    """Return ``value`` as a mapping, treating ``None`` as empty."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        msg = f"Section '{section}' must be a mapping."
        raise SiteConfigError(msg)
    return value


def _optional_path(value: object | None, default: Path | None) -> Path | None:
    """Return ``value`` as a Path, ``default`` when absent, or None when blank."""
    if value is None:
        return default
    text = _optional_str(value)
    return Path(text) if text else None


def _parse_delay(value: object | None) -> float:
    """Return a non-negative delay in seconds."""
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, int | float):
        msg = f"'delay_seconds' must be a number, got {value!r}."
        raise SiteConfigError(msg)
    if value < 0:
        msg = f"'delay_seconds' must not be negative, got {value!r}."
        raise SiteConfigError(msg)
    return float(value)


def _build_nav_links(payload: object | None) -> list[NavLinkConfig] | None:
    """Build navigation links from a YAML list; None keeps the defaults."""
    if payload is None:
        return None
    if not isinstance(payload, list):
        msg = "'site.nav' must be a list of {label, href} mappings."
        raise SiteConfigError(msg)
    links: list[NavLinkConfig] = []
    for item in payload:
        if not isinstance(item, dict):
            msg = f"Navigation entry {item!r} must be a mapping."
            raise SiteConfigError(msg)
        label = _optional_str(item.get("label"))
        href = _optional_str(item.get("href"))
        if not label or not href:
            msg = f"Navigation entry {item!r} needs both 'label' and 'href'."
            raise SiteConfigError(msg)
        links.append(NavLinkConfig(label=label, href=href))
    return links


def _build_chrome(payload: typ.Mapping[str, typ.Any]) -> SiteChrome:
    """Build a SiteChrome instance, merging overrides onto the defaults."""
    base = SiteChrome()
    nav_links = _build_nav_links(payload.get("nav"))
    return SiteChrome(
        site_name=_optional_str(payload.get("name")) or base.site_name,
        copyright=_optional_str(payload.get("copyright")) or base.copyright,
        nav_links=nav_links if nav_links is not None else base.nav_links,
        stylesheet=_optional_str(payload.get("stylesheet")) or base.stylesheet,
        script=_optional_str(payload.get("script")) or base.script,
    )


__all__ = [
    "_build_chrome",
    "_build_nav_links",
    "_optional_path",
    "_optional_str",
    "_parse_delay",
    "_require_mapping",
]
