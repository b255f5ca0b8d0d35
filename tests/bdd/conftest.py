"""Shared pytest-bdd steps for workshop site build scenarios."""

from __future__ import annotations

from pathlib import Path

import pytest
from pytest_bdd import given, parsers, when

from workshop_pages import SiteBuildError, build_site
from workshop_pages.config import BuildConfig


@pytest.fixture
def scenario_state() -> dict[str, object]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


def _site_config(tmp_path: Path, *, with_assets: bool = True) -> BuildConfig:
    """Create a temporary site layout and return its build config."""
    public = tmp_path / "public"
    if with_assets:
        (public / "css").mkdir(parents=True)
        (public / "index.html").write_text("<h1>Workshop</h1>\n", encoding="utf-8")
        (public / "css" / "styles.css").write_text("body {}\n", encoding="utf-8")
    tasks = tmp_path / "tasks"
    tasks.mkdir()
    return BuildConfig(
        asset_source_dir=public,
        task_source_dir=tasks,
        output_dir=tmp_path / "dist",
        css_vendor_path=None,
    )


@given(parsers.parse('a workshop site with task documents "{names}"'))
def given_site_with_documents(
    tmp_path: Path, scenario_state: dict[str, object], names: str
) -> None:
    """Create task documents without headings so titles fall back to stems."""
    config = _site_config(tmp_path)
    for name in (item.strip() for item in names.split(",")):
        (config.task_source_dir / name).write_text(
            f"Body of {name}.\n", encoding="utf-8"
        )
    scenario_state["config"] = config


@given("a workshop site with no task documents")
def given_site_without_documents(
    tmp_path: Path, scenario_state: dict[str, object]
) -> None:
    """Create a site whose task directory exists but is empty."""
    scenario_state["config"] = _site_config(tmp_path)


@given("a workshop site without a static asset tree")
def given_site_without_assets(
    tmp_path: Path, scenario_state: dict[str, object]
) -> None:
    """Create a site whose asset directory is missing."""
    config = _site_config(tmp_path, with_assets=False)
    (config.task_source_dir / "01-task.md").write_text("# Task\n", encoding="utf-8")
    scenario_state["config"] = config


@given("the site has been built once")
@when("I build the site")
def when_build_site(scenario_state: dict[str, object]) -> None:
    """Run the full build pipeline for the scenario's config."""
    config: BuildConfig = scenario_state["config"]  # type: ignore[assignment]
    scenario_state["result"] = build_site(config)


@when("I try to build the site")
def when_try_build_site(scenario_state: dict[str, object]) -> None:
    """Run the build and record the fatal error it raises."""
    config: BuildConfig = scenario_state["config"]  # type: ignore[assignment]
    with pytest.raises(SiteBuildError) as excinfo:
        build_site(config)
    scenario_state["error"] = excinfo.value
