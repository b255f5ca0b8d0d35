"""Behaviour tests for the generated tasks index page.

These pytest-bdd scenarios build a temporary workshop site and inspect the
resulting ``tasks.html``: cards must follow filename string order (so
``10-y.md`` precedes ``2-x.md``), numbered files carry ``Task N:`` labels with
leading zeros dropped, and an empty task directory produces no index at all.

Usage
-----
Run ``pytest tests/bdd/test_tasks_index.py -v``. Shared steps live in
``tests/bdd/conftest.py``; the scenarios come from
``features/tasks_index.feature``.
"""

from __future__ import annotations

from pathlib import Path

from bs4 import BeautifulSoup
from pytest_bdd import parsers, scenarios, then

from workshop_pages.config import BuildConfig

FEATURE_FILE = Path(__file__).resolve().parents[2] / "features" / "tasks_index.feature"
scenarios(FEATURE_FILE)


def _index_soup(scenario_state: dict[str, object]) -> BeautifulSoup:
    config: BuildConfig = scenario_state["config"]  # type: ignore[assignment]
    index_path = config.output_dir / "tasks.html"
    assert index_path.is_file(), f"expected {index_path} to be written"
    return BeautifulSoup(index_path.read_text(encoding="utf-8"), "html.parser")


@then(parsers.parse('the tasks index lists "{labels}"'))
def then_index_lists(scenario_state: dict[str, object], labels: str) -> None:
    """Verify the index card labels and their order."""
    expected = [label.strip() for label in labels.split(",")]
    actual = [h3.get_text() for h3 in _index_soup(scenario_state).select("li h3")]
    assert actual == expected, f"expected index labels {expected!r}, got {actual!r}"


@then("every index card links into the tasks directory")
def then_cards_link_to_pages(scenario_state: dict[str, object]) -> None:
    """Verify each card points at an existing ``tasks/<name>.html`` page."""
    config: BuildConfig = scenario_state["config"]  # type: ignore[assignment]
    links = [a.get("href") for a in _index_soup(scenario_state).select("li.task-item a")]
    assert links, "expected at least one index card link"
    for href in links:
        assert href.startswith("tasks/"), f"expected tasks/ prefix, got {href!r}"
        assert (config.output_dir / href).is_file(), f"{href} was not generated"


@then("no tasks index is written")
def then_no_index(scenario_state: dict[str, object]) -> None:
    """Verify neither ``tasks.html`` nor ``tasks/`` exists."""
    config: BuildConfig = scenario_state["config"]  # type: ignore[assignment]
    assert not (config.output_dir / "tasks.html").exists(), "unexpected tasks.html"
    assert not (config.output_dir / "tasks").exists(), "unexpected tasks directory"


@then("the static assets are still copied")
def then_assets_copied(scenario_state: dict[str, object]) -> None:
    """Verify the asset copy stage completed."""
    config: BuildConfig = scenario_state["config"]  # type: ignore[assignment]
    assert (config.output_dir / "index.html").is_file()
    assert (config.output_dir / "css" / "styles.css").is_file()
