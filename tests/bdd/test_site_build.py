"""Behaviour tests for the snippet site build using pytest-bdd.

These scenarios drive :func:`snippet_pages.builder.run_build` against the
fixture site from ``tests/conftest.py``. The feature file
``features/site_build.feature`` covers the automated-commit guard, a regular
CI build, and a missing static part.

Usage
-----
Run ``pytest tests/bdd/test_site_build.py -v`` after installing the test
extras. No network access or external tools are required.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, parsers, scenarios, then, when

from snippet_pages.builder import run_build

if typ.TYPE_CHECKING:
    from snippet_pages.config import BuildConfig

FEATURE_FILE = Path(__file__).resolve().parents[2] / "features" / "site_build.feature"
scenarios(FEATURE_FILE)

ScenarioState = dict[str, typ.Any]


@pytest.fixture
def scenario_state() -> ScenarioState:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


@given("a snippet site on disk")
def given_site(build_config: BuildConfig, scenario_state: ScenarioState) -> None:
    """Record the fixture site configuration for later steps."""
    scenario_state["config"] = build_config


@given("the footer fragment is missing")
def given_missing_footer(scenario_state: ScenarioState) -> None:
    """Delete the footer static part from the fixture site."""
    config = typ.cast("BuildConfig", scenario_state["config"])
    (config.paths.static_parts / "index-end.html").unlink()


@given(parsers.parse('the environment is a CI run for commit "{message}"'))
def given_ci_env(scenario_state: ScenarioState, message: str) -> None:
    """Simulate the CI environment for a commit with ``message``."""
    scenario_state["env"] = {
        "CI": "true",
        "TRAVIS": "true",
        "TRAVIS_COMMIT_MESSAGE": message,
    }


@given("the environment is a local run")
def given_local_env(scenario_state: ScenarioState) -> None:
    """Simulate a developer machine without CI variables."""
    scenario_state["env"] = {}


@when("I run the site build")
def when_run_build(scenario_state: ScenarioState) -> None:
    """Run the build and keep its exit status."""
    config = typ.cast("BuildConfig", scenario_state["config"])
    scenario_state["status"] = run_build(config, env=scenario_state["env"])


@then(parsers.parse("the build exits with status {status:d}"))
def then_status(scenario_state: ScenarioState, status: int) -> None:
    """Compare the recorded exit status."""
    assert scenario_state["status"] == status, (
        f"expected exit status {status}, got {scenario_state['status']}"
    )


@then("no page is written")
def then_no_page(scenario_state: ScenarioState) -> None:
    """The output HTML must not exist after a skipped or failed build."""
    config = typ.cast("BuildConfig", scenario_state["config"])
    assert not config.paths.output.exists(), "expected no index.html to be written"


@then(parsers.parse('the page lists the "{name}" snippet with an advanced badge'))
def then_page_has_badge(scenario_state: ScenarioState, name: str) -> None:
    """The snippet card heading carries the advanced badge."""
    config = typ.cast("BuildConfig", scenario_state["config"])
    soup = BeautifulSoup(config.paths.output.read_text(encoding="utf-8"), "html.parser")
    heading = soup.find("h3", id=name)
    assert heading is not None, f"expected a card heading with id={name!r}"
    badge = heading.find("mark", class_="tag")
    assert badge is not None, "expected an advanced badge inside the heading"
    assert badge.get_text() == "advanced"
