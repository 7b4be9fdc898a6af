"""Tests for the scenario runner and the bundled suite (fake sessions)."""

from __future__ import annotations

import pytest

from conftest import FakeSession, homepage_dom, results_dom
from searchprobe.exceptions import BrowserLaunchError, ConfigurationError
from searchprobe.scenarios.runner import ScenarioRunner
from searchprobe.scenarios.suite import SCENARIOS, Scenario, check, select_scenarios
from searchprobe.settings import AppSettings


class _FakeSessionFactory:
    """Stands in for ``PlaywrightSession``: one fresh FakeSession per scenario."""

    def __init__(self, build, fail_launch: bool = False) -> None:
        self._build = build
        self._fail_launch = fail_launch
        self.sessions: list[FakeSession] = []
        self.closed = 0

    def __call__(self, settings):
        return _FakeContext(self)


class _FakeContext:
    def __init__(self, factory: _FakeSessionFactory) -> None:
        self._factory = factory

    async def __aenter__(self) -> FakeSession:
        if self._factory._fail_launch:
            raise BrowserLaunchError("no chromium")
        session = self._factory._build()
        self._factory.sessions.append(session)
        return session

    async def __aexit__(self, *exc) -> None:
        self._factory.closed += 1


def _settings(tmp_path, **overrides) -> AppSettings:
    base = {
        "default_timeout_ms": 50,
        "probe_timeout_ms": 20,
        "suggestion_delay_ms": 0,
        "artifacts_dir": str(tmp_path / "artifacts"),
    }
    return AppSettings(**{**base, **overrides})


def _search_session() -> FakeSession:
    return FakeSession(homepage_dom(), after_submit=results_dom())


def test_suite_registers_all_scenarios():
    names = [s.name for s in SCENARIOS]
    assert len(names) == len(set(names)) == 10
    assert names[0] == "homepage"


def test_select_scenarios():
    assert select_scenarios([]) == SCENARIOS
    picked = select_scenarios(["pagination", "homepage"])
    assert [s.name for s in picked] == ["pagination", "homepage"]
    with pytest.raises(ConfigurationError, match="nope"):
        select_scenarios(["homepage", "nope"])


def test_check_raises_assertion_error():
    check(True, "fine")
    with pytest.raises(AssertionError, match="broken"):
        check([], "broken")


@pytest.mark.asyncio
async def test_run_homepage_and_titles_pass(tmp_path):
    factory = _FakeSessionFactory(_search_session)
    runner = ScenarioRunner(_settings(tmp_path), factory, quiet=True)
    summary = await runner.run(["homepage", "result-titles", "basic-search", "pagination"])
    assert [r.outcome for r in summary.results] == ["passed"] * 4
    assert summary.all_passed and summary.ended_at
    # Each scenario owns its session, navigated on entry.
    assert len(factory.sessions) == 4 and factory.closed == 4
    assert all(s.calls[:2] == [("navigate", "/"), ("settle", None)] for s in factory.sessions)


@pytest.mark.asyncio
async def test_suggestions_scenario_passes_without_suggestions(tmp_path):
    factory = _FakeSessionFactory(lambda: FakeSession(homepage_dom()))
    runner = ScenarioRunner(_settings(tmp_path), factory, quiet=True)
    summary = await runner.run(["suggestions", "empty-search"])
    assert summary.all_passed


@pytest.mark.asyncio
async def test_failed_check_recorded_with_screenshot(tmp_path):
    # Results without any title mentioning "node".
    factory = _FakeSessionFactory(
        lambda: FakeSession(homepage_dom(), after_submit=results_dom(("Vue", "Svelte")))
    )
    runner = ScenarioRunner(_settings(tmp_path), factory, quiet=True)
    summary = await runner.run(["result-titles"])
    result = summary.results[0]
    assert result.outcome == "failed"
    assert "node" in result.failure_reason
    assert result.screenshot_path.endswith("result-titles.png")
    assert factory.sessions[0].screenshots == [result.screenshot_path]


@pytest.mark.asyncio
async def test_hard_failure_recorded_as_error(tmp_path):
    factory = _FakeSessionFactory(lambda: FakeSession(homepage_dom()))
    runner = ScenarioRunner(_settings(tmp_path, screenshot_on_failure=False), factory, quiet=True)
    summary = await runner.run(["result-titles"])
    result = summary.results[0]
    assert result.outcome == "error"
    assert result.failure_reason.startswith("WaitTimeoutError")
    assert result.screenshot_path == ""
    assert summary.total_errors == 1


@pytest.mark.asyncio
async def test_navigation_failure_is_an_error(tmp_path):
    factory = _FakeSessionFactory(lambda: FakeSession(unreachable=True))
    runner = ScenarioRunner(_settings(tmp_path), factory, quiet=True)
    summary = await runner.run(["homepage"])
    assert summary.results[0].outcome == "error"
    assert "NavigationError" in summary.results[0].failure_reason


@pytest.mark.asyncio
async def test_launch_failure_does_not_stop_the_run(tmp_path):
    factory = _FakeSessionFactory(_search_session, fail_launch=True)
    runner = ScenarioRunner(_settings(tmp_path), factory, quiet=True)
    summary = await runner.run(["homepage", "pagination"])
    assert [r.outcome for r in summary.results] == ["error", "error"]
    assert "no chromium" in summary.results[0].failure_reason


@pytest.mark.asyncio
async def test_custom_scenario_via_run_one(tmp_path):
    seen = []

    async def probe_title(ctx):
        seen.append(await ctx.search.get_title())
        check(await ctx.results.get_results_count() == 0, "homepage has no results")

    factory = _FakeSessionFactory(lambda: FakeSession(homepage_dom(), title="Search"))
    runner = ScenarioRunner(_settings(tmp_path), factory, quiet=True)
    result = await runner.run_one(Scenario("title", "reads the title", probe_title))
    assert result.passed
    assert seen == ["Search"]


@pytest.mark.asyncio
async def test_settings_scenarios_used_by_default(tmp_path):
    factory = _FakeSessionFactory(_search_session)
    runner = ScenarioRunner(_settings(tmp_path, scenarios=["empty-search"]), factory, quiet=True)
    summary = await runner.run()
    assert [r.name for r in summary.results] == ["empty-search"]
