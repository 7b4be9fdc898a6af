"""Scenario runner: one fresh browser session per scenario."""

from __future__ import annotations

import logging
import re
import time
from pathlib import Path
from typing import Any, Callable

from searchprobe.browser.playwright_session import PlaywrightSession
from searchprobe.exceptions import ScenarioFailure
from searchprobe.models import RunSummary, ScenarioResult
from searchprobe.pages.interactions import PageInteractions
from searchprobe.pages.results_page import ResultsPage
from searchprobe.pages.search_page import SearchEntryPage
from searchprobe.reporting.console import print_banner, print_progress, print_run_report
from searchprobe.scenarios.suite import Scenario, ScenarioContext, select_scenarios
from searchprobe.settings import AppSettings

logger = logging.getLogger(__name__)

# Must return an async context manager yielding a SessionHandle.
SessionFactory = Callable[[AppSettings], Any]


def _elapsed_ms(start_ns: int) -> int:
    return (time.monotonic_ns() - start_ns) // 1_000_000


class ScenarioRunner:
    """Runs scenarios sequentially and collects their outcomes.

    Each scenario runs once; retrying is left to the caller.
    """

    def __init__(
        self,
        settings: AppSettings,
        session_factory: SessionFactory = PlaywrightSession,
        *,
        quiet: bool = False,
    ) -> None:
        self._settings = settings
        self._session_factory = session_factory
        self._quiet = quiet

    async def run(self, names: list[str] | None = None) -> RunSummary:
        """Execute the selected scenarios (``settings.scenarios`` by default)."""
        scenarios = select_scenarios(names if names is not None else self._settings.scenarios)
        summary = RunSummary()
        if not self._quiet:
            print_banner()
        logger.info("Running %d scenario(s).", len(scenarios))

        for index, sc in enumerate(scenarios, start=1):
            result = await self.run_one(sc, summary.run_id)
            summary.results.append(result)
            if not self._quiet:
                print_progress(result, index)

        summary.finalize()
        if not self._quiet:
            print_run_report(summary)
        return summary

    async def run_one(self, sc: Scenario, run_id: str = "adhoc") -> ScenarioResult:
        start_ns = time.monotonic_ns()
        result = ScenarioResult(name=sc.name, outcome="passed")
        try:
            async with self._session_factory(self._settings) as session:
                ui = PageInteractions(session, self._settings.default_timeout_ms)
                ctx = ScenarioContext(
                    search=SearchEntryPage(
                        ui,
                        entry_path=self._settings.entry_path,
                        probe_timeout_ms=self._settings.probe_timeout_ms,
                    ),
                    results=ResultsPage(ui, probe_timeout_ms=self._settings.probe_timeout_ms),
                    settings=self._settings,
                )
                try:
                    await ctx.search.navigate()
                    await sc.run(ctx)
                except ScenarioFailure as exc:
                    result.outcome, result.failure_reason = "failed", str(exc)
                except Exception as exc:
                    logger.exception("Scenario %s raised.", sc.name)
                    result.outcome = "error"
                    result.failure_reason = f"{type(exc).__name__}: {exc}"
                if not result.passed and self._settings.screenshot_on_failure:
                    result.screenshot_path = await self._capture(ui, sc.name, run_id)
        except Exception as exc:
            # Session could not be opened or closed.
            logger.error("Session for scenario %s failed: %s", sc.name, exc)
            result.outcome = "error"
            result.failure_reason = result.failure_reason or f"{type(exc).__name__}: {exc}"

        result.duration_ms = _elapsed_ms(start_ns)
        logger.info("Scenario %s %s in %d ms.", sc.name, result.outcome, result.duration_ms)
        return result

    async def _capture(self, ui: PageInteractions, name: str, run_id: str) -> str:
        slug = re.sub(r"[^A-Za-z0-9_-]+", "_", name)
        path = Path(self._settings.artifacts_dir) / run_id / f"{slug}.png"
        try:
            await ui.screenshot(str(path))
        except Exception as exc:
            logger.warning("Screenshot for %s failed: %s", name, exc)
            return ""
        return str(path)
