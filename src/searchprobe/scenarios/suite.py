"""End-to-end scenarios for the search homepage and results page.

Every scenario starts on a freshly navigated, settled homepage.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Awaitable, Callable

from searchprobe.exceptions import ConfigurationError, ScenarioFailure
from searchprobe.pages.results_page import ResultsPage
from searchprobe.pages.search_page import SearchEntryPage
from searchprobe.settings import AppSettings

LONG_QUERY = "how to perform end to end testing with playwright for web applications"


@dataclass
class ScenarioContext:
    """Page objects bound to the scenario's own session."""

    search: SearchEntryPage
    results: ResultsPage
    settings: AppSettings


ScenarioFn = Callable[[ScenarioContext], Awaitable[None]]


@dataclass(frozen=True)
class Scenario:
    name: str
    description: str
    run: ScenarioFn


SCENARIOS: list[Scenario] = []


def scenario(name: str, description: str) -> Callable[[ScenarioFn], ScenarioFn]:
    """Register the decorated coroutine function in :data:`SCENARIOS`."""

    def register(fn: ScenarioFn) -> ScenarioFn:
        SCENARIOS.append(Scenario(name, description, fn))
        return fn

    return register


def check(condition: object, message: str) -> None:
    if not condition:
        raise ScenarioFailure(message)


def select_scenarios(names: list[str] | None = None) -> list[Scenario]:
    """Return the registered scenarios named in *names* (all when empty)."""
    if not names:
        return list(SCENARIOS)
    by_name = {s.name: s for s in SCENARIOS}
    unknown = [n for n in names if n not in by_name]
    if unknown:
        raise ConfigurationError(f"Unknown scenario(s): {', '.join(unknown)}")
    return [by_name[n] for n in names]


def _any_contains(titles: list[str], needle: str) -> bool:
    return any(needle in t.lower() for t in titles)


# ---- scenarios ----


@scenario("homepage", "Homepage shows the logo and the search box")
async def homepage_elements(ctx: ScenarioContext) -> None:
    check(await ctx.search.is_logo_visible(), "Logo is not visible.")
    check(await ctx.search.is_search_box_visible(), "Search box is not visible.")


@scenario("basic-search", "A search displays results")
async def basic_search(ctx: ScenarioContext) -> None:
    await ctx.search.search("Playwright automation")
    check(await ctx.results.are_results_displayed(), "No results displayed.")
    count = await ctx.results.get_results_count()
    check(count > 0, f"Expected results, got {count}.")


@scenario("result-titles", "Result titles relate to the query")
async def result_titles(ctx: ScenarioContext) -> None:
    await ctx.search.search("Node.js")
    titles = await ctx.results.get_result_titles()
    check(titles, "No result titles.")
    check(_any_contains(titles, "node"), f"No title mentions 'node': {titles[:5]}")


@scenario("search-stats", "Results page shows result-count statistics")
async def search_stats(ctx: ScenarioContext) -> None:
    await ctx.search.search("JavaScript")
    stats = await ctx.results.lookup_search_stats()
    check(stats.value, f"Search stats unavailable ({stats.status.value}).")


@scenario("search-again", "A second search from the results page replaces the results")
async def search_again(ctx: ScenarioContext) -> None:
    await ctx.search.search("TypeScript")
    await ctx.results.search_again("React")
    check(await ctx.results.are_results_displayed(), "No results displayed.")
    titles = await ctx.results.get_result_titles()
    check(_any_contains(titles, "react"), f"No title mentions 'react': {titles[:5]}")


@scenario("suggestions", "Typing a query offers autocomplete suggestions")
async def suggestions(ctx: ScenarioContext) -> None:
    await ctx.search.enter_query("python")
    await asyncio.sleep(ctx.settings.suggestion_delay_ms / 1000)
    found = await ctx.search.get_suggestions()
    check(isinstance(found, list), "Suggestions are not a list.")


@scenario("empty-search", "Clearing the search box leaves the page usable")
async def empty_search(ctx: ScenarioContext) -> None:
    await ctx.search.clear_query()
    check(await ctx.search.is_search_box_visible(), "Search box is not visible.")


@scenario("special-characters", "Queries with special characters return results")
async def special_characters(ctx: ScenarioContext) -> None:
    await ctx.search.search("test automation @playwright")
    check(await ctx.results.are_results_displayed(), "No results displayed.")


@scenario("pagination", "Results page offers a next-page control")
async def pagination(ctx: ScenarioContext) -> None:
    await ctx.search.search("web automation")
    check(await ctx.results.is_next_page_visible(), "Next-page control is not visible.")


@scenario("long-query", "A long query returns results")
async def long_query(ctx: ScenarioContext) -> None:
    await ctx.search.search(LONG_QUERY)
    check(await ctx.results.are_results_displayed(), "No results displayed.")
    count = await ctx.results.get_results_count()
    check(count > 0, f"Expected results, got {count}.")
