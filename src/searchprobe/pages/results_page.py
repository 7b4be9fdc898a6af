"""Page object for a search results listing."""

from __future__ import annotations

import logging

from searchprobe.models import Lookup
from searchprobe.pages.interactions import PROBE_TIMEOUT_MS, PageInteractions, check_budget
from searchprobe.pages.locators import ResultsLocators

logger = logging.getLogger(__name__)


class ResultsPage:
    """Results-listing workflows.

    Hard-fail: ``get_result_titles``, ``search_again`` and the pagination
    clicks. Soft-fail (never raise): ``get_search_stats``,
    ``are_results_displayed`` and ``get_related_searches``.
    """

    def __init__(
        self,
        interactions: PageInteractions,
        locators: ResultsLocators | None = None,
        *,
        probe_timeout_ms: float = PROBE_TIMEOUT_MS,
    ) -> None:
        self._ui = interactions
        self.locators = locators or ResultsLocators()
        self.probe_timeout_ms = min(check_budget(probe_timeout_ms), PROBE_TIMEOUT_MS)

    # --- results ---

    async def get_results_count(self) -> int:
        return await self._ui.count(self.locators.results)

    async def get_result_titles(self) -> list[str]:
        """Titles in display order. Raises ``WaitTimeoutError`` if none render."""
        await self._ui.wait_for_visible(self.locators.titles)
        return await self._ui.get_texts(self.locators.titles)

    async def get_result_links(self) -> list[str]:
        return await self._ui.get_attributes(self.locators.links, "href")

    async def get_result_descriptions(self) -> list[str]:
        return await self._ui.get_texts(self.locators.descriptions)

    async def click_result(self, index: int) -> bool:
        """Open the result at *index*.

        Out-of-range indices (stale from an earlier query) are ignored and
        ``False`` is returned.
        """
        titles = await self._ui.elements(self.locators.titles)
        if not 0 <= index < len(titles):
            logger.debug("Result index %d out of range (%d titles).", index, len(titles))
            return False
        await self._ui.click_element(titles[index])
        await self._ui.wait_for_page_settled()
        return True

    async def are_results_displayed(self) -> bool:
        return (await self._ui.probe_visible(self.locators.results, self.probe_timeout_ms)).value

    # --- diagnostics ---

    async def lookup_search_stats(self) -> Lookup[str]:
        return await self._ui.probe_text(self.locators.stats, self.probe_timeout_ms)

    async def get_search_stats(self) -> str:
        return (await self.lookup_search_stats()).value

    async def lookup_related_searches(self) -> Lookup[list[str]]:
        return await self._ui.probe_texts(self.locators.related_searches, timeout_ms=None)

    async def get_related_searches(self) -> list[str]:
        return (await self.lookup_related_searches()).value

    # --- pagination ---

    async def is_next_page_visible(self) -> bool:
        return await self._ui.is_visible(self.locators.next_page)

    async def is_previous_page_visible(self) -> bool:
        return await self._ui.is_visible(self.locators.previous_page)

    async def click_next_page(self) -> None:
        await self._ui.click(self.locators.next_page)
        await self._ui.wait_for_page_settled()

    async def click_previous_page(self) -> None:
        await self._ui.click(self.locators.previous_page)
        await self._ui.wait_for_page_settled()

    # --- re-search ---

    async def search_again(self, query: str) -> None:
        logger.info("Searching again for %r.", query)
        await self._ui.wait_for_visible(self.locators.search_box)
        await self._ui.fill(self.locators.search_box, query)
        await self._ui.press_key("Enter")
        await self._ui.wait_for_page_settled()
