"""Page object for the search engine homepage."""

from __future__ import annotations

import logging

from searchprobe.models import Lookup
from searchprobe.pages.interactions import PROBE_TIMEOUT_MS, PageInteractions, check_budget
from searchprobe.pages.locators import SearchEntryLocators

logger = logging.getLogger(__name__)


class SearchEntryPage:
    """Homepage workflows: enter or submit a query, read suggestions.

    ``search`` and ``navigate`` are hard-fail: any error propagates and
    the scenario is invalid. ``get_suggestions`` is soft-fail.
    """

    def __init__(
        self,
        interactions: PageInteractions,
        locators: SearchEntryLocators | None = None,
        *,
        entry_path: str = "/",
        probe_timeout_ms: float = PROBE_TIMEOUT_MS,
    ) -> None:
        self._ui = interactions
        self.locators = locators or SearchEntryLocators()
        self.entry_path = entry_path
        self.probe_timeout_ms = min(check_budget(probe_timeout_ms), PROBE_TIMEOUT_MS)

    async def navigate(self) -> None:
        await self._ui.navigate(self.entry_path)
        await self._ui.wait_for_page_settled()

    async def get_title(self) -> str:
        return await self._ui.get_title()

    async def search(self, query: str) -> None:
        """Submit *query*; on return the results page has settled."""
        logger.info("Searching for %r.", query)
        await self.enter_query(query)
        await self._ui.press_key("Enter")
        await self._ui.wait_for_page_settled()

    async def enter_query(self, query: str) -> None:
        """Type *query* without submitting. Does not settle."""
        await self._ui.wait_for_visible(self.locators.search_box)
        await self._ui.fill(self.locators.search_box, query)

    async def clear_query(self) -> None:
        """Empty the search box. Does not settle."""
        await self._ui.fill(self.locators.search_box, "")

    async def click_submit(self) -> None:
        await self._ui.click(self.locators.submit_button)
        await self._ui.wait_for_page_settled()

    async def click_alternate_action(self) -> None:
        await self._ui.click(self.locators.alternate_button)
        await self._ui.wait_for_page_settled()

    async def is_logo_visible(self) -> bool:
        return await self._ui.is_visible(self.locators.logo)

    async def is_search_box_visible(self) -> bool:
        return await self._ui.is_visible(self.locators.search_box)

    async def lookup_suggestions(self, timeout_ms: float | None = None) -> Lookup[list[str]]:
        budget = self.probe_timeout_ms if timeout_ms is None else min(timeout_ms, PROBE_TIMEOUT_MS)
        return await self._ui.probe_texts(self.locators.suggestions, budget)

    async def get_suggestions(self, timeout_ms: float | None = None) -> list[str]:
        """Autocomplete texts in display order; ``[]`` if none appear in time."""
        return (await self.lookup_suggestions(timeout_ms)).value
