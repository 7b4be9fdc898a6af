"""Playwright-backed implementation of SessionHandle."""

from __future__ import annotations

import logging
from pathlib import Path
from types import TracebackType
from typing import Any

from playwright.async_api import Browser, BrowserContext, Page, async_playwright
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from searchprobe.exceptions import (
    BrowserLaunchError,
    ElementError,
    NavigationError,
    SearchProbeError,
    WaitTimeoutError,
)
from searchprobe.settings import AppSettings

logger = logging.getLogger(__name__)


class PlaywrightSession:
    """Async browser tab built on Playwright Chromium.

    Use as ``async with PlaywrightSession(settings) as session:`` so the
    browser is always torn down at scenario end.
    """

    def __init__(self, settings: AppSettings) -> None:
        self._settings = settings
        self._pw: Any = None
        self._browser: Browser | None = None
        self._context: BrowserContext | None = None
        self._page: Page | None = None

    @property
    def page(self) -> Page:
        if self._page is None:
            raise RuntimeError("Browser not launched, call launch() first.")
        return self._page

    # --- lifecycle ---

    async def launch(self) -> None:
        s = self._settings
        try:
            self._pw = await async_playwright().start()
            self._browser = await self._pw.chromium.launch(
                headless=s.headless,
                slow_mo=s.slow_mo,
                args=["--disable-dev-shm-usage"],
            )
            self._context = await self._browser.new_context(
                base_url=s.base_url,
                locale=s.locale,
                viewport={"width": s.viewport_width, "height": s.viewport_height},
                extra_http_headers={"Accept-Language": f"{s.locale},en;q=0.9"},
            )
            self._context.set_default_timeout(s.default_timeout_ms)
            self._context.set_default_navigation_timeout(s.navigation_timeout_ms)
            self._page = await self._context.new_page()
            logger.info("Browser launched (headless=%s).", s.headless)
        except Exception as exc:
            try:
                await self.close()
            except Exception:
                logger.exception("Cleanup after failed launch also failed.")
            raise BrowserLaunchError(f"Failed to start Playwright Chromium: {exc}") from exc

    async def close(self) -> None:
        if self._context:
            await self._context.close()
        if self._browser:
            await self._browser.close()
        if self._pw:
            await self._pw.stop()
        self._context = self._browser = self._page = self._pw = None
        logger.debug("Browser closed.")

    async def __aenter__(self) -> "PlaywrightSession":
        await self.launch()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    # --- navigation ---

    async def navigate(self, url: str) -> None:
        try:
            await self.page.goto(url)
        except PlaywrightError as exc:
            raise NavigationError(f"Could not load {url}: {exc}") from exc

    async def current_title(self) -> str:
        try:
            return await self.page.title()
        except PlaywrightError as exc:
            raise SearchProbeError(f"Could not read the page title: {exc}") from exc

    async def wait_for_network_idle(self) -> None:
        try:
            await self.page.wait_for_load_state("networkidle")
        except PlaywrightTimeoutError as exc:
            raise WaitTimeoutError(
                "page", self._settings.navigation_timeout_ms, "networkidle"
            ) from exc
        except PlaywrightError as exc:
            raise SearchProbeError(f"Page did not settle: {exc}") from exc

    # --- querying ---

    async def wait_for_element_state(
        self, selector: str, *, state: str = "visible", timeout_ms: float = 10_000
    ) -> None:
        try:
            await self.page.wait_for_selector(selector, state=state, timeout=timeout_ms)
        except PlaywrightTimeoutError as exc:
            raise WaitTimeoutError(selector, timeout_ms, state) from exc
        except PlaywrightError as exc:
            raise ElementError(f"Waiting for {selector!r} failed: {exc}") from exc

    async def query(self, selector: str) -> list[Any]:
        try:
            return await self.page.query_selector_all(selector)
        except PlaywrightError as exc:
            raise ElementError(f"Query {selector!r} failed: {exc}") from exc

    async def element_text(self, handle: Any) -> str:
        try:
            return await handle.text_content() or ""
        except PlaywrightError as exc:
            raise ElementError(f"Reading text failed: {exc}") from exc

    async def element_attribute(self, handle: Any, name: str) -> str | None:
        try:
            return await handle.get_attribute(name)
        except PlaywrightError as exc:
            raise ElementError(f"Reading attribute {name!r} failed: {exc}") from exc

    async def element_visible(self, selector: str) -> bool:
        try:
            return await self.page.is_visible(selector)
        except PlaywrightError:
            return False

    # --- interaction ---

    async def simulate_click(self, handle: Any) -> None:
        try:
            await handle.click()
        except PlaywrightError as exc:
            raise ElementError(f"Click failed: {exc}") from exc

    async def simulate_fill(self, selector: str, text: str) -> None:
        try:
            await self.page.fill(selector, text)
        except PlaywrightTimeoutError as exc:
            raise WaitTimeoutError(selector, self._settings.default_timeout_ms, "editable") from exc
        except PlaywrightError as exc:
            raise ElementError(f"Fill on {selector!r} failed: {exc}") from exc

    async def simulate_key_press(self, key: str) -> None:
        try:
            await self.page.keyboard.press(key)
        except PlaywrightError as exc:
            raise ElementError(f"Key press {key!r} failed: {exc}") from exc

    # --- artifacts ---

    async def capture_screenshot(self, path: str) -> None:
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        await self.page.screenshot(path=path, full_page=True)
        logger.debug("Screenshot saved to %s.", path)
