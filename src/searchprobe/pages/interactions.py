"""Selector-driven page operations shared by every page object.

Two failure policies live here:

* hard-fail operations (``wait_for_visible``, ``click``, ``fill``,
  ``get_text``) raise and leave the scenario to abort;
* probes (``probe_visible``, ``probe_text``, ``probe_texts``) never raise
  and report what happened through a :class:`~searchprobe.models.Lookup`.

Nothing is cached: every call re-queries the live DOM.
"""

from __future__ import annotations

import logging
from typing import Any

from searchprobe.browser.base import SessionHandle
from searchprobe.exceptions import ConfigurationError, ElementNotFoundError, WaitTimeoutError
from searchprobe.models import Lookup, LookupStatus

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_MS = 10_000
PROBE_TIMEOUT_MS = 5_000


def check_budget(timeout_ms: float) -> float:
    """Return *timeout_ms* if positive. Playwright reads 0 as 'wait forever'."""
    if not timeout_ms > 0:
        raise ConfigurationError(f"Timeout budget must be positive, got {timeout_ms!r} ms.")
    return timeout_ms


class PageInteractions:
    """Timeout-bounded wrappers around a :class:`SessionHandle`."""

    def __init__(self, session: SessionHandle, timeout_ms: float = DEFAULT_TIMEOUT_MS) -> None:
        self._session = session
        self.timeout_ms = check_budget(timeout_ms)

    def _budget(self, timeout_ms: float | None) -> float:
        return self.timeout_ms if timeout_ms is None else check_budget(timeout_ms)

    # --- navigation ---

    async def navigate(self, url: str) -> None:
        logger.debug("Navigating to %s.", url)
        await self._session.navigate(url)

    async def get_title(self) -> str:
        return await self._session.current_title()

    async def wait_for_page_settled(self) -> None:
        """Block until network activity has quiesced."""
        await self._session.wait_for_network_idle()
        logger.debug("Page settled.")

    # --- hard-fail ---

    async def wait_for_visible(self, selector: str, timeout_ms: float | None = None) -> None:
        """Resolve once *selector* is visible, else raise ``WaitTimeoutError``."""
        await self._session.wait_for_element_state(
            selector, state="visible", timeout_ms=self._budget(timeout_ms)
        )

    async def _first(self, selector: str) -> Any:
        handles = await self._session.query(selector)
        if not handles:
            raise ElementNotFoundError(f"No element matches {selector!r}.")
        return handles[0]

    async def click(self, selector: str, timeout_ms: float | None = None) -> None:
        await self.wait_for_visible(selector, timeout_ms)
        await self._session.simulate_click(await self._first(selector))

    async def click_element(self, handle: Any) -> None:
        await self._session.simulate_click(handle)

    async def fill(self, selector: str, text: str, timeout_ms: float | None = None) -> None:
        await self.wait_for_visible(selector, timeout_ms)
        await self._session.simulate_fill(selector, text)

    async def get_text(self, selector: str, timeout_ms: float | None = None) -> str:
        """Return the trimmed text of the first match (``""`` if it has none)."""
        await self.wait_for_visible(selector, timeout_ms)
        return (await self._session.element_text(await self._first(selector))).strip()

    async def press_key(self, key: str) -> None:
        await self._session.simulate_key_press(key)

    async def screenshot(self, path: str) -> None:
        await self._session.capture_screenshot(path)

    # --- non-throwing reads ---

    async def is_visible(self, selector: str) -> bool:
        return await self._session.element_visible(selector)

    async def count(self, selector: str) -> int:
        return len(await self._session.query(selector))

    async def elements(self, selector: str) -> list[Any]:
        return await self._session.query(selector)

    async def get_texts(self, selector: str) -> list[str]:
        """Trimmed, non-empty texts of every match, in document order."""
        return await self._texts_of(await self._session.query(selector))

    async def _texts_of(self, handles: list[Any]) -> list[str]:
        texts: list[str] = []
        for handle in handles:
            text = (await self._session.element_text(handle)).strip()
            if text:
                texts.append(text)
        return texts

    async def get_attributes(self, selector: str, name: str) -> list[str]:
        values: list[str] = []
        for handle in await self._session.query(selector):
            value = await self._session.element_attribute(handle, name)
            if value:
                values.append(value)
        return values

    # --- probes (soft-fail) ---

    async def probe_visible(
        self, selector: str, timeout_ms: float = PROBE_TIMEOUT_MS
    ) -> Lookup[bool]:
        try:
            await self.wait_for_visible(selector, timeout_ms)
        except Exception as exc:
            return _absorbed(selector, exc, False)
        return Lookup(LookupStatus.FOUND, True)

    async def probe_text(self, selector: str, timeout_ms: float = PROBE_TIMEOUT_MS) -> Lookup[str]:
        try:
            text = await self.get_text(selector, timeout_ms)
        except Exception as exc:
            return _absorbed(selector, exc, "")
        return Lookup.of(text)

    async def probe_texts(
        self, selector: str, timeout_ms: float | None = PROBE_TIMEOUT_MS
    ) -> Lookup[list[str]]:
        """Texts of every match; ``timeout_ms=None`` reads without waiting."""
        try:
            if timeout_ms is not None:
                await self.wait_for_visible(selector, timeout_ms)
            handles = await self._session.query(selector)
            if not handles:
                return Lookup(LookupStatus.MISSING, [])
            texts = await self._texts_of(handles)
        except Exception as exc:
            return _absorbed(selector, exc, [])
        return Lookup.of(texts)


def _absorbed(selector: str, exc: Exception, default: Any) -> Lookup[Any]:
    if isinstance(exc, WaitTimeoutError):
        logger.debug("Probe %r: nothing within %g ms.", selector, exc.timeout_ms)
        return Lookup(LookupStatus.MISSING, default, exc)
    logger.debug("Probe %r failed: %s", selector, exc)
    return Lookup(LookupStatus.FAILED, default, exc)
