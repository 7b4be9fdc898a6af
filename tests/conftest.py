"""Shared test fixtures: an in-memory session handle and sample pages."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any

import pytest

from searchprobe.exceptions import ElementNotFoundError, NavigationError, WaitTimeoutError
from searchprobe.pages.interactions import PageInteractions
from searchprobe.pages.results_page import ResultsPage
from searchprobe.pages.search_page import SearchEntryPage


@dataclass
class FakeElement:
    text: str = ""
    visible: bool = True
    attrs: dict[str, str] = field(default_factory=dict)
    clicked: int = 0


Dom = dict[str, list[FakeElement]]


class FakeSession:
    """Selector → elements map standing in for a browser tab.

    Pressing Enter or clicking swaps in ``after_submit`` when it is set,
    the way a real submission loads the results page.
    """

    def __init__(
        self,
        dom: Dom | None = None,
        *,
        after_submit: Dom | None = None,
        title: str = "Google",
        broken: bool = False,
        unreachable: bool = False,
    ) -> None:
        self.dom: Dom = dom or {}
        self.after_submit = after_submit
        self.title = title
        self.broken = broken
        self.unreachable = unreachable
        self.calls: list[tuple[str, Any]] = []
        self.values: dict[str, str] = {}
        self.screenshots: list[str] = []

    def _submit(self) -> None:
        if self.after_submit is not None:
            self.dom, self.after_submit = self.after_submit, None

    def _check(self) -> None:
        if self.broken:
            raise RuntimeError("session is broken")

    async def navigate(self, url: str) -> None:
        self.calls.append(("navigate", url))
        if self.unreachable:
            raise NavigationError(f"Could not load {url}")

    async def current_title(self) -> str:
        return self.title

    async def wait_for_element_state(
        self, selector: str, *, state: str = "visible", timeout_ms: float = 10_000
    ) -> None:
        self.calls.append(("wait", selector))
        self._check()
        if any(el.visible for el in self.dom.get(selector, [])):
            return
        await asyncio.sleep(timeout_ms / 1000)
        raise WaitTimeoutError(selector, timeout_ms, state)

    async def query(self, selector: str) -> list[Any]:
        self._check()
        return list(self.dom.get(selector, []))

    async def element_text(self, handle: FakeElement) -> str:
        return handle.text

    async def element_attribute(self, handle: FakeElement, name: str) -> str | None:
        return handle.attrs.get(name)

    async def element_visible(self, selector: str) -> bool:
        matches = self.dom.get(selector, [])
        return bool(matches) and matches[0].visible

    async def simulate_click(self, handle: FakeElement) -> None:
        self.calls.append(("click", handle))
        handle.clicked += 1
        self._submit()

    async def simulate_fill(self, selector: str, text: str) -> None:
        self.calls.append(("fill", (selector, text)))
        if not self.dom.get(selector):
            raise ElementNotFoundError(selector)
        self.values[selector] = text

    async def simulate_key_press(self, key: str) -> None:
        self.calls.append(("key", key))
        if key == "Enter":
            self._submit()

    async def wait_for_network_idle(self) -> None:
        self.calls.append(("settle", None))

    async def capture_screenshot(self, path: str) -> None:
        self.calls.append(("screenshot", path))
        self.screenshots.append(path)

    def call_names(self) -> list[str]:
        return [name for name, _ in self.calls]


def homepage_dom() -> Dom:
    return {
        'textarea[name="q"]': [FakeElement()],
        'input[name="btnK"]': [FakeElement()],
        'input[name="btnI"]': [FakeElement()],
        'img[alt="Google"]': [FakeElement()],
    }


def results_dom(titles: tuple[str, ...] = ("Node.js", "Node.js Docs", "Learn Node")) -> Dom:
    return {
        'textarea[name="q"]': [FakeElement()],
        "div#search div.g": [FakeElement(t) for t in titles],
        "div#search h3": [FakeElement(f"  {t}  ") for t in titles],
        "div#search a[href]": [
            FakeElement(t, attrs={"href": f"https://example.com/{i}"}) for i, t in enumerate(titles)
        ],
        "div#search div[data-sncf]": [FakeElement(f"About {t}.") for t in titles],
        "div#result-stats": [FakeElement(" About 1,230,000 results (0.31 seconds) ")],
        "a#pnnext": [FakeElement("Next")],
        "div[data-async-context] a": [FakeElement("node.js tutorial"), FakeElement("  ")],
    }


WAIT_MS = 50
PROBE_MS = 20


@pytest.fixture()
def make_pages():
    """Build (session, search page, results page) with short budgets."""

    def _make(session: FakeSession) -> tuple[FakeSession, SearchEntryPage, ResultsPage]:
        ui = PageInteractions(session, timeout_ms=WAIT_MS)
        return (
            session,
            SearchEntryPage(ui, probe_timeout_ms=PROBE_MS),
            ResultsPage(ui, probe_timeout_ms=PROBE_MS),
        )

    return _make


@pytest.fixture()
def tmp_settings_yaml(tmp_path):
    """Write a minimal settings.yaml and return its path."""
    content = """\
base_url: "https://search.example.com/"
headless: false
default_timeout_ms: 8000
probe_timeout_ms: 3000
scenarios:
  - "homepage"
  - "basic-search"
artifacts_dir: "{artifacts}"
""".format(artifacts=str(tmp_path / ".artifacts"))
    p = tmp_path / "settings.yaml"
    p.write_text(content)
    return p
