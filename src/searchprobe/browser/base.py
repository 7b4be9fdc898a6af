"""Protocol definition for the browser session handle."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SessionHandle(Protocol):
    """One live browser tab, as seen by the page interaction layer.

    Every method is async so a scenario can ``await`` each step. Calls on
    one handle must be issued sequentially.
    """

    async def navigate(self, url: str) -> None:
        """Load *url*; raise ``NavigationError`` if it cannot be reached."""
        ...

    async def current_title(self) -> str:
        """Return the title of the current document."""
        ...

    async def wait_for_element_state(
        self, selector: str, *, state: str = "visible", timeout_ms: float = 10_000
    ) -> None:
        """Block until *selector* reaches *state*; raise ``WaitTimeoutError`` otherwise."""
        ...

    async def query(self, selector: str) -> list[Any]:
        """Return every element matching *selector*, in document order."""
        ...

    async def element_text(self, handle: Any) -> str:
        """Return the text content of *handle*, or ``""``."""
        ...

    async def element_attribute(self, handle: Any, name: str) -> str | None:
        """Return attribute *name* of *handle*, or ``None``."""
        ...

    async def element_visible(self, selector: str) -> bool:
        """Return ``True`` if the first match is visible. Never raises."""
        ...

    async def simulate_click(self, handle: Any) -> None:
        """Click *handle*; raise ``ElementError`` on failure."""
        ...

    async def simulate_fill(self, selector: str, text: str) -> None:
        """Replace the value of the input matching *selector* with *text*."""
        ...

    async def simulate_key_press(self, key: str) -> None:
        """Press *key* on the focused element."""
        ...

    async def wait_for_network_idle(self) -> None:
        """Block until no network activity has been seen for a short window."""
        ...

    async def capture_screenshot(self, path: str) -> None:
        """Write a full-page PNG screenshot to *path*."""
        ...
