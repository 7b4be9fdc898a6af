"""Custom exception hierarchy for SearchProbe."""


class SearchProbeError(Exception):
    """Base exception for all SearchProbe errors."""


class BrowserLaunchError(SearchProbeError):
    """Raised when the browser fails to start."""


class NavigationError(SearchProbeError):
    """Raised when the session cannot reach a URL."""


class ElementError(SearchProbeError):
    """Raised when a click, fill or key press cannot be simulated."""


class ElementNotFoundError(ElementError):
    """Raised when a query matched nothing where a match was required."""


class WaitTimeoutError(SearchProbeError, TimeoutError):
    """Raised when an element does not reach the awaited state in time."""

    def __init__(self, selector: str, timeout_ms: float, state: str = "visible") -> None:
        super().__init__(
            f"{selector!r} not {state} within {timeout_ms:g} ms"
        )
        self.selector = selector
        self.timeout_ms = timeout_ms
        self.state = state


class ConfigurationError(SearchProbeError):
    """Raised when settings are invalid or missing."""


class ScenarioFailure(SearchProbeError, AssertionError):
    """Raised when a scenario check does not hold."""
