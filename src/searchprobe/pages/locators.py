"""Locator records for each page object.

Records are frozen; build a variant with ``dataclasses.replace``.
"""

from __future__ import annotations

from dataclasses import dataclass, fields

from searchprobe.exceptions import ConfigurationError


def _require_selectors(record: object) -> None:
    for f in fields(record):  # type: ignore[arg-type]
        value = getattr(record, f.name)
        if not isinstance(value, str) or not value.strip():
            raise ConfigurationError(
                f"{type(record).__name__}.{f.name} must be a non-empty selector."
            )


@dataclass(frozen=True)
class SearchEntryLocators:
    """Selectors for the search engine homepage."""

    search_box: str = 'textarea[name="q"]'
    submit_button: str = 'input[name="btnK"]'
    alternate_button: str = 'input[name="btnI"]'  # "I'm Feeling Lucky"
    logo: str = 'img[alt="Google"]'
    suggestions: str = 'ul[role="listbox"] li'

    def __post_init__(self) -> None:
        _require_selectors(self)


@dataclass(frozen=True)
class ResultsLocators:
    """Selectors for a results listing."""

    search_box: str = 'textarea[name="q"]'
    results: str = "div#search div.g"
    titles: str = "div#search h3"
    links: str = "div#search a[href]"
    descriptions: str = "div#search div[data-sncf]"
    stats: str = "div#result-stats"
    next_page: str = "a#pnnext"
    previous_page: str = "a#pnprev"
    related_searches: str = "div[data-async-context] a"

    def __post_init__(self) -> None:
        _require_selectors(self)
