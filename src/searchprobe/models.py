"""Domain models for SearchProbe."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class LookupStatus(str, Enum):
    FOUND = "found"
    EMPTY = "empty"  # present, no text
    MISSING = "missing"  # not present within budget
    FAILED = "failed"


@dataclass(frozen=True)
class Lookup(Generic[T]):
    """Outcome of a soft-fail read.

    ``value`` always holds the neutral default when nothing was found, so
    callers that only want the value can ignore ``status``.
    """

    status: LookupStatus
    value: T
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.status in (LookupStatus.FOUND, LookupStatus.EMPTY)

    @classmethod
    def of(cls, value: T) -> "Lookup[T]":
        """Wrap a value read from a present element."""
        status = LookupStatus.FOUND if value else LookupStatus.EMPTY
        return cls(status, value)


@dataclass
class ScenarioResult:
    """Outcome of a single scenario run."""

    name: str
    outcome: str  # passed, failed, error
    failure_reason: str = ""
    duration_ms: int = 0
    screenshot_path: str = ""

    @property
    def passed(self) -> bool:
        return self.outcome == "passed"


@dataclass
class RunSummary:
    """Aggregated results for one suite run."""

    run_id: str = field(default_factory=lambda: uuid.uuid4().hex[:12])
    started_at: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )
    ended_at: str = ""
    results: list[ScenarioResult] = field(default_factory=list)

    @property
    def total_passed(self) -> int:
        return sum(1 for r in self.results if r.outcome == "passed")

    @property
    def total_failed(self) -> int:
        return sum(1 for r in self.results if r.outcome == "failed")

    @property
    def total_errors(self) -> int:
        return sum(1 for r in self.results if r.outcome == "error")

    @property
    def all_passed(self) -> bool:
        return all(r.passed for r in self.results)

    def finalize(self) -> None:
        self.ended_at = datetime.now(timezone.utc).isoformat()
