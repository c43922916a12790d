"""Test case records, failure exceptions and the per-test context."""

from __future__ import annotations

import contextvars
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, List, Optional, Sequence

from gentest.model import FixtureLifetime


class Failure(Exception):
    """Raised by a test to fail immediately with a message."""


class Assertion(Exception):
    """Raised when a fatal assertion aborts a test; its failure is already recorded."""


@dataclass
class Case:
    """A runnable test case as registered with the runner."""

    name: str
    fn: Callable[[Any], Any]
    file: str = ""
    line: int = 0
    is_benchmark: bool = False
    is_jitter: bool = False
    is_baseline: bool = False
    tags: Sequence[str] = ()
    requirements: Sequence[str] = ()
    skip_reason: str = ""
    should_skip: bool = False
    fixture: str = ""
    fixture_lifetime: FixtureLifetime = FixtureLifetime.NONE
    suite: str = ""
    acquire_fixture: Optional[Callable[[str], Any]] = None


@dataclass(frozen=True)
class FailureLocation:
    """Where a failure was reported; empty file or zero line means unknown."""

    file: str = ""
    line: int = 0


@dataclass
class TestContext:
    """Failures, logs and the ordered event timeline of the running test."""

    __test__ = False

    display_name: str = ""
    active: bool = False
    failures: List[str] = field(default_factory=list)
    logs: List[str] = field(default_factory=list)
    event_lines: List[str] = field(default_factory=list)
    event_kinds: List[str] = field(default_factory=list)
    failure_locations: List[FailureLocation] = field(default_factory=list)

    def add_failure(self, message: str, file: str = "", line: int = 0) -> None:
        """Record a failure with its optional source location."""
        self.failures.append(message)
        self.failure_locations.append(FailureLocation(file, line))
        self.event_lines.append(message)
        self.event_kinds.append("F")

    def log(self, message: str) -> None:
        """Record a log line in the timeline."""
        self.logs.append(message)
        self.event_lines.append(message)
        self.event_kinds.append("L")

    def events(self) -> Iterator[tuple]:
        """Yield ``(kind, line)`` pairs in the order they were recorded."""
        for idx, line in enumerate(self.event_lines):
            kind = self.event_kinds[idx] if idx < len(self.event_kinds) else "L"
            yield kind, line


_current: contextvars.ContextVar[Optional[TestContext]] = contextvars.ContextVar(
    "gentest_current_test", default=None
)


def current_context() -> Optional[TestContext]:
    """The context of the test now running, or None."""
    return _current.get()


@contextmanager
def active_context(name: str) -> Iterator[TestContext]:
    """Make a fresh TestContext current for the duration of the block."""
    ctx = TestContext(display_name=name, active=True)
    token = _current.set(ctx)
    try:
        yield ctx
    finally:
        ctx.active = False
        _current.reset(token)