# topmark:header:start
#
#   project      : ErrSum
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the ErrSum test suite.

Sets TRACE logging for test runs and provides recording doubles for the
reporter's collaborators: `RecordingSink` (output channels) and
`RecordingReporter` (delegate).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, cast

import pytest

from errsum.config import logging
from errsum.diagnostic.model import Position, Severity

F = TypeVar("F", bound=Callable[..., object])

# Base stripped from the absolute paths used throughout the tests
BASE: str = "/work/"


def as_typed_mark(mark: Any) -> Callable[[F], F]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    return as_typed_mark(pytest.mark.parametrize(*args, **kwargs))


def pos(
    file: str | None = "/work/src/A.scala",
    line: int | None = 1,
    content: str = "",
    pointer: str | None = None,
) -> Position:
    """Build a `Position` with test-friendly defaults."""
    return Position(source_file=file, line=line, line_content=content, pointer_space=pointer)


class RecordingSink:
    """Output sink keeping every call as a ``(channel, text)`` pair."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    def error(self, text: str) -> None:
        """Record ``text`` on the error channel."""
        self.calls.append(("error", text))

    def warn(self, text: str) -> None:
        """Record ``text`` on the warn channel."""
        self.calls.append(("warn", text))

    def info(self, text: str) -> None:
        """Record ``text`` on the info channel."""
        self.calls.append(("info", text))

    def texts(self) -> list[str]:
        """Return the recorded texts, without channels."""
        return [text for _, text in self.calls]


class RecordingReporter:
    """Delegate reporter logging every call it receives, in order."""

    def __init__(self, events: list[tuple[object, ...]] | None = None) -> None:
        self.events: list[tuple[object, ...]] = events if events is not None else []

    def record(self, position: Position, message: str, severity: Severity) -> None:
        """Log a ``record`` call."""
        self.events.append(("record", position, message, severity))

    def comment(self, position: Position, message: str) -> None:
        """Log a ``comment`` call."""
        self.events.append(("comment", position, message))

    def reset(self) -> None:
        """Log a ``reset`` call."""
        self.events.append(("reset",))

    def flush(self) -> None:
        """Log a ``flush`` call."""
        self.events.append(("flush",))

    def has_errors(self) -> bool:
        """Return True if an error was recorded."""
        return any(e[0] == "record" and e[3] is Severity.ERROR for e in self.events)

    def has_warnings(self) -> bool:
        """Return True if a warning was recorded."""
        return any(e[0] == "record" and e[3] is Severity.WARN for e in self.events)


@pytest.fixture
def sink() -> RecordingSink:
    """Return a fresh recording sink."""
    return RecordingSink()


@pytest.fixture
def delegate() -> RecordingReporter:
    """Return a fresh recording delegate."""
    return RecordingReporter()


@pytest.fixture(autouse=True)
def silence_errsum_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure ErrSum's log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv("ERRSUM_LOG_LEVEL", raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE so detailed output is captured during tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)
