# topmark:header:start
#
#   project      : ErrSum
#   file         : reporter.py
#   file_relpath : src/errsum/reporter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Concise reporter: records diagnostics and prints a compact summary.

`ConciseReporter` is the boundary of the core. It receives diagnostic events,
forwards every one of them to an optional delegate reporter, stores them, and on
`flush()` renders each diagnostic in full followed by the per-file summary.

Forwarding order:
    - ``record``/``comment``: delegate first, then local bookkeeping.
    - ``reset``: ``delegate.reset()`` then the local store is cleared.
    - ``flush``: ``delegate.flush()`` then local detail and summary rendering.

The reporter is meant to be driven from one thread per cycle.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from errsum.config.logging import get_logger
from errsum.diagnostic.model import Severity, highest_severity
from errsum.diagnostic.store import DiagnosticStore
from errsum.rendering.styles import Styler
from errsum.rendering.summary import SummaryFormatter

if TYPE_CHECKING:
    from collections.abc import Callable

    from errsum.config.logging import ErrsumLogger
    from errsum.config.model import ReporterConfig
    from errsum.diagnostic.model import Diagnostic, Position
    from errsum.sinks import OutputSink


logger: ErrsumLogger = get_logger(__name__)


class ReporterLike(Protocol):
    """Interface shared by reporters, and expected from a delegate."""

    def record(self, position: Position, message: str, severity: Severity) -> None:
        """Receive one diagnostic."""
        ...

    def comment(self, position: Position, message: str) -> None:
        """Receive a comment that is not a diagnostic."""
        ...

    def reset(self) -> None:
        """Start a new cycle."""
        ...

    def flush(self) -> None:
        """Render what was received during the cycle."""
        ...

    def has_errors(self) -> bool:
        """Return True if an error was received."""
        ...

    def has_warnings(self) -> bool:
        """Return True if a warning was received."""
        ...


class ConciseReporter:
    """A reporter that shows a summary of the lines with errors and warnings.

    Args:
        sink (OutputSink): Channels receiving the rendered text.
        enable_color (bool): Whether rendered text carries ANSI styles.
        base (str): Prefix removed from absolute source paths.
        delegate (ReporterLike | None): Another reporter that also receives
            every event.
        formatter (SummaryFormatter | None): Formatter to use instead of one
            built from ``enable_color`` and ``base``.
    """

    def __init__(
        self,
        sink: OutputSink,
        *,
        enable_color: bool = False,
        base: str = "",
        delegate: ReporterLike | None = None,
        formatter: SummaryFormatter | None = None,
    ) -> None:
        self.sink = sink
        self.delegate = delegate
        self.formatter: SummaryFormatter = formatter or SummaryFormatter(
            styler=Styler(enable_color=enable_color),
            base=base,
        )
        self.store = DiagnosticStore(base=self.formatter.base)

    @classmethod
    def from_config(
        cls,
        config: ReporterConfig,
        sink: OutputSink,
        *,
        delegate: ReporterLike | None = None,
    ) -> ConciseReporter:
        """Build a reporter whose styling, base and separators come from ``config``."""
        formatter = SummaryFormatter(
            styler=Styler(enable_color=bool(config.enable_color)),
            base=config.base,
            item_sep=config.item_sep,
            range_sep=config.range_sep,
        )
        return cls(sink, delegate=delegate, formatter=formatter)

    def record(self, position: Position, message: str, severity: Severity) -> None:
        """Forward the diagnostic to the delegate, then store it."""
        if self.delegate is not None:
            self.delegate.record(position, message, severity)
        self.store.record(severity, message, position)

    def comment(self, position: Position, message: str) -> None:
        """Forward a comment to the delegate; comments are never stored."""
        if self.delegate is not None:
            self.delegate.comment(position, message)

    def reset(self) -> None:
        """Reset the delegate, then drop all stored diagnostics."""
        if self.delegate is not None:
            self.delegate.reset()
        self.store.reset()

    def flush(self) -> None:
        """Print every stored diagnostic in full, then the summary.

        Each detail block goes to the channel of its own severity. Summary lines
        all go to the channel of the highest severity present (info when the
        store is empty).
        """
        if self.delegate is not None:
            self.delegate.flush()

        diagnostics: tuple[Diagnostic, ...] = self.store.all()
        logger.debug("Flushing %d diagnostics", len(diagnostics))

        for diagnostic in diagnostics:
            self._channel(diagnostic.severity)(self.formatter.render_detail(diagnostic))

        emit: Callable[[str], None] = self._channel(
            highest_severity(d.severity for d in diagnostics) or Severity.INFO
        )
        for line in self.formatter.summary_lines(diagnostics):
            emit(line)

    def has_errors(self) -> bool:
        """Return True if an error was recorded in this cycle."""
        return self.store.has_errors()

    def has_warnings(self) -> bool:
        """Return True if a warning was recorded in this cycle."""
        return self.store.has_warnings()

    def all_diagnostics(self) -> tuple[Diagnostic, ...]:
        """Return a snapshot of the diagnostics recorded in this cycle."""
        return self.store.all()

    def _channel(self, severity: Severity) -> Callable[[str], None]:
        if severity is Severity.ERROR:
            return self.sink.error
        if severity is Severity.WARN:
            return self.sink.warn
        return self.sink.info
