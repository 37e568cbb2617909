# topmark:header:start
#
#   project      : ErrSum
#   file         : model.py
#   file_relpath : src/errsum/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core diagnostic types for ErrSum.

Sections:
    * Severity: importance of a diagnostic, ordered ERROR > WARN > INFO.
    * Position: where a diagnostic points (file, line, source line, caret offset).
    * Diagnostic: immutable recorded diagnostic with its stable id.
    * DiagnosticStats: aggregated per-severity counts.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity of a diagnostic.

    Severities are ordered by importance: ERROR > WARN > INFO. The order decides
    which output channel a whole summary is written to.
    """

    INFO = "info"
    WARN = "warn"
    ERROR = "error"

    @property
    def rank(self) -> int:
        """Return the importance of this severity (higher is more important)."""
        return _RANKS[self]


_RANKS: dict[Severity, int] = {
    Severity.INFO: 0,
    Severity.WARN: 1,
    Severity.ERROR: 2,
}


def highest_severity(severities: Iterable[Severity]) -> Severity | None:
    """Return the most important severity in ``severities``, or None if empty."""
    return max(severities, key=lambda s: s.rank, default=None)


@dataclass(frozen=True)
class Position:
    """Source position attached to a diagnostic.

    Attributes:
        source_file: Path of the source file as reported, or None when unknown.
        line: 1-based line number, or None when unknown.
        line_content: The literal text of the offending source line.
        pointer_space: Whitespace prefix placing a caret under the issue column,
            or None when no column is known.
    """

    source_file: str | None = None
    line: int | None = None
    line_content: str = ""
    pointer_space: str | None = None


@dataclass(frozen=True)
class Diagnostic:
    """A recorded diagnostic (a "problem").

    Ids are assigned by [`DiagnosticStore`][errsum.diagnostic.store.DiagnosticStore]
    in arrival order starting at 1.
    """

    id: int
    severity: Severity
    message: str
    position: Position


@dataclass(frozen=True)
class DiagnosticStats:
    """Aggregated counts for diagnostics by severity."""

    n_info: int
    n_warning: int
    n_error: int

    @property
    def total(self) -> int:
        """Return the total count of diagnostics."""
        return self.n_info + self.n_warning + self.n_error

    def count(self, severity: Severity) -> int:
        """Return the count for ``severity``."""
        if severity is Severity.ERROR:
            return self.n_error
        if severity is Severity.WARN:
            return self.n_warning
        return self.n_info


def compute_diagnostic_stats(diagnostics: Iterable[Diagnostic]) -> DiagnosticStats:
    """Return per-severity counts for a sequence of diagnostics.

    Args:
        diagnostics: The diagnostics to count.

    Returns:
        Per-severity counts.
    """
    items: list[Diagnostic] = list(diagnostics)
    n_info: int = sum(1 for d in items if d.severity is Severity.INFO)
    n_warn: int = sum(1 for d in items if d.severity is Severity.WARN)
    n_err: int = sum(1 for d in items if d.severity is Severity.ERROR)
    return DiagnosticStats(n_info=n_info, n_warning=n_warn, n_error=n_err)
