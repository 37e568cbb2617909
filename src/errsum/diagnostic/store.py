# topmark:header:start
#
#   project      : ErrSum
#   file         : store.py
#   file_relpath : src/errsum/diagnostic/store.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Ordered, id-assigning collection of diagnostics for one reporting cycle.

The store is the single owner of recorded diagnostics. Ids are assigned
sequentially from 1 in arrival order; `reset()` empties the store and the next
recorded diagnostic gets id 1 again. The store is not thread-safe: ``record``
must be called from one thread per cycle.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from errsum.config.logging import get_logger
from errsum.diagnostic.model import (
    Diagnostic,
    DiagnosticStats,
    Position,
    Severity,
    compute_diagnostic_stats,
)
from errsum.diagnostic.positions import position_file, show_file

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from errsum.config.logging import ErrsumLogger


logger: ErrsumLogger = get_logger(__name__)


def group_by_file(
    diagnostics: Iterable[Diagnostic],
    base: str = "",
) -> dict[str, tuple[Diagnostic, ...]]:
    """Group ``diagnostics`` by normalized file path.

    Args:
        diagnostics: Diagnostics in id order.
        base: Path prefix stripped from absolute source paths.

    Returns:
        Mapping from normalized file path to that file's diagnostics, in
        first-seen order.
    """
    groups: dict[str, list[Diagnostic]] = {}
    for d in diagnostics:
        key: str = show_file(position_file(d.position, base))
        groups.setdefault(key, []).append(d)
    logger.trace("Grouped diagnostics into %d files", len(groups))
    return {key: tuple(items) for key, items in groups.items()}


class DiagnosticStore:
    """Mutable, insertion-ordered collection of diagnostics.

    Args:
        base: Path prefix stripped from absolute source paths when grouping.
    """

    def __init__(self, *, base: str = "") -> None:
        self.base: str = base
        self._items: list[Diagnostic] = []

    def record(self, severity: Severity, message: str, position: Position) -> Diagnostic:
        """Store a new diagnostic and return it with its assigned id.

        Args:
            severity: Severity of the diagnostic.
            message: Diagnostic text; may span several lines.
            position: Where the diagnostic points.

        Returns:
            The stored diagnostic.
        """
        diagnostic = Diagnostic(
            id=len(self._items) + 1,
            severity=severity,
            message=message,
            position=position,
        )
        self._items.append(diagnostic)
        logger.trace("Recorded [%d] %s: %r", diagnostic.id, severity.value, message)
        return diagnostic

    def reset(self) -> None:
        """Remove all diagnostics; ids restart at 1."""
        logger.debug("Resetting store (%d diagnostics dropped)", len(self._items))
        self._items.clear()

    def has_errors(self) -> bool:
        """Return True if any stored diagnostic is an error."""
        return any(d.severity is Severity.ERROR for d in self._items)

    def has_warnings(self) -> bool:
        """Return True if any stored diagnostic is a warning."""
        return any(d.severity is Severity.WARN for d in self._items)

    def all(self) -> tuple[Diagnostic, ...]:
        """Return a snapshot of all diagnostics in id order."""
        return tuple(self._items)

    def stats(self) -> DiagnosticStats:
        """Return per-severity counts for the stored diagnostics."""
        return compute_diagnostic_stats(self._items)

    def group_by_file(self) -> dict[str, tuple[Diagnostic, ...]]:
        """Group diagnostics by normalized file path.

        The key is the displayed file path (``base`` stripped) with leading
        separators removed; diagnostics without a file go under ``"unknown"``.
        Groups keep id order and the mapping keeps first-seen order. The view
        is rebuilt on every call.

        Returns:
            Mapping from normalized file path to that file's diagnostics.
        """
        return group_by_file(self._items, self.base)

    def __iter__(self) -> Iterator[Diagnostic]:
        """Iterate over stored diagnostics in id order."""
        return iter(self._items)

    def __len__(self) -> int:
        """Return the number of stored diagnostics."""
        return len(self._items)
