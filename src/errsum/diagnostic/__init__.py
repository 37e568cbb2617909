# topmark:header:start
#
#   project      : ErrSum
#   file         : __init__.py
#   file_relpath : src/errsum/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic primitives and the per-cycle diagnostic store.

Design:
    - Diagnostics are immutable `Diagnostic` instances carrying a stable id.
    - During a cycle, diagnostics accumulate in a `DiagnosticStore`, the only
      place where ids are assigned.
    - Grouping by file is a derived view, rebuilt on each request.
"""

from __future__ import annotations

from errsum.diagnostic.model import (
    Diagnostic,
    DiagnosticStats,
    Position,
    Severity,
    compute_diagnostic_stats,
    highest_severity,
)
from errsum.diagnostic.positions import position_file, position_line, show_file, show_path
from errsum.diagnostic.store import DiagnosticStore, group_by_file

__all__ = [
    "Diagnostic",
    "DiagnosticStats",
    "DiagnosticStore",
    "Position",
    "Severity",
    "compute_diagnostic_stats",
    "group_by_file",
    "highest_severity",
    "position_file",
    "position_line",
    "show_file",
    "show_path",
]
