# topmark:header:start
#
#   project      : ErrSum
#   file         : __init__.py
#   file_relpath : src/errsum/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ErrSum package.

ErrSum is a concise diagnostic reporter for compiler output. It records
positioned diagnostics, renders each one in full, and closes every cycle with
a compact per-file summary where diagnostic ids and line numbers are folded
into readable ranges (``7-14,20``).
"""

from __future__ import annotations

from errsum.diagnostic.model import Diagnostic, Position, Severity
from errsum.diagnostic.store import DiagnosticStore
from errsum.rendering.ranges import compress, short, spaced
from errsum.rendering.summary import SummaryFormatter
from errsum.reporter import ConciseReporter, ReporterLike

__all__ = [
    "ConciseReporter",
    "Diagnostic",
    "DiagnosticStore",
    "Position",
    "ReporterLike",
    "Severity",
    "SummaryFormatter",
    "compress",
    "short",
    "spaced",
]
