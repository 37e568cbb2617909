# topmark:header:start
#
#   project      : ErrSum
#   file         : __init__.py
#   file_relpath : src/errsum/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Human-facing rendering: range compression, styling and summaries."""

from __future__ import annotations
