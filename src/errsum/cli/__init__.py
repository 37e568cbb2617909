# topmark:header:start
#
#   project      : ErrSum
#   file         : __init__.py
#   file_relpath : src/errsum/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Command-line interface for ErrSum (Click based).

The entry point is [`errsum.cli.main.cli`][errsum.cli.main.cli].
"""

from __future__ import annotations
