# topmark:header:start
#
#   project      : ErrSum
#   file         : __main__.py
#   file_relpath : src/errsum/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running ErrSum via ``python -m errsum``.

Delegates to :func:`errsum.cli.main.cli`, the same entry point as the
``errsum`` console script.

Examples:
    Summarize a saved build log::

        python -m errsum build.log
"""

from __future__ import annotations

from errsum.cli.main import cli

if __name__ == "__main__":
    # We call the Click command directly
    cli()
