# topmark:header:start
#
#   project      : ErrSum
#   file         : __init__.py
#   file_relpath : src/errsum/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration and logging for ErrSum.

The reporter configuration model lives in [`errsum.config.model`][errsum.config.model]
and TOML loading in [`errsum.config.io`][errsum.config.io]. Logging setup is in
[`errsum.config.logging`][errsum.config.logging].
"""

from __future__ import annotations

from errsum.config.model import ReporterConfig

__all__ = [
    "ReporterConfig",
]
