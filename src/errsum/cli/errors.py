# topmark:header:start
#
#   project      : ErrSum
#   file         : errors.py
#   file_relpath : src/errsum/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the ErrSum CLI.

Usage:
    Raise these exceptions while handling a command to signal errors with
    standardized messages and exit codes.
"""

from __future__ import annotations

import click

from errsum.cli.exit_codes import ExitCode


class ErrsumError(click.ClickException):
    """Base class for all ErrSum CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text, without Click's coloring."""
        return str(getattr(self, "message", ""))


class ErrsumUsageError(ErrsumError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class ErrsumConfigError(ErrsumError):
    """Error for configuration errors (unreadable/malformed/invalid config)."""

    exit_code = ExitCode.CONFIG_ERROR


class ErrsumIOError(ErrsumError):
    """Error for I/O errors reading the compiler output."""

    exit_code = ExitCode.IO_ERROR
