# topmark:header:start
#
#   project      : ErrSum
#   file         : sinks.py
#   file_relpath : src/errsum/sinks.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output sinks receiving rendered reporter text.

A sink is a line-oriented channel selected by severity. Each call receives one
logical message, which may span several lines. Sinks do not style text; styling
is already applied (or not) by the reporter.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Protocol, TextIO

import click

if TYPE_CHECKING:
    import logging


class OutputSink(Protocol):
    """Minimal interface for the channels a reporter writes to."""

    def error(self, text: str) -> None:
        """Write a message to the error channel."""
        ...

    def warn(self, text: str) -> None:
        """Write a message to the warning channel."""
        ...

    def info(self, text: str) -> None:
        """Write a message to the info channel."""
        ...


class LoggerSink:
    """Sink forwarding each message to a `logging.Logger`.

    Args:
        logger (logging.Logger): Logger receiving the messages at ERROR,
            WARNING and INFO level.
    """

    def __init__(self, logger: logging.Logger) -> None:
        self.logger = logger

    def error(self, text: str) -> None:
        """Log ``text`` at ERROR level."""
        self.logger.error("%s", text)

    def warn(self, text: str) -> None:
        """Log ``text`` at WARNING level."""
        self.logger.warning("%s", text)

    def info(self, text: str) -> None:
        """Log ``text`` at INFO level."""
        self.logger.info("%s", text)


class ClickSink:
    """Program-output sink writing through Click.

    Info goes to ``out``; warnings and errors go to ``err``.

    Args:
        enable_color (bool): If False, Click strips ANSI codes from the output.
        out (TextIO | None): Stream for info messages. Defaults to `sys.stdout`.
        err (TextIO | None): Stream for warnings and errors. Defaults to `sys.stderr`.
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def error(self, text: str) -> None:
        """Write ``text`` to the error stream."""
        click.echo(text, file=self.err, color=self.enable_color)

    def warn(self, text: str) -> None:
        """Write ``text`` to the error stream."""
        click.echo(text, file=self.err, color=self.enable_color)

    def info(self, text: str) -> None:
        """Write ``text`` to the output stream."""
        click.echo(text, file=self.out, color=self.enable_color)
