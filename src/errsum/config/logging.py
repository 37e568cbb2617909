# topmark:header:start
#
#   project      : ErrSum
#   file         : logging.py
#   file_relpath : src/errsum/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Internal logging for ErrSum, with a TRACE level below DEBUG.

ErrSum modules log through `get_logger(__name__)`, which returns an
`ErrsumLogger` (a `logging.Logger` with a `trace()` method). `setup_logging()`
attaches a single colored handler to the ``errsum`` package logger; the root
logger and the handlers of a host application are left untouched, and records
still propagate to them.

Internal logging is kept apart from reporter output: rendered diagnostics and
summaries go to an [`OutputSink`][errsum.sinks.OutputSink], never to these
loggers. Log records go to stderr by default, so they never mix with a report
written to stdout.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Callable, Final, TextIO, cast

from yachalk import ChalkFactory, ColorMode

from errsum.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Mapping

    from yachalk.chalk_builder import ChalkBuilder

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

# Logger that `setup_logging` configures; every module logger is a child of it
PACKAGE_LOGGER_NAME: Final[str] = "errsum"


class ErrsumLogger(logging.Logger):
    """Logger with an additional `trace()` method for the TRACE level."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` with severity TRACE.

        Args:
            msg (object): The message to be logged.
            *args (object): Arguments merged into ``msg``.
            extra (Mapping[str, object] | None): Extra attributes for the record.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.setLoggerClass(ErrsumLogger)


LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"

# (lowest level, builder chain), highest threshold first
LEVEL_COLORS: Final[tuple[tuple[int, Callable[[ChalkFactory], ChalkBuilder]], ...]] = (
    (logging.CRITICAL, lambda c: c.red_bright),
    (logging.ERROR, lambda c: c.red),
    (logging.WARNING, lambda c: c.yellow),
    (logging.INFO, lambda c: c.green),
    (logging.DEBUG, lambda c: c.gray),
    (TRACE_LEVEL, lambda c: c.blue),
)


class ChalkFormatter(logging.Formatter):
    """Formatter coloring each record by level with yachalk.

    Args:
        fmt (str): Record format, as for `logging.Formatter`.
        enable_color (bool): Whether records carry ANSI escape sequences.
    """

    def __init__(self, fmt: str = LOG_FORMAT, *, enable_color: bool = True) -> None:
        super().__init__(fmt)
        self.chalk = ChalkFactory(ColorMode.Basic16 if enable_color else ColorMode.AllOff)

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and color it according to its level."""
        message: str = super().format(record)
        for threshold, chain in LEVEL_COLORS:
            if record.levelno >= threshold:
                return chain(self.chalk)(message)
        # Below TRACE
        return self.chalk.dim.red(message)


def parse_log_level(value: str) -> int | None:
    """Return the level named or numbered by ``value``, or None if unknown.

    Names are matched case-insensitively against the levels registered with
    `logging` (including ``TRACE``, ``WARN`` and ``FATAL``).
    """
    name: str = value.strip().upper()
    if name.isdigit():
        return int(name)
    level: int | str = logging.getLevelName(name)
    return level if isinstance(level, int) else None


def resolve_env_log_level() -> int | None:
    """Return the level set by ``ERRSUM_LOG_LEVEL``, or None if unset or invalid."""
    value: str | None = os.environ.get(LOG_LEVEL_ENV_VAR)
    return parse_log_level(value) if value else None


def setup_logging(
    level: int | None = None,
    *,
    stream: TextIO | None = None,
    enable_color: bool | None = None,
) -> None:
    """Configure the ``errsum`` package logger.

    Replaces any handler previously installed on the package logger with one
    writing to ``stream``, so calling this again never duplicates records.

    Args:
        level: Log level; if None, ``ERRSUM_LOG_LEVEL`` decides, and CRITICAL
            applies when that is unset too.
        stream: Destination of log records. Defaults to `sys.stderr`.
        enable_color: Whether records are colored; if None, only when
            ``stream`` is a TTY.
    """
    if level is None:
        level = resolve_env_log_level()
    if level is None:
        level = logging.CRITICAL
    if stream is None:
        stream = sys.stderr
    if enable_color is None:
        enable_color = stream.isatty()

    package_logger: logging.Logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(level)
    for old in package_logger.handlers[:]:
        package_logger.removeHandler(old)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(
        ChalkFormatter(
            LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT,
            enable_color=enable_color,
        )
    )
    package_logger.addHandler(handler)


def get_logger(name: str) -> ErrsumLogger:
    """Return the `ErrsumLogger` called ``name``."""
    return cast("ErrsumLogger", logging.getLogger(name))
