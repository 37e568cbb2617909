# topmark:header:start
#
#   project      : ErrSum
#   file         : main.py
#   file_relpath : src/errsum/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point: summarize compiler output read from a file or stdin.

The command parses the input into diagnostics, records them into a
[`ConciseReporter`][errsum.reporter.ConciseReporter] writing to the terminal,
and flushes it once. The exit code tells whether errors were found.

Configuration is layered: defaults, then the nearest ``errsum.toml`` /
``pyproject.toml`` (or the file given with ``--config``), then CLI options.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click

from errsum.cli.errors import ErrsumIOError
from errsum.cli.exit_codes import ExitCode
from errsum.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from errsum.config.io import find_config, load_config
from errsum.config.logging import get_logger, setup_logging
from errsum.config.model import ReporterConfig
from errsum.constants import ERRSUM_VERSION, SPACED_ITEM_SEP, SPACED_RANGE_SEP
from errsum.parsing import feed, parse_diagnostics
from errsum.reporter import ConciseReporter
from errsum.sinks import ClickSink

if TYPE_CHECKING:
    from errsum.config.logging import ErrsumLogger
    from errsum.parsing import ParsedDiagnostic

logger: ErrsumLogger = get_logger(__name__)


def resolve_config(config_path: Path | None, *, cwd: Path) -> ReporterConfig:
    """Return the file-level configuration.

    Args:
        config_path: Explicit config file (``--config``), or None to search.
        cwd: Directory where the search for a config file starts.

    Returns:
        The loaded configuration, or the defaults when no file applies.
    """
    if config_path is None:
        config_path = find_config(cwd)
    if config_path is None:
        logger.debug("No config file found from %s", cwd)
        return ReporterConfig()
    return load_config(config_path)


def resolve_enable_color(
    config: ReporterConfig,
    *,
    color_mode: ColorMode | None,
    no_color: bool,
) -> bool:
    """Combine the color CLI options with the configured color setting."""
    if no_color:
        return False
    if color_mode is None and config.enable_color is not None:
        return config.enable_color
    return resolve_color_mode(cli_mode=color_mode or ColorMode.AUTO)


def read_source(source: str) -> str:
    """Return the text of ``source`` (a path, or ``-`` for stdin).

    Raises:
        ErrsumIOError: If the file cannot be read.
    """
    if source == "-":
        return sys.stdin.read()
    try:
        return Path(source).read_text(encoding="utf-8")
    except OSError as e:
        raise ErrsumIOError(f"Cannot read {source}: {e}") from e


@click.command(
    context_settings={"help_option_names": ["-h", "--help"]},
    help="Summarize compiler diagnostics read from SOURCE (default: stdin).",
)
@click.argument(
    "source",
    type=click.Path(dir_okay=False, allow_dash=True),
    default="-",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Read settings from this TOML file instead of searching for one.",
)
@click.option(
    "--base",
    default=None,
    help="Prefix removed from absolute source paths when displayed.",
)
@click.option(
    "--spaced",
    is_flag=True,
    help="Use spaced separators in compressed lists ('2, 7 - 9').",
)
@common_verbose_options
@common_color_options
@click.version_option(ERRSUM_VERSION, "--version", prog_name="errsum")
@click.pass_context
def cli(
    ctx: click.Context,
    source: str,
    config_path: Path | None,
    base: str | None,
    spaced: bool,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the ErrSum CLI."""
    setup_logging(level=resolve_verbosity(verbose, quiet))

    config: ReporterConfig = resolve_config(config_path, cwd=Path.cwd())
    enable_color: bool = resolve_enable_color(
        config,
        color_mode=ColorMode(color_mode) if color_mode else None,
        no_color=no_color,
    )
    config = config.replace(enable_color=enable_color, base=base)
    if spaced:
        config = config.replace(item_sep=SPACED_ITEM_SEP, range_sep=SPACED_RANGE_SEP)
    logger.debug("Effective config: %r", config)

    parsed: list[ParsedDiagnostic] = parse_diagnostics(read_source(source))

    reporter = ConciseReporter.from_config(config, ClickSink(enable_color=enable_color))
    feed(reporter, parsed)
    reporter.flush()

    ctx.exit(ExitCode.FAILURE if reporter.has_errors() else ExitCode.SUCCESS)


if __name__ == "__main__":
    cli()
