# topmark:header:start
#
#   project      : ErrSum
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running ErrSum in a controlled working directory.

`run_cli` invokes the Click command from an isolated temporary directory, so
that config discovery never picks up files from the developer's checkout, and
restores test logging afterwards (the command reconfigures the root logger).
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol

import pytest
from click.testing import CliRunner

from errsum.cli.main import cli
from errsum.config.logging import TRACE_LEVEL, setup_logging

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from click.testing import Result


class RunCli(Protocol):
    """Signature of the `run_cli` fixture."""

    def __call__(self, argv: Sequence[str], *, input_text: str | None = None) -> Result:
        """Invoke the CLI with ``argv`` and optional stdin text."""
        ...


@pytest.fixture
def project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Return an empty project directory used as the working directory."""
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    return cwd


@pytest.fixture
def run_cli(project: Path) -> Iterator[RunCli]:
    """Yield a helper invoking the CLI from ``project``."""
    runner = CliRunner()

    def _run(argv: Sequence[str], *, input_text: str | None = None) -> Result:
        return runner.invoke(cli, list(argv), input=input_text)

    yield _run
    setup_logging(level=TRACE_LEVEL)
