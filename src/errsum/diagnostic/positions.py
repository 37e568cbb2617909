# topmark:header:start
#
#   project      : ErrSum
#   file         : positions.py
#   file_relpath : src/errsum/diagnostic/positions.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Accessors resolving a [`Position`][errsum.diagnostic.model.Position] for display."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from errsum.constants import UNKNOWN_FILE, UNKNOWN_PATH

if TYPE_CHECKING:
    from errsum.diagnostic.model import Position


def show_path(source_file: str | None, base: str) -> str:
    """Return the absolute path of ``source_file`` with ``base`` stripped.

    Args:
        source_file: The file whose path to show, or None.
        base: Prefix removed from the absolute path (no-op if it does not match).

    Returns:
        The displayed path, or ``"Unknown"`` when there is no file.
    """
    if source_file is None:
        return UNKNOWN_PATH
    path: str = str(Path(source_file).absolute())
    if base and path.startswith(base):
        return path[len(base) :]
    return path


def position_file(position: Position, base: str = "") -> str:
    """Return the displayed file of ``position``, or ``"unknown"``."""
    if position.source_file is None:
        return UNKNOWN_FILE
    return show_path(position.source_file, base)


def position_line(position: Position) -> int:
    """Return the line of ``position``, defaulting to 0."""
    return position.line if position.line is not None else 0


def show_file(path: str) -> str:
    """Strip leading path separators from ``path``."""
    return path.lstrip("/")
