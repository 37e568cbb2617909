# topmark:header:start
#
#   project      : ErrSum
#   file         : io.py
#   file_relpath : src/errsum/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load reporter configuration from TOML files.

Two sources are supported:
- a standalone ``errsum.toml`` whose top-level keys configure the reporter, and
- a ``pyproject.toml`` carrying an ``[tool.errsum]`` table.

Parsing is done with `tomlkit` and the result is validated into a
[`ReporterConfig`][errsum.config.model.ReporterConfig].
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from errsum.cli.errors import ErrsumConfigError
from errsum.config.keys import Toml
from errsum.config.logging import get_logger
from errsum.config.model import ReporterConfig
from errsum.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME, PYPROJECT_TOOL_TABLE

if TYPE_CHECKING:
    from pathlib import Path

    from errsum.config.logging import ErrsumLogger

TomlTable = dict[str, Any]

logger: ErrsumLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document.

    Returns:
        The parsed TOML content as plain Python values.

    Raises:
        ErrsumConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        raise ErrsumConfigError(f"Cannot read config file {path}: {e}") from e
    except TomlkitParseError as e:
        raise ErrsumConfigError(f"Invalid TOML in {path}: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_errsum_table(data: TomlTable, path: Path) -> TomlTable | None:
    """Return the ErrSum settings table of a parsed document.

    For ``pyproject.toml`` the ``[tool.errsum]`` table is returned (None when
    absent); any other file is taken as a whole.
    """
    if path.name != PYPROJECT_FILE_NAME:
        return data
    tool: Any = data.get("tool", {})
    table: Any = tool.get(PYPROJECT_TOOL_TABLE) if isinstance(tool, dict) else None
    return cast("TomlTable", table) if isinstance(table, dict) else None


def config_from_dict(table: TomlTable, *, origin: str = "<dict>") -> ReporterConfig:
    """Validate a settings table into a `ReporterConfig`.

    Unknown keys are ignored with a warning.

    Args:
        table: Settings keyed by `Toml` key names.
        origin: Where the table came from, for messages.

    Returns:
        The resulting configuration, defaults filling missing keys.

    Raises:
        ErrsumConfigError: If a value has the wrong type.
    """
    known: dict[str, Toml] = {k.value: k for k in Toml}
    values: dict[str, object] = {}
    for name, value in table.items():
        key: Toml | None = known.get(name)
        if key is None:
            logger.warning("Ignoring unknown config key %r in %s", name, origin)
            continue
        if not isinstance(value, key.expected_type):
            raise ErrsumConfigError(
                f"Config key {name!r} in {origin} must be a "
                f"{key.expected_type.__name__}, got {type(value).__name__}"
            )
        values[key.field] = value
    return ReporterConfig().replace(**values)


def load_config(path: Path) -> ReporterConfig:
    """Load a `ReporterConfig` from ``path``.

    A ``pyproject.toml`` without ``[tool.errsum]`` yields the defaults.
    """
    data: TomlTable = load_toml_dict(path)
    table: TomlTable | None = extract_errsum_table(data, path)
    if table is None:
        logger.debug("No [tool.%s] table in %s", PYPROJECT_TOOL_TABLE, path)
        return ReporterConfig()
    logger.debug("Loaded config from %s", path)
    return config_from_dict(table, origin=str(path))


def find_config(start: Path) -> Path | None:
    """Find the nearest configuration file from ``start`` upwards.

    In each directory ``errsum.toml`` wins over a ``pyproject.toml``; the latter
    only counts when it has a ``[tool.errsum]`` table.

    Args:
        start: Directory where the search begins.

    Returns:
        The configuration file, or None if there is none.
    """
    for directory in (start, *start.parents):
        candidate: Path = directory / CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate
        pyproject: Path = directory / PYPROJECT_FILE_NAME
        if (
            pyproject.is_file()
            and extract_errsum_table(load_toml_dict(pyproject), pyproject) is not None
        ):
            return pyproject
    return None
