# topmark:header:start
#
#   project      : ErrSum
#   file         : constants.py
#   file_relpath : src/errsum/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ErrSum Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    ERRSUM_VERSION: str = get_version("errsum")
except PackageNotFoundError:  # running from a source checkout
    ERRSUM_VERSION = "0.0.0"

# Group key for diagnostics without a source file
UNKNOWN_FILE: str = "unknown"

# Displayed path for a missing source file (detail headers)
UNKNOWN_PATH: str = "Unknown"

# Separators used by the two range compression presets
SHORT_ITEM_SEP: str = ","
SHORT_RANGE_SEP: str = "-"
SPACED_ITEM_SEP: str = ", "
SPACED_RANGE_SEP: str = " - "

# Separator between the id list and the line list in per-file summary lines
IDS_LINES_SEP: str = " @ "

# Configuration file names, in lookup order
CONFIG_FILE_NAME: str = "errsum.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_TABLE: str = "errsum"

LOG_LEVEL_ENV_VAR: str = "ERRSUM_LOG_LEVEL"
