# topmark:header:start
#
#   project      : ErrSum
#   file         : keys.py
#   file_relpath : src/errsum/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML keys recognized in ErrSum configuration files."""

from __future__ import annotations

from enum import Enum


class Toml(str, Enum):
    """Configuration keys, mapped to `ReporterConfig` field names via `field`."""

    COLOR = "color"
    BASE = "base"
    ITEM_SEPARATOR = "item-separator"
    RANGE_SEPARATOR = "range-separator"

    @property
    def field(self) -> str:
        """Return the `ReporterConfig` attribute configured by this key."""
        return {
            Toml.COLOR: "enable_color",
            Toml.BASE: "base",
            Toml.ITEM_SEPARATOR: "item_sep",
            Toml.RANGE_SEPARATOR: "range_sep",
        }[self]

    @property
    def expected_type(self) -> type:
        """Return the Python type a value for this key must have."""
        return bool if self is Toml.COLOR else str
