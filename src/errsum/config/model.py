# topmark:header:start
#
#   project      : ErrSum
#   file         : model.py
#   file_relpath : src/errsum/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reporter configuration model.

`ReporterConfig` is an immutable snapshot. Layers (defaults, config file, CLI
options) are combined with `ReporterConfig.replace`, the later layer winning.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from errsum.constants import SHORT_ITEM_SEP, SHORT_RANGE_SEP


@dataclass(frozen=True)
class ReporterConfig:
    """Settings controlling how a reporter renders diagnostics.

    Attributes:
        enable_color: Whether rendered text carries ANSI styles; None leaves
            the decision to the caller (the CLI then checks the terminal).
        base: Prefix removed from absolute source paths before display.
        item_sep: Separator between items of compressed id/line lists.
        range_sep: Separator between the bounds of a compressed range.
    """

    enable_color: bool | None = None
    base: str = ""
    item_sep: str = SHORT_ITEM_SEP
    range_sep: str = SHORT_RANGE_SEP

    def replace(self, **overrides: object) -> ReporterConfig:
        """Return a copy with ``overrides`` applied; None values are ignored."""
        changes: dict[str, object] = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)  # type: ignore[arg-type]
