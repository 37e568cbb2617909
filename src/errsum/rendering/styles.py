# topmark:header:start
#
#   project      : ErrSum
#   file         : styles.py
#   file_relpath : src/errsum/rendering/styles.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Abstract text styles and the switchable styler applying them.

Each `Style` member names a role in the rendered output (file path, id list,
severity, totals) and carries the `yachalk` builder chain for that role.
Rendering code never calls `yachalk` directly; it goes through a `Styler`,
which is a no-op when colors are disabled.

The shared `yachalk.chalk` instance picks its color mode from the terminal at
import time. A `Styler` owns its own `ChalkFactory` instead, so that enabling
colors always yields ANSI sequences, whether or not stdout is a TTY.

Example:
    ```python
    styler = Styler(enable_color=False)
    styler.apply(Style.ID, "[1]")  # '[1]'
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Callable, Final, Protocol

from yachalk import ChalkFactory, ColorMode

from errsum.diagnostic.model import Severity

if TYPE_CHECKING:
    from yachalk.chalk_builder import ChalkBuilder


# ANSI mode used when colors are enabled; the styles only use the 16 base colors
ENABLED_COLOR_MODE: Final[ColorMode] = ColorMode.Basic16


class Colorizer(Protocol):
    """Callable that decorates a string for display.

    Compatible with `yachalk.ChalkBuilder.__call__`; ErrSum always calls it
    with a single string.
    """

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Return the decorated, space-joined rendering of ``args``."""
        ...


class Style(str, Enum):
    """Style roles used by the reporter, each bound to a builder chain.

    The enum value is the role name. `colorizer()` builds the role's colorizer
    from a given `ChalkFactory`; builders are created per call because yachalk
    builders accumulate codes as they are chained.
    """

    _value_: str
    _chain: Callable[[ChalkFactory], ChalkBuilder]

    def __new__(cls, text: str, chain: Callable[[ChalkFactory], ChalkBuilder]) -> Style:
        """Construct a style member storing ``text`` as value and ``chain`` aside."""
        obj: Style = str.__new__(cls, text)
        obj._value_ = text
        obj._chain = chain
        return obj

    PATH = ("path", lambda c: c.underline.bold.yellow)
    FILE = ("file", lambda c: c.underline.yellow)
    ID = ("id", lambda c: c.bold.blue)
    INFO = ("info", lambda c: c.blue)
    WARN = ("warn", lambda c: c.yellow)
    ERROR = ("error", lambda c: c.bold.red)
    WARN_TOTAL = ("warn-total", lambda c: c.bg_yellow.black)
    ERROR_TOTAL = ("error-total", lambda c: c.bg_red)

    def colorizer(self, factory: ChalkFactory) -> Colorizer:
        """Return a fresh colorizer for this style, built from ``factory``."""
        return self._chain(factory)

    @classmethod
    def for_severity(cls, severity: Severity) -> Style:
        """Return the style used for line numbers and counts of ``severity``."""
        if severity is Severity.ERROR:
            return cls.ERROR
        if severity is Severity.WARN:
            return cls.WARN
        return cls.INFO


class Styler:
    """Apply styles to text, or pass text through unchanged when disabled.

    Args:
        enable_color (bool): Whether styles produce ANSI escape sequences.
    """

    def __init__(self, *, enable_color: bool = False) -> None:
        self.enable_color = enable_color
        self.chalk = ChalkFactory(ENABLED_COLOR_MODE if enable_color else ColorMode.AllOff)

    def apply(self, style: Style, text: str) -> str:
        """Return ``text`` wrapped in ``style``, resetting to neutral afterwards."""
        if not self.enable_color:
            return text
        return style.colorizer(self.chalk)(text)
