# topmark:header:start
#
#   project      : ErrSum
#   file         : summary.py
#   file_relpath : src/errsum/rendering/summary.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Full-detail and summary rendering of recorded diagnostics.

Detail rendering turns one diagnostic into a block such as:

    [3] src/Foo.scala:12:
        type mismatch
        val x: Int = "a"
                     ^

Summary rendering closes a cycle. When diagnostics span more than one file it
prints one line per file and severity, with aligned counts, compressed ids and
compressed lines, followed by the totals:

    2 src/A.scala [1,3] @ [10,12]
    1 src/B.scala [2] @ [3]
    1 warning found.
    2 errors found.

(the second line above being a warning subset). Rendering never mutates its
input, so rendering the same diagnostics twice yields the same text.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from errsum.constants import IDS_LINES_SEP, SHORT_ITEM_SEP, SHORT_RANGE_SEP
from errsum.diagnostic.model import Severity, compute_diagnostic_stats
from errsum.diagnostic.positions import position_file, position_line, show_file
from errsum.diagnostic.store import group_by_file
from errsum.rendering.ranges import compress
from errsum.rendering.styles import Style, Styler

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from errsum.diagnostic.model import Diagnostic, DiagnosticStats

# Severities broken down per file, in print order
PER_FILE_SEVERITIES: tuple[Severity, ...] = (Severity.ERROR, Severity.WARN)

# (severity, unit, style) for the totals, in print order
TOTALS: tuple[tuple[Severity, str, Style], ...] = (
    (Severity.WARN, "warning", Style.WARN_TOTAL),
    (Severity.ERROR, "error", Style.ERROR_TOTAL),
)


def prefixed(prefix: str, paragraph: str, *, styler: Styler) -> str:
    """Put ``prefix`` before ``paragraph`` and indent its other lines to match.

    Args:
        prefix: The prefix to insert (styled as an id).
        paragraph: The block of text to prefix and indent.
        styler: Styler applied to the prefix.

    Returns:
        The prefixed and indented paragraph.
    """
    indent: str = "\n" + " " * len(prefix)
    return styler.apply(Style.ID, prefix) + indent.join(paragraph.splitlines())


class SummaryFormatter:
    """Render diagnostics in full and summarize a completed cycle.

    Args:
        styler (Styler): Style provider; disabled stylers yield plain text.
        base (str): Path prefix stripped from absolute source paths.
        item_sep (str): Separator between items of compressed id/line lists.
        range_sep (str): Separator between the bounds of a compressed range.
    """

    def __init__(
        self,
        *,
        styler: Styler | None = None,
        base: str = "",
        item_sep: str = SHORT_ITEM_SEP,
        range_sep: str = SHORT_RANGE_SEP,
    ) -> None:
        self.styler: Styler = styler or Styler()
        self.base: str = base
        self.item_sep: str = item_sep
        self.range_sep: str = range_sep

    def render_detail(self, diagnostic: Diagnostic) -> str:
        """Return the full message block for ``diagnostic``.

        The block starts with ``[<id>] `` (one extra leading space for warnings
        so their brackets line up with errors) and continuation lines are
        indented to the prefix width.
        """
        style = self.styler.apply
        position = diagnostic.position
        file: str = show_file(position_file(position, self.base))
        line: int = position_line(position)
        pointer: str = f"{position.pointer_space}^" if position.pointer_space is not None else ""
        text: str = "\n".join(
            [
                f"{style(Style.PATH, file)}:"
                f"{style(Style.for_severity(diagnostic.severity), str(line))}:",
                diagnostic.message,
                position.line_content,
                pointer,
            ]
        )
        extra_space: str = " " if diagnostic.severity is Severity.WARN else ""
        return prefixed(f"{extra_space}[{diagnostic.id}] ", text, styler=self.styler)

    def summary_lines(self, diagnostics: Iterable[Diagnostic]) -> list[str]:
        """Return the summary of a cycle as separate lines.

        Per-file lines are only produced when more than one file is involved;
        they come sorted by file, errors before warnings within each file. The
        warning total then the error total follow, each only when non-zero.

        Args:
            diagnostics: All diagnostics of the cycle, in id order.

        Returns:
            The summary lines (possibly empty).
        """
        items: list[Diagnostic] = list(diagnostics)
        stats: DiagnosticStats = compute_diagnostic_stats(items)
        lines: list[str] = []

        groups: dict[str, tuple[Diagnostic, ...]] = group_by_file(items, self.base)
        if len(groups) > 1:
            width: int = max(
                len(str(stats.count(s))) for s in (Severity.INFO, Severity.WARN, Severity.ERROR)
            )
            for file in sorted(groups):
                lines.extend(self._file_lines(file, groups[file], width))

        for severity, unit, total_style in TOTALS:
            n: int = stats.count(severity)
            if n != 0:
                units: str = unit if n == 1 else unit + "s"
                lines.append(self.styler.apply(total_style, f"{n} {units} found."))
        return lines

    def render_summary(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Return the summary of a cycle as a single block of text."""
        return "\n".join(self.summary_lines(diagnostics))

    def _file_lines(
        self,
        file: str,
        in_file: Sequence[Diagnostic],
        width: int,
    ) -> list[str]:
        style = self.styler.apply
        lines: list[str] = []
        for severity in PER_FILE_SEVERITIES:
            subset: list[Diagnostic] = [d for d in in_file if d.severity is severity]
            if not subset:
                continue
            sev_style: Style = Style.for_severity(severity)
            count: str = style(sev_style, str(len(subset)).rjust(width))
            # Only the first line of a file names it
            name: str = style(Style.FILE, file) if not lines else " " * len(file)
            ids: str = style(Style.ID, f"[{self._compress(d.id for d in subset)}]")
            at_lines: str = style(
                sev_style, f"[{self._compress(position_line(d.position) for d in subset)}]"
            )
            lines.append(f"{count} {name} {ids}{IDS_LINES_SEP}{at_lines}")
        return lines

    def _compress(self, values: Iterable[int]) -> str:
        return compress(values, self.item_sep, self.range_sep)
