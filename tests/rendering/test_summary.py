# topmark:header:start
#
#   project      : ErrSum
#   file         : test_summary.py
#   file_relpath : tests/rendering/test_summary.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SummaryFormatter: full-detail blocks and per-file summaries (colors off)."""

from __future__ import annotations

from errsum.diagnostic.model import Diagnostic, Position, Severity
from errsum.diagnostic.store import DiagnosticStore
from errsum.rendering.styles import Styler
from errsum.rendering.summary import SummaryFormatter, prefixed
from tests.conftest import BASE, pos

A: str = "/work/src/A.scala"
B: str = "/work/src/B.scala"


def _formatter(**kwargs: str) -> SummaryFormatter:
    return SummaryFormatter(styler=Styler(enable_color=False), base=BASE, **kwargs)


def _store(*events: tuple[Severity, str, Position]) -> DiagnosticStore:
    store = DiagnosticStore(base=BASE)
    for severity, message, position in events:
        store.record(severity, message, position)
    return store


# --- detail ---


def test_detail_error_block() -> None:
    """An error block is prefixed with its id and indented to the prefix width."""
    d = Diagnostic(1, Severity.ERROR, "type mismatch", pos(A, 10, "val x = 1", "    "))
    assert _formatter().render_detail(d) == (
        "[1] src/A.scala:10:\n    type mismatch\n    val x = 1\n        ^"
    )


def test_detail_warning_has_extra_leading_space() -> None:
    """Warnings get one extra leading space so brackets line up with errors."""
    d = Diagnostic(2, Severity.WARN, "unused", pos(B, 3, "import x", "       "))
    assert _formatter().render_detail(d) == (
        " [2] src/B.scala:3:\n     unused\n     import x\n            ^"
    )


def test_detail_multiline_message_is_indented() -> None:
    """Every continuation line of a multi-line message is indented."""
    d = Diagnostic(12, Severity.ERROR, "found: Int\nrequired: String", pos(A, 4, "f(1)", "  "))
    assert _formatter().render_detail(d).splitlines() == [
        "[12] src/A.scala:4:",
        "     found: Int",
        "     required: String",
        "     f(1)",
        "       ^",
    ]


def test_detail_without_pointer_or_file() -> None:
    """No pointer line is printed without an offset; unknown files show as 'unknown'."""
    d = Diagnostic(3, Severity.INFO, "note", pos(None, None, "code"))
    assert _formatter().render_detail(d) == "[3] unknown:0:\n    note\n    code"


def test_prefixed_styles_only_the_prefix() -> None:
    """The prefix is styled; the paragraph is left as is."""
    styler = Styler(enable_color=True)
    out: str = prefixed("[1] ", "a\nb", styler=styler)
    assert out == "\x1b[1m\x1b[34m[1] \x1b[22m\x1b[39ma\n    b"


# --- summary ---


def test_single_file_prints_only_totals() -> None:
    """With one file there is no per-file breakdown."""
    store = _store(
        (Severity.ERROR, "e", pos(A, 1)),
        (Severity.WARN, "w", pos(A, 2)),
        (Severity.WARN, "w", pos(A, 3)),
    )
    assert _formatter().summary_lines(store.all()) == [
        "2 warnings found.",
        "1 error found.",
    ]


def test_empty_cycle_prints_nothing() -> None:
    """No diagnostics, no summary."""
    assert _formatter().summary_lines([]) == []
    assert _formatter().render_summary([]) == ""


def test_end_to_end_scenario() -> None:
    """Files sorted, compressed ids and lines, totals warnings-then-errors."""
    store = _store(
        (Severity.ERROR, "msg1", pos(A, 10)),
        (Severity.WARN, "msg2", pos(B, 3)),
        (Severity.ERROR, "msg3", pos(A, 12)),
    )
    assert [d.id for d in store.all()] == [1, 2, 3]
    assert _formatter().summary_lines(store.all()) == [
        "2 src/A.scala [1,3] @ [10,12]",
        "1 src/B.scala [2] @ [3]",
        "1 warning found.",
        "2 errors found.",
    ]


def test_errors_before_warnings_and_filename_once() -> None:
    """A file with both severities names itself only on its first line."""
    store = _store(
        (Severity.WARN, "w", pos(A, 4)),
        (Severity.ERROR, "e", pos(A, 3)),
        (Severity.ERROR, "e", pos(B, 1)),
    )
    assert _formatter().summary_lines(store.all()) == [
        "1 src/A.scala [2] @ [3]",
        "1             [1] @ [4]",
        "1 src/B.scala [3] @ [1]",
        "1 warning found.",
        "2 errors found.",
    ]


def test_counts_are_aligned_across_files() -> None:
    """Count width follows the largest per-severity count of the cycle."""
    events = [(Severity.ERROR, "e", pos(A, line)) for line in range(1, 11)]
    events.append((Severity.WARN, "w", pos(B, 5)))
    store = _store(*events)
    assert _formatter().summary_lines(store.all()) == [
        "10 src/A.scala [1-10] @ [1-10]",
        " 1 src/B.scala [11] @ [5]",
        "1 warning found.",
        "10 errors found.",
    ]


def test_infos_are_not_summarized() -> None:
    """Info diagnostics produce neither per-file lines nor totals."""
    store = _store(
        (Severity.INFO, "i", pos(A, 1)),
        (Severity.INFO, "i", pos(B, 1)),
    )
    assert _formatter().summary_lines(store.all()) == []


def test_unknown_files_are_grouped() -> None:
    """Diagnostics without a file are summarized under 'unknown'."""
    store = _store(
        (Severity.ERROR, "e", pos(None, None)),
        (Severity.ERROR, "e", pos(A, 7)),
    )
    assert _formatter().summary_lines(store.all())[:2] == [
        "1 src/A.scala [2] @ [7]",
        "1 unknown [1] @ [0]",
    ]


def test_custom_separators() -> None:
    """Configured separators apply to both id and line lists."""
    store = _store(
        (Severity.ERROR, "e", pos(A, 1)),
        (Severity.ERROR, "e", pos(A, 2)),
        (Severity.ERROR, "e", pos(A, 3)),
        (Severity.ERROR, "e", pos(A, 9)),
        (Severity.ERROR, "e", pos(B, 1)),
    )
    lines = _formatter(item_sep=", ", range_sep=" - ").summary_lines(store.all())
    assert lines[0] == "4 src/A.scala [1 - 4] @ [1 - 3, 9]"


def test_render_summary_joins_lines() -> None:
    """`render_summary` is the newline-joined form of `summary_lines`."""
    store = _store((Severity.ERROR, "e", pos(A, 1)), (Severity.WARN, "w", pos(B, 2)))
    formatter = _formatter()
    assert formatter.render_summary(store.all()) == "\n".join(formatter.summary_lines(store.all()))


def test_colored_totals_use_total_styles() -> None:
    """With colors on, totals are wrapped in their styles."""
    store = _store((Severity.ERROR, "e", pos(A, 1)), (Severity.WARN, "w", pos(A, 2)))
    formatter = SummaryFormatter(styler=Styler(enable_color=True), base=BASE)
    assert formatter.summary_lines(store.all()) == [
        "\x1b[43m\x1b[30m1 warning found.\x1b[49m\x1b[39m",
        "\x1b[41m1 error found.\x1b[49m",
    ]
