# topmark:header:start
#
#   project      : ErrSum
#   file         : test_store.py
#   file_relpath : tests/diagnostic/test_store.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DiagnosticStore: id assignment, reset, severity queries and file grouping."""

from __future__ import annotations

from hypothesis import given

from errsum.diagnostic.model import Diagnostic, Position, Severity
from errsum.diagnostic.store import DiagnosticStore
from tests.conftest import BASE, pos
from tests.strategies_errsum import s_events


def test_ids_start_at_one_in_call_order() -> None:
    """Recorded diagnostics get ids 1, 2, 3 in call order."""
    store = DiagnosticStore()
    d1 = store.record(Severity.ERROR, "a", pos())
    d2 = store.record(Severity.WARN, "b", pos())
    d3 = store.record(Severity.INFO, "c", pos())
    assert [d1.id, d2.id, d3.id] == [1, 2, 3]
    assert store.all() == (d1, d2, d3)


def test_record_returns_stored_value() -> None:
    """The returned diagnostic carries the given severity, message and position."""
    store = DiagnosticStore()
    p: Position = pos(line=7)
    d = store.record(Severity.WARN, "careful", p)
    assert d == Diagnostic(id=1, severity=Severity.WARN, message="careful", position=p)


def test_reset_restarts_ids() -> None:
    """After a reset the store is empty and the next id is 1 again."""
    store = DiagnosticStore()
    store.record(Severity.ERROR, "a", pos())
    store.record(Severity.ERROR, "b", pos())
    store.reset()
    assert len(store) == 0
    assert store.record(Severity.WARN, "c", pos()).id == 1


def test_severity_queries() -> None:
    """`has_errors`/`has_warnings` reflect what is stored right now."""
    store = DiagnosticStore()
    assert not store.has_errors() and not store.has_warnings()
    store.record(Severity.INFO, "i", pos())
    assert not store.has_errors() and not store.has_warnings()
    store.record(Severity.WARN, "w", pos())
    assert store.has_warnings() and not store.has_errors()
    store.record(Severity.ERROR, "e", pos())
    assert store.has_errors()
    store.reset()
    assert not store.has_errors() and not store.has_warnings()


def test_all_is_a_snapshot() -> None:
    """Later records do not show up in an earlier snapshot."""
    store = DiagnosticStore()
    store.record(Severity.ERROR, "a", pos())
    snapshot = store.all()
    store.record(Severity.ERROR, "b", pos())
    assert len(snapshot) == 1
    assert len(store.all()) == 2


def test_group_by_file_normalizes_paths() -> None:
    """Keys are base-stripped paths without leading separators; no file means 'unknown'."""
    store = DiagnosticStore(base="/work")
    a1 = store.record(Severity.ERROR, "a1", pos("/work/src/A.scala"))
    b1 = store.record(Severity.WARN, "b1", pos("/work/src/B.scala"))
    u1 = store.record(Severity.INFO, "u1", pos(None))
    a2 = store.record(Severity.WARN, "a2", pos("/work/src/A.scala"))

    groups = store.group_by_file()

    assert list(groups) == ["src/A.scala", "src/B.scala", "unknown"]
    assert groups["src/A.scala"] == (a1, a2)
    assert groups["src/B.scala"] == (b1,)
    assert groups["unknown"] == (u1,)


def test_group_by_file_is_rebuilt() -> None:
    """Grouping reflects diagnostics recorded after a previous call."""
    store = DiagnosticStore(base=BASE)
    store.record(Severity.ERROR, "a", pos("/work/src/A.scala"))
    assert list(store.group_by_file()) == ["src/A.scala"]
    store.record(Severity.ERROR, "b", pos("/work/src/B.scala"))
    assert list(store.group_by_file()) == ["src/A.scala", "src/B.scala"]


def test_stats_counts_per_severity() -> None:
    """Stats count each severity separately."""
    store = DiagnosticStore()
    for severity in (Severity.ERROR, Severity.ERROR, Severity.WARN, Severity.INFO):
        store.record(severity, "m", pos())
    stats = store.stats()
    assert (stats.n_error, stats.n_warning, stats.n_info) == (2, 1, 1)
    assert stats.total == 4


@given(events=s_events)
def test_ids_are_one_to_n(events: list[tuple[Severity, str, Position]]) -> None:
    """For any sequence of records the ids are exactly 1..n, in order."""
    store = DiagnosticStore()
    ids: list[int] = [store.record(s, m, p).id for s, m, p in events]
    assert ids == list(range(1, len(events) + 1))
    assert store.has_errors() == any(s is Severity.ERROR for s, _, _ in events)
    assert store.has_warnings() == any(s is Severity.WARN for s, _, _ in events)
