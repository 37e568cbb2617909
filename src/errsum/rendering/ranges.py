# topmark:header:start
#
#   project      : ErrSum
#   file         : ranges.py
#   file_relpath : src/errsum/rendering/ranges.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Concise textual formatting of integer sets.

Folds runs of consecutive integers into closed ranges so that long id or line
lists stay readable:

    >>> short([2, 5, 7, 8, 9, 10, 11, 12, 13, 14, 20])
    '2,5,7-14,20'
    >>> spaced([2, 5, 7, 8, 9])
    '2, 5, 7 - 9'

Duplicates are kept: a repeated value that does not continue a strictly
consecutive run is rendered as its own item (``short([3, 3, 5]) == "3,3,5"``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

from errsum.constants import (
    SHORT_ITEM_SEP,
    SHORT_RANGE_SEP,
    SPACED_ITEM_SEP,
    SPACED_RANGE_SEP,
)

if TYPE_CHECKING:
    from collections.abc import Iterable


class Span(NamedTuple):
    """Closed interval ``[start, end]``; a single value has ``start == end``."""

    start: int
    end: int

    def render(self, range_sep: str) -> str:
        """Return the span as ``"<start>"`` or ``"<start><range_sep><end>"``."""
        if self.start == self.end:
            return str(self.start)
        return f"{self.start}{range_sep}{self.end}"


def fold_spans(values: Iterable[int]) -> list[Span]:
    """Fold ``values`` into ascending spans of consecutive integers.

    Values are sorted ascending (duplicates retained) and scanned from the
    largest down: a value one below the start of the most recent span extends
    that span, anything else opens a new span.

    Args:
        values: Integers to fold, in any order.

    Returns:
        The spans in ascending order.
    """
    spans: list[Span] = []
    for value in sorted(values, reverse=True):
        if spans and value == spans[-1].start - 1:
            spans[-1] = Span(value, spans[-1].end)
        else:
            spans.append(Span(value, value))
    spans.reverse()
    return spans


def compress(values: Iterable[int], item_sep: str, range_sep: str) -> str:
    """Format a set of ints into a concise textual description.

    Args:
        values: Integers to describe; order is irrelevant.
        item_sep: Separator placed between items.
        range_sep: Separator placed between the bounds of a range.

    Returns:
        The concise description, or an empty string for no values.
    """
    return item_sep.join(span.render(range_sep) for span in fold_spans(values))


def short(values: Iterable[int]) -> str:
    """Compress ``values`` with compact separators (``"2,5,7-14,20"``)."""
    return compress(values, SHORT_ITEM_SEP, SHORT_RANGE_SEP)


def spaced(values: Iterable[int]) -> str:
    """Compress ``values`` with spaced separators (``"2, 5, 7 - 14, 20"``)."""
    return compress(values, SPACED_ITEM_SEP, SPACED_RANGE_SEP)
