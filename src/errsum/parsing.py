# topmark:header:start
#
#   project      : ErrSum
#   file         : parsing.py
#   file_relpath : src/errsum/parsing.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Parse compiler output into positioned diagnostics.

Recognized headers:
    - GCC/Clang/scalac style: ``path:line[:col]: (error|warning|note|info): message``
    - sbt style, with a severity tag: ``[error] path:line[:col]: message``

Lines following a header belong to it. When a caret line follows (whitespace,
then ``^``, optionally with ``~`` underlining around it, as Clang and GCC
print), the line just before it is the source line, the offset of the ``^`` is
the pointer offset, and lines between the header and the source line extend
the message; the caret line closes the diagnostic. Without a caret line, the
first continuation line is the source line and the others extend the message.

The ``NN | `` gutter that GCC 9+ and Scala 3 put before source and caret lines
is removed. Build trailers (``1 error generated.``, ``[error] one error
found``, ``Compilation failed``, ``[success] Total time: ...``) and GCC context
lines (``In file included from ...``, ``f.c: In function 'main':``) close the
current diagnostic and are otherwise ignored, as are lines outside any
diagnostic.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final

from errsum.config.logging import get_logger
from errsum.diagnostic.model import Position, Severity

if TYPE_CHECKING:
    from collections.abc import Iterable

    from errsum.config.logging import ErrsumLogger
    from errsum.reporter import ReporterLike

logger: ErrsumLogger = get_logger(__name__)

TAG_RE: Final[re.Pattern[str]] = re.compile(
    r"^\[(?P<tag>error|warn|warning|info|success|debug)\] ?"
)
HEADER_RE: Final[re.Pattern[str]] = re.compile(
    r"^(?P<file>[^\s:][^:]*):(?P<line>\d+):(?:(?P<col>\d+):)?\s*"
    r"(?:(?P<sev>fatal error|error|warning|note|info):\s*)?(?P<msg>.*)$"
)
CARET_RE: Final[re.Pattern[str]] = re.compile(r"^(?P<lead>[ \t~]*)\^[ \t~^]*$")
GUTTER_RE: Final[re.Pattern[str]] = re.compile(r"^\s*\d*\s*\|(?: |$)")
TRAILER_RE: Final[re.Pattern[str]] = re.compile(
    r"^(?:"
    r"\w+ (?:errors?|warnings?)(?: and \w+ (?:errors?|warnings?))? (?:found|generated)\.?"
    r"|(?:\(.*\) )?Compilation failed"
    r"|Total time:.*"
    r"|In file included from .*"
    r"|\s+from \S+:\d+[,:]"
    r"|[^:]+: (?:In (?:member )?function .*|At (?:global scope|top level)):"
    r")\s*$"
)

SEVERITY_NAMES: Final[dict[str, Severity]] = {
    "fatal error": Severity.ERROR,
    "error": Severity.ERROR,
    "warn": Severity.WARN,
    "warning": Severity.WARN,
    "note": Severity.INFO,
    "info": Severity.INFO,
}

# sbt tags that never introduce a diagnostic
SILENT_TAGS: Final[frozenset[str]] = frozenset({"success", "debug"})


@dataclass(frozen=True)
class ParsedDiagnostic:
    """A diagnostic read from compiler output, not yet recorded."""

    severity: Severity
    message: str
    position: Position


@dataclass
class _Pending:
    severity: Severity
    message: str
    source_file: str
    line: int
    continuation: list[str] = field(default_factory=lambda: [])

    def close(self, pointer_space: str | None = None) -> ParsedDiagnostic:
        extra: list[str] = self.continuation
        line_content: str = ""
        if pointer_space is not None and extra:
            line_content = extra[-1]
            extra = extra[:-1]
        elif extra:
            line_content = extra[0]
            extra = extra[1:]
        return ParsedDiagnostic(
            severity=self.severity,
            message="\n".join([self.message, *extra]),
            position=Position(
                source_file=self.source_file,
                line=self.line,
                line_content=line_content,
                pointer_space=pointer_space,
            ),
        )


def _match_header(text: str, tag: str | None) -> _Pending | None:
    m: re.Match[str] | None = HEADER_RE.match(text)
    if m is None:
        return None
    name: str | None = m.group("sev") or tag
    if name is None or name not in SEVERITY_NAMES:
        return None
    return _Pending(
        severity=SEVERITY_NAMES[name],
        message=m.group("msg"),
        source_file=m.group("file"),
        line=int(m.group("line")),
    )


def _is_trailer(tag: str | None, body: str) -> bool:
    return tag == "success" or TRAILER_RE.match(body) is not None


def _strip_gutter(body: str) -> str:
    m: re.Match[str] | None = GUTTER_RE.match(body)
    return body[m.end() :] if m else body


def parse_diagnostics(text: str) -> list[ParsedDiagnostic]:
    """Parse compiler output into diagnostics, in order of appearance.

    Args:
        text: Raw compiler output.

    Returns:
        The diagnostics found; an empty list if none.
    """
    parsed: list[ParsedDiagnostic] = []
    pending: _Pending | None = None

    for raw in text.splitlines():
        tag_match: re.Match[str] | None = TAG_RE.match(raw)
        tag: str | None = tag_match.group("tag") if tag_match else None
        body: str = raw[tag_match.end() :] if tag_match else raw

        if _is_trailer(tag, body):
            if pending is not None:
                parsed.append(pending.close())
                pending = None
            continue

        header: _Pending | None = _match_header(body, None if tag in SILENT_TAGS else tag)
        if header is not None:
            if pending is not None:
                parsed.append(pending.close())
            pending = header
            continue
        if pending is None:
            continue

        body = _strip_gutter(body)
        caret: re.Match[str] | None = CARET_RE.match(body)
        if caret is not None:
            # Underlining before the caret still counts as pointer offset
            pointer_space: str = caret.group("lead").replace("~", " ")
            parsed.append(pending.close(pointer_space=pointer_space))
            pending = None
        else:
            pending.continuation.append(body)

    if pending is not None:
        parsed.append(pending.close())
    logger.debug("Parsed %d diagnostics", len(parsed))
    return parsed


def feed(reporter: ReporterLike, diagnostics: Iterable[ParsedDiagnostic]) -> None:
    """Record each of ``diagnostics`` into ``reporter``, in order."""
    for d in diagnostics:
        reporter.record(d.position, d.message, d.severity)
