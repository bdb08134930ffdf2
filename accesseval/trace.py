"""Reading page-access traces and annotating each access with its neighbours."""

from __future__ import annotations

import re
from dataclasses import dataclass
from os import PathLike
from typing import Iterable

TRACE_HEADER = "pages,is_write"

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


class TraceFormatError(ValueError):
    """Raised when a trace does not follow the ``pages,is_write`` format."""


@dataclass
class Access:
    """One page access of a trace.

    ``last_ref`` is the position of the previous access to the same page, or -1.
    ``next_ref`` is the position of the next access to the same page, or the
    length of the trace when the page is not accessed again.
    """

    pid: int
    write: bool
    pos: int
    last_ref: int = -1
    next_ref: int = -1


def _leading_int(text: str, line_no: int) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise TraceFormatError(f"line {line_no}: invalid page id {text!r}")
    return int(match.group(1))


def parse_trace(lines: Iterable[str]) -> list[Access]:
    """Parse trace lines (header first) into a list of annotated accesses."""
    rows = iter(lines)
    header = next(rows, None)
    if header is None:
        return []
    if header.rstrip("\n") != TRACE_HEADER:
        raise TraceFormatError(
            f"expected header {TRACE_HEADER!r}, got {header.rstrip(chr(10))!r}"
        )

    data: list[Access] = []
    last_seen: dict[int, int] = {}
    for pos, raw in enumerate(rows):
        line = raw.rstrip("\n")
        page_field, _, rest = line.partition(",")
        pid = _leading_int(page_field, pos + 2)
        data.append(Access(pid=pid, write="rue" in rest, pos=pos,
                           last_ref=last_seen.get(pid, -1)))
        last_seen[pid] = pos

    size = len(data)
    next_seen: dict[int, int] = {}
    for access in reversed(data):
        access.next_ref = next_seen.get(access.pid, size)
        next_seen[access.pid] = access.pos
    return data


def read_trace(path: str | PathLike[str]) -> list[Access]:
    """Read and parse the trace file at ``path``."""
    with open(path, encoding="utf-8") as handle:
        return parse_trace(handle)