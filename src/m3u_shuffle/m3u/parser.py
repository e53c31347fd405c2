from __future__ import annotations

import enum
from typing import Iterable, List, Optional, Tuple

from m3u_shuffle import logger as logger_mod
from m3u_shuffle.errors import EmptyInputError, MissingHeaderError

from .models import EXTINF, EXTM3U, Entry, Playlist

log = logger_mod.get_logger()

BOM = "\ufeff"


class State(enum.Enum):
    AWAITING_HEADER = "awaiting_header"
    AWAITING_ENTRY = "awaiting_entry"
    PENDING_META = "pending_meta"


def split_lines(text: str) -> Tuple[List[str], str]:
    """Split decoded text into lines and report the newline style.

    Only "\\n" (optionally preceded by "\\r") ends a line; other Unicode line
    breaks are left inside the line so paths stay opaque.
    """
    if not text:
        return [], "\n"

    first_break = text.find("\n")
    newline = "\r\n" if first_break > 0 and text[first_break - 1] == "\r" else "\n"

    raw = text.split("\n")
    if raw[-1] == "":
        raw.pop()

    return [line[:-1] if line.endswith("\r") else line for line in raw], newline


class _Parser:
    def __init__(self, require_header: bool):
        self.require_header = require_header
        self.state = State.AWAITING_HEADER
        self.header: Optional[str] = None
        self.entries: List[Entry] = []
        self.meta: Optional[str] = None
        self.leading: List[str] = []
        self.directives: List[str] = []
        self.seen_content = False

    def feed(self, lineno: int, raw: str) -> None:
        line = raw
        if line.endswith("\n"):
            line = line[:-2] if line.endswith("\r\n") else line[:-1]
        if lineno == 1 and line.startswith(BOM):
            line = line[len(BOM) :]
        if not line.strip():
            return

        if self.state is State.AWAITING_HEADER:
            self.seen_content = True
            self.state = State.AWAITING_ENTRY
            if line.startswith(EXTM3U):
                self.header = line
                return
            if self.require_header:
                raise MissingHeaderError(
                    f"Missing {EXTM3U} header (line {lineno}: {line!r})"
                )
            log.warning(f"No {EXTM3U} header; continuing without one")

        if line.startswith(EXTINF):
            if self.meta is not None:
                log.warning(
                    f"Dropping {EXTINF} line with no track before line {lineno}: "
                    f"{self.meta!r}"
                )
            self.leading.extend(self.directives)
            self.directives = []
            self.meta = line
            self.state = State.PENDING_META
        elif line.startswith(EXTM3U):
            log.warning(f"Ignoring repeated {EXTM3U} header at line {lineno}")
        elif line.startswith("#"):
            self.directives.append(line)
        else:
            self.entries.append(
                Entry(
                    uri=line,
                    meta=self.meta,
                    directives=tuple(self.directives),
                    leading=tuple(self.leading),
                )
            )
            self.meta = None
            self.leading = []
            self.directives = []
            self.state = State.AWAITING_ENTRY

    def finish(self, newline: str) -> Playlist:
        if not self.seen_content and self.require_header:
            raise EmptyInputError("Cannot read empty input")

        if self.meta is not None or self.leading or self.directives:
            orphaned = self.leading + ([self.meta] if self.meta is not None else [])
            orphaned += self.directives
            log.warning(f"Dropping trailing lines with no track: {orphaned!r}")

        log.debug(
            f"Parsed {len(self.entries)} entries (header={self.header is not None})"
        )
        return Playlist(entries=self.entries, header=self.header, newline=newline)


def parse_lines(
    lines: Iterable[str],
    *,
    require_header: bool = True,
    newline: str = "\n",
) -> Playlist:
    """Group lines into entries.

    Rules:
    - The first non-blank line must start with #EXTM3U unless `require_header` is False.
    - Blank lines are dropped.
    - An #EXTINF line is held until the next track line and attached to it.
    - Other "#" lines ride along with the next track, in order.
    - #EXTINF / directive lines with no track after them are dropped (logged).
    """
    parser = _Parser(require_header)
    for lineno, line in enumerate(lines, start=1):
        parser.feed(lineno, line)
    return parser.finish(newline)


def parse(text: str, *, require_header: bool = True) -> Playlist:
    lines, newline = split_lines(text)
    return parse_lines(lines, require_header=require_header, newline=newline)
