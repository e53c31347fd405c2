from __future__ import annotations

from typing import Iterator, Optional

from .models import Playlist


def serialize_lines(playlist: Playlist) -> Iterator[str]:
    if playlist.header is not None:
        yield playlist.header
    for entry in playlist.entries:
        yield from entry.lines()


def serialize(playlist: Playlist, newline: Optional[str] = None) -> str:
    """Render a playlist; every line, including the last, ends with `newline`."""
    nl = playlist.newline if newline is None else newline
    return "".join(f"{line}{nl}" for line in serialize_lines(playlist))
