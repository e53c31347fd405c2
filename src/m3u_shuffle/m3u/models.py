from __future__ import annotations

import random
from dataclasses import dataclass, field, replace
from typing import List, Optional, Tuple

from m3u_shuffle.shuffle import shuffle_entries

EXTM3U = "#EXTM3U"
EXTINF = "#EXTINF"


@dataclass(frozen=True)
class Entry:
    """One shuffle unit: optional #EXTINF line, extra directives, and the track line.

    `leading` holds "#" lines that came before the #EXTINF line, `directives` the
    ones between it and the track, so `lines()` reproduces file order.
    """

    uri: str
    meta: Optional[str] = None
    directives: Tuple[str, ...] = ()
    leading: Tuple[str, ...] = ()

    def lines(self) -> List[str]:
        out: List[str] = list(self.leading)
        if self.meta is not None:
            out.append(self.meta)
        out.extend(self.directives)
        out.append(self.uri)
        return out


@dataclass
class Playlist:
    """Parse result: header line (if any) plus entries in order.

    `newline` remembers the input's line terminator so rendering can reuse it.
    """

    entries: List[Entry] = field(default_factory=list)
    header: Optional[str] = None
    newline: str = "\n"

    @property
    def has_header(self) -> bool:
        return self.header is not None

    def shuffled(self, rng: Optional[random.Random] = None) -> Playlist:
        """Return a copy with the entries permuted; this playlist is left as is."""
        return replace(self, entries=shuffle_entries(self.entries, rng))
