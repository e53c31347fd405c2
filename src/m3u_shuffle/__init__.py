"""Shuffle extended-m3u playlists while keeping each #EXTINF line with its track.

Public API:
- Entry
- Playlist
- parse
- serialize
- shuffle_entries
"""

from .m3u import Entry, Playlist, parse, serialize
from .shuffle import shuffle_entries

__version__ = "0.1.0"

__all__ = [
    "Entry",
    "Playlist",
    "parse",
    "serialize",
    "shuffle_entries",
    "__version__",
]
