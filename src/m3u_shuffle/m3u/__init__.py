"""Extended m3u parsing and rendering.

Public API:
- Entry
- Playlist
- parse / parse_lines / split_lines
- serialize / serialize_lines
"""

from .models import EXTINF, EXTM3U, Entry, Playlist
from .parser import parse, parse_lines, split_lines
from .serializer import serialize, serialize_lines

__all__ = [
    "EXTINF",
    "EXTM3U",
    "Entry",
    "Playlist",
    "parse",
    "parse_lines",
    "split_lines",
    "serialize",
    "serialize_lines",
]
