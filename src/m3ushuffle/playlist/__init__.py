"""Parse, shuffle and serialize m3u playlists."""

from .parser import EXTINF, EXTM3U, parse_lines, parse_stream, parse_text, read_lines
from .serializer import iter_serialized_lines, serialize
from .shuffler import shuffle_playlist

__all__ = [
    "EXTINF",
    "EXTM3U",
    "iter_serialized_lines",
    "parse_lines",
    "parse_stream",
    "parse_text",
    "read_lines",
    "serialize",
    "shuffle_playlist",
]
