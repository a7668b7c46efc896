"""Rendering of a :class:`Playlist` back to m3u text."""

from __future__ import annotations

from typing import Iterator

from m3ushuffle.models import Playlist

from .parser import EXTM3U


def iter_serialized_lines(playlist: Playlist) -> Iterator[str]:
    """Yield every output line, header first, without terminators."""
    yield EXTM3U
    for track in playlist:
        yield from track.lines()


def serialize(playlist: Playlist) -> str:
    """Return the playlist as text, each line terminated by ``\\n``."""
    return "".join(f"{line}\n" for line in iter_serialized_lines(playlist))
