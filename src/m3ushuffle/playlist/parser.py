"""Parsing of the m3u line format into a :class:`Playlist`."""

from __future__ import annotations

import logging
from typing import BinaryIO, Iterable, Iterator

from m3ushuffle.errors import MissingHeader, UnreadableLine
from m3ushuffle.models import Playlist, Track

logger = logging.getLogger(__name__)

EXTM3U = "#EXTM3U"
EXTINF = "#EXTINF"

# Unicode White_Space; str.isspace() would also count \x1c-\x1f as blank.
_WHITESPACE = (
    " \t\n\x0b\x0c\r\x85\xa0\u1680\u2000\u2001\u2002\u2003\u2004\u2005"
    "\u2006\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000"
)


def _strip_terminator(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def read_lines(stream: BinaryIO, *, encoding: str = "utf-8") -> Iterator[str]:
    """Yield decoded lines from a binary stream without their terminators.

    Lines are split on ``\\n`` only; a ``\\r`` directly before it is dropped
    as part of the terminator. Decoding or read failures surface as
    :class:`UnreadableLine`.
    """
    while True:
        try:
            raw = stream.readline()
        except OSError as exc:
            raise UnreadableLine(f"cannot read line: {exc}") from exc
        if not raw:
            return
        try:
            text = raw.decode(encoding)
        except UnicodeDecodeError as exc:
            raise UnreadableLine(f"cannot read line: {exc}") from exc
        yield _strip_terminator(text)


def split_lines(text: str) -> list[str]:
    """Split a text blob the same way :func:`read_lines` splits a stream."""
    pieces = text.split("\n")
    last = pieces.pop()
    lines = [piece[:-1] if piece.endswith("\r") else piece for piece in pieces]
    if last:
        lines.append(last)
    return lines


def parse_lines(lines: Iterable[str]) -> Playlist:
    """Build a playlist from terminator-free lines.

    The first line must start with ``#EXTM3U``. Blank lines are skipped and
    do not break adjacency, so an ``#EXTINF`` line attaches to the next
    non-blank line that is not itself an ``#EXTINF`` line. A later
    ``#EXTINF`` replaces a pending one; one left pending at the end is dropped.
    """
    iterator = iter(lines)
    header = next(iterator, None)
    if header is None:
        raise MissingHeader("Missing #EXTM3U header: cannot read empty input")
    if not header.startswith(EXTM3U):
        raise MissingHeader()

    tracks: list[Track] = []
    extinf: str | None = None
    for line in iterator:
        if not line.strip(_WHITESPACE):
            continue
        if line.startswith(EXTINF):
            if extinf is not None:
                logger.debug("Replacing unattached metadata line %r", extinf)
            extinf = line
            continue
        tracks.append(Track(path=line, extinf=extinf))
        extinf = None

    if extinf is not None:
        logger.debug("Dropping trailing metadata line %r", extinf)
    logger.debug("Parsed %d tracks", len(tracks))
    return Playlist(tuple(tracks))


def parse_text(text: str) -> Playlist:
    """Parse a whole playlist held in memory."""
    return parse_lines(split_lines(text))


def parse_stream(stream: BinaryIO, *, encoding: str = "utf-8") -> Playlist:
    """Parse a playlist from a binary stream, aborting on the first bad line."""
    return parse_lines(read_lines(stream, encoding=encoding))
