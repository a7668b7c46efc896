"""Data structures representing playlist entries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(slots=True, frozen=True)
class Track:
    """Represents one playlist entry and its optional ``#EXTINF`` line."""

    path: str
    extinf: str | None = None

    def __post_init__(self) -> None:
        if not self.path:
            raise ValueError("Track path must not be empty")

    def has_extinf(self) -> bool:
        """Return True when a metadata directive is attached."""
        return self.extinf is not None

    def lines(self) -> Iterator[str]:
        """Yield the output lines of this track in file order."""
        if self.extinf is not None:
            yield self.extinf
        yield self.path


@dataclass(slots=True, frozen=True)
class Playlist:
    """An ordered, immutable sequence of tracks."""

    tracks: tuple[Track, ...] = ()

    def __len__(self) -> int:
        return len(self.tracks)

    def __iter__(self) -> Iterator[Track]:
        return iter(self.tracks)
