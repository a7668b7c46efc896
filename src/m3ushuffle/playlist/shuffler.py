"""Random reordering of playlist tracks."""

from __future__ import annotations

import logging
import random

from m3ushuffle.models import Playlist

logger = logging.getLogger(__name__)

# Seeded from the OS entropy source when the module is imported.
_default_rng = random.Random()


def shuffle_playlist(playlist: Playlist, *, rng: random.Random | None = None) -> Playlist:
    """Return a new playlist holding the same tracks in uniformly random order."""
    if len(playlist) < 2:
        return playlist

    tracks = list(playlist.tracks)
    (rng or _default_rng).shuffle(tracks)
    logger.debug("Shuffled %d tracks", len(tracks))
    return Playlist(tuple(tracks))
