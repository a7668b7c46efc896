"""Playlist data model."""

from .track import Playlist, Track

__all__ = ["Playlist", "Track"]
