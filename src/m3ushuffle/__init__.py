"""Shuffle the entries of an m3u playlist."""

from .models import Playlist, Track

__all__ = ["Playlist", "Track"]
