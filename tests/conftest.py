"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from m3ushuffle.models import Playlist, Track


BASIC_PLAYLIST = (
    "#EXTM3U\n"
    "#EXTINF:0,Artist1 - Title1\n"
    "path/to/file1.mp3\n"
    "#EXTINF:0,Artist2 - Title2\n"
    "path/to/file2.mp3\n"
)


@pytest.fixture
def basic_text() -> str:
    return BASIC_PLAYLIST


@pytest.fixture
def sample_playlist() -> Playlist:
    return Playlist(
        (
            Track(path="path/to/file1.mp3", extinf="#EXTINF:0,Artist1 - Title1"),
            Track(path="path/to/file2.mp3", extinf="#EXTINF:0,Artist2 - Title2"),
            Track(path="http://radio.example/stream"),
            Track(path="music/intro.ogg", extinf="#EXTINF:-1,Intro"),
        )
    )


@pytest.fixture
def playlist_file(tmp_path: Path, basic_text: str) -> Path:
    target = tmp_path / "input.m3u"
    target.write_bytes(basic_text.encode("utf-8"))
    return target
