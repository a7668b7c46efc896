from __future__ import annotations

from m3ushuffle.models import Playlist, Track
from m3ushuffle.playlist import iter_serialized_lines, parse_text, serialize


def test_serialize_empty_playlist() -> None:
    assert serialize(Playlist()) == "#EXTM3U\n"
    assert serialize(parse_text("#EXTM3U\n")) == "#EXTM3U\n"


def test_serialize_reproduces_input(basic_text: str) -> None:
    assert serialize(parse_text(basic_text)) == basic_text


def test_serialize_normalizes_windows_newlines(basic_text: str) -> None:
    output = serialize(parse_text(basic_text.replace("\n", "\r\n")))

    assert output == basic_text
    assert "\r" not in output


def test_serialize_drops_blank_lines_and_dangling_metadata() -> None:
    text = "#EXTM3U\n\n#EXTINF:0,A\n\na.mp3\n\nb.mp3\n#EXTINF:0,Orphan\n"

    assert serialize(parse_text(text)) == "#EXTM3U\n#EXTINF:0,A\na.mp3\nb.mp3\n"


def test_serialized_lines_follow_track_order(sample_playlist: Playlist) -> None:
    assert list(iter_serialized_lines(sample_playlist)) == [
        "#EXTM3U",
        "#EXTINF:0,Artist1 - Title1",
        "path/to/file1.mp3",
        "#EXTINF:0,Artist2 - Title2",
        "path/to/file2.mp3",
        "http://radio.example/stream",
        "#EXTINF:-1,Intro",
        "music/intro.ogg",
    ]


def test_header_line_is_normalized() -> None:
    playlist = parse_text("#EXTM3U extra\n" + "a.mp3\n")

    assert serialize(playlist) == "#EXTM3U\na.mp3\n"


def test_track_lines_without_metadata() -> None:
    assert list(Track(path="a.mp3").lines()) == ["a.mp3"]
