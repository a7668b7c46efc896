"""Command-line entry point for m3u-shuffle."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from m3ushuffle.errors import IoFailure, PlaylistError
from m3ushuffle.models import Playlist
from m3ushuffle.playlist import parse_stream, serialize, shuffle_playlist

logger = logging.getLogger(__name__)

STDIO = "-"


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument(
    "file_path",
    metavar="FILE",
    type=click.Path(path_type=Path, dir_okay=False, allow_dash=True),
    required=False,
)
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(path_type=Path, dir_okay=False),
    required=False,
    help="Output file to write to.",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    default=False,
    help="Log debug details to stderr.",
)
@click.version_option(package_name="m3u-shuffle")
def main(file_path: Path | None, output_path: Path | None, verbose: bool) -> None:
    """Shuffle an m3u playlist. If no file is given, reads from STDIN."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        playlist = _read_playlist(file_path)
    except IoFailure as exc:
        raise click.ClickException(str(exc)) from exc
    except PlaylistError as exc:
        raise click.ClickException(f"Unable to parse m3u file: {exc}") from exc

    playlist = shuffle_playlist(playlist)

    try:
        _write_playlist(playlist, output_path)
    except IoFailure as exc:
        raise click.ClickException(str(exc)) from exc


def _read_playlist(file_path: Path | None) -> Playlist:
    source = STDIO if file_path is None else str(file_path)
    logger.debug("Reading playlist from %s", _describe(source, "standard input"))
    try:
        handle = click.open_file(source, "rb")
    except OSError as exc:
        raise IoFailure(source, exc, action="open file to read from") from exc
    with handle:
        return parse_stream(handle)


def _write_playlist(playlist: Playlist, output_path: Path | None) -> None:
    payload = serialize(playlist).encode("utf-8")
    target = STDIO if output_path is None else str(output_path)
    name = _describe(target, "<stdout>")

    logger.debug("Writing %d tracks to %s", len(playlist), name)
    try:
        handle = click.open_file(target, "wb")
    except OSError as exc:
        raise IoFailure(name, exc, action="open file to write to") from exc
    # closing a named file flushes again, so close errors count as write errors
    try:
        with handle:
            handle.write(payload)
            handle.flush()
    except OSError as exc:
        raise IoFailure(name, exc, action="write to output file") from exc


def _describe(target: str, stdio_name: str) -> str:
    return stdio_name if target == STDIO else target


if __name__ == "__main__":
    main()
