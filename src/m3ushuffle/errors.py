"""Failures raised while reading, parsing or writing a playlist."""

from __future__ import annotations


class PlaylistError(Exception):
    """Base class for every failure the shuffle pipeline reports."""


class IoFailure(PlaylistError):
    """An input or output resource could not be opened, read or written."""

    def __init__(self, resource: str, cause: BaseException, *, action: str = "access") -> None:
        super().__init__(f"Unable to {action} '{resource}': {cause}")
        self.resource = resource
        self.cause = cause
        self.action = action


class MissingHeader(PlaylistError):
    """The input is empty or its first line lacks the ``#EXTM3U`` marker."""

    def __init__(self, message: str = "Missing #EXTM3U header") -> None:
        super().__init__(message)


class UnreadableLine(PlaylistError):
    """A line could not be read or decoded from an open source."""
