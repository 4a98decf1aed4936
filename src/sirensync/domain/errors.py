"""Domain error types.

Domain errors are raised by validating constructors and parsers. They never leave
partially built state behind and always carry the offending raw input.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sirensync.domain.model.ids import AlbumId, SongId


class DomainError(ValueError):
    """Base class for invariant violations and malformed domain input."""


class FailedToParseIdError(DomainError):
    def __init__(self, kind: str, s: str) -> None:
        super().__init__(f"Failed to parse {kind} id: {s!r}")
        self.kind = kind
        self.s = s


class FailedToParseOriginGameError(DomainError):
    def __init__(self, s: str) -> None:
        super().__init__(f"Failed to parse origin game: {s!r}")
        self.s = s


class SongNotInAlbumError(DomainError):
    """Raised when a song id is missing from its own album's member list."""

    def __init__(self, song_id: SongId, album_id: AlbumId) -> None:
        super().__init__(f"Song {song_id} is not listed in album {album_id}")
        self.song_id = song_id
        self.album_id = album_id


class EmptySongListError(DomainError):
    def __init__(self, album_id: AlbumId) -> None:
        super().__init__(f"Album {album_id} has an empty song list")
        self.album_id = album_id


class InvalidFieldError(DomainError):
    def __init__(self, field: str, value: object) -> None:
        super().__init__(f"Invalid value for {field}: {value!r}")
        self.field = field
        self.value = value


class InvalidCoverImageError(DomainError):
    def __init__(self, album_id: AlbumId) -> None:
        super().__init__(f"Cover image of album {album_id} is not a recognised image")
        self.album_id = album_id
