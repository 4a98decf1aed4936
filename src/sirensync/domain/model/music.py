"""Catalog aggregates.

Aggregate roots here:
- Album owns its ordered song list (ids only, never embedded songs)
- Song refers to its album by id

Both are only built through the ``try_new`` smart constructors when data comes from
the remote catalog; ``try_reconstruct`` is reserved for store adapters rehydrating
rows that were validated when they were written.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from sirensync.domain.errors import (
    EmptySongListError,
    InvalidFieldError,
    SongNotInAlbumError,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from sirensync.domain.model.audio import AudioRawData
    from sirensync.domain.model.enums import OriginGame
    from sirensync.domain.model.ids import AlbumId, SongId

SINGLE_DISK = 1


@dataclass(frozen=True, kw_only=True)
class Song:
    id: SongId
    name: str
    album_id: AlbumId
    track_number: int
    disk_number: int
    source: AudioRawData
    artists: tuple[str, ...] = ()

    @classmethod
    def try_new(
        cls,
        *,
        id: SongId,  # noqa: A002
        name: str,
        album_id: AlbumId,
        song_list: Sequence[SongId],
        source: AudioRawData,
        artists: Iterable[str] = (),
    ) -> Song:
        """Build a song whose track number is its position in the album's song list."""

        if not song_list:
            raise EmptySongListError(album_id)
        _require_name("song.name", name)
        try:
            index = list(song_list).index(id)
        except ValueError:
            raise SongNotInAlbumError(id, album_id) from None
        return cls(
            id=id,
            name=name,
            album_id=album_id,
            track_number=index + 1,
            disk_number=SINGLE_DISK,
            source=source,
            artists=tuple(artists),
        )

    @classmethod
    def try_reconstruct(
        cls,
        *,
        id: SongId,  # noqa: A002
        name: str,
        album_id: AlbumId,
        track_number: int,
        disk_number: int,
        source: AudioRawData,
        artists: Iterable[str] = (),
    ) -> Song:
        if track_number < 1:
            raise InvalidFieldError("song.track_number", track_number)
        if disk_number < 1:
            raise InvalidFieldError("song.disk_number", disk_number)
        return cls(
            id=id,
            name=name,
            album_id=album_id,
            track_number=track_number,
            disk_number=disk_number,
            source=source,
            artists=tuple(artists),
        )


@dataclass(frozen=True, kw_only=True)
class Album:
    id: AlbumId
    name: str
    total_tracks: int
    total_disks: int
    intro: str
    origin: OriginGame
    cover_image: bytes = field(repr=False)
    artists: tuple[str, ...] = ()
    song_list: tuple[SongId, ...] = ()

    @classmethod
    def try_new(
        cls,
        *,
        id: AlbumId,  # noqa: A002
        name: str,
        intro: str,
        origin: OriginGame,
        cover_image: bytes,
        artists: Iterable[str] = (),
        song_list: Iterable[SongId] = (),
    ) -> Album:
        """Build an album; totals are derived from the song list."""

        _require_name("album.name", name)
        songs = tuple(song_list)
        return cls(
            id=id,
            name=name,
            total_tracks=len(songs),
            total_disks=SINGLE_DISK,
            intro=intro,
            origin=origin,
            cover_image=cover_image,
            artists=tuple(artists),
            song_list=songs,
        )

    @classmethod
    def try_reconstruct(
        cls,
        *,
        id: AlbumId,  # noqa: A002
        name: str,
        total_tracks: int,
        total_disks: int,
        intro: str,
        origin: OriginGame,
        cover_image: bytes,
        artists: Iterable[str] = (),
        song_list: Iterable[SongId] = (),
    ) -> Album:
        if total_tracks < 0:
            raise InvalidFieldError("album.total_tracks", total_tracks)
        if total_disks < 1:
            raise InvalidFieldError("album.total_disks", total_disks)
        return cls(
            id=id,
            name=name,
            total_tracks=total_tracks,
            total_disks=total_disks,
            intro=intro,
            origin=origin,
            cover_image=cover_image,
            artists=tuple(artists),
            song_list=tuple(song_list),
        )

    def track_number_of(self, song_id: SongId) -> int:
        try:
            return self.song_list.index(song_id) + 1
        except ValueError:
            raise SongNotInAlbumError(song_id, self.id) from None


def _require_name(field_name: str, value: str) -> None:
    if not value or not value.strip():
        raise InvalidFieldError(field_name, value)
