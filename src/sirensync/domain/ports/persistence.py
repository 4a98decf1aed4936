"""Ports for persisting catalog aggregates."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sirensync.domain.model import Album, AlbumId, Song, SongId


@runtime_checkable
class SongStore(Protocol):
    """Async store contract used by the synchronization engine.

    Every call is its own transaction. Reads return ``None`` or an empty list for
    absent entities; saves are upserts; deletes are soft. Implementations must be
    safe for concurrent use from several tasks.
    """

    async def get_song(self, song_id: SongId) -> Song | None: ...

    async def save_song(self, song: Song) -> None: ...

    async def delete_song(self, song_id: SongId) -> None: ...

    async def get_all_songs_id(self) -> list[SongId]: ...

    async def get_all_song(self) -> list[Song]: ...

    async def save_songs(self, songs: Sequence[Song]) -> None: ...

    async def get_album(self, album_id: AlbumId) -> Album | None: ...

    async def save_album(self, album: Album) -> None: ...

    async def delete_album(self, album_id: AlbumId) -> None: ...

    async def get_all_album(self) -> list[Album]: ...

    async def save_all_album(self, albums: Sequence[Album]) -> None: ...


@runtime_checkable
class SongRepository(Protocol):
    """Session-bound song repository used inside a unit of work."""

    def get(self, song_id: SongId) -> Song | None: ...

    def add(self, song: Song) -> None: ...

    def remove(self, song_id: SongId) -> None: ...

    def list_ids(self) -> list[SongId]: ...

    def list_all(self) -> list[Song]: ...


@runtime_checkable
class AlbumRepository(Protocol):
    """Session-bound album repository used inside a unit of work."""

    def get(self, album_id: AlbumId) -> Album | None: ...

    def add(self, album: Album) -> None: ...

    def remove(self, album_id: AlbumId) -> None: ...

    def list_all(self) -> list[Album]: ...
