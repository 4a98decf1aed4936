"""Port for reading the remote catalog."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from sirensync.domain.model import AlbumId, SongId


@dataclass(frozen=True, slots=True)
class SongSummary:
    """Listing entry for a remote song. Ids are raw catalog strings."""

    id: str
    name: str
    album_id: str
    artists: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class SongDetail:
    id: str
    name: str
    album_id: str
    source_url: str
    lyric_url: str | None = None
    artists: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class AlbumSummary:
    """Remote album data.

    The album listing only fills id, name, cover and artists; the per-album data
    endpoint also supplies the intro, the origin tag and the alternative cover.
    """

    id: str
    name: str
    cover_url: str
    artists: tuple[str, ...] = ()
    intro: str = ""
    belong: str | None = None
    cover_de_url: str | None = None


@dataclass(frozen=True, slots=True)
class AlbumTrack:
    id: str
    name: str
    artists: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class AlbumDetail:
    id: str
    name: str
    intro: str
    belong: str
    cover_url: str
    cover_de_url: str | None = None
    songs: tuple[AlbumTrack, ...] = ()


@runtime_checkable
class CatalogFetcher(Protocol):
    """Read-only access to the remote catalog. Safe for concurrent use."""

    async def fetch_song(self, song_id: SongId) -> SongDetail: ...

    async def fetch_all_songs(self) -> list[SongSummary]: ...

    async def fetch_album(self, album_id: AlbumId) -> AlbumSummary: ...

    async def fetch_album_detail(self, album_id: AlbumId) -> AlbumDetail: ...

    async def fetch_all_albums(self) -> list[AlbumSummary]: ...

    async def fetch_bytes(self, url: str) -> bytes: ...


__all__ = [
    "AlbumDetail",
    "AlbumSummary",
    "AlbumTrack",
    "CatalogFetcher",
    "SongDetail",
    "SongSummary",
]
