"""In-memory fakes for the catalog and store ports."""

from __future__ import annotations

import asyncio
import io
from collections import Counter
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from PIL import Image

from sirensync.domain.model import (
    Album,
    AlbumId,
    AudioFormat,
    AudioRawData,
    OriginGame,
    Song,
    SongId,
)
from sirensync.domain.ports.catalog import (
    AlbumDetail,
    AlbumSummary,
    AlbumTrack,
    SongDetail,
    SongSummary,
)

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence


def _png_bytes() -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", (2, 2), color=(200, 40, 40)).save(buffer, format="PNG")
    return buffer.getvalue()


PNG_BYTES = _png_bytes()
# not a real container: the format comes from the ".flac" URL suffix
AUDIO_BYTES = b"\x00sirensync-audio\x00"
BASE_URL = "https://cdn.example.test"


def audio_url(song_id: str) -> str:
    return f"{BASE_URL}/audio/{song_id}.flac"


def cover_url(album_id: str) -> str:
    return f"{BASE_URL}/cover/{album_id}.png"


def audio_bytes(song_id: str) -> bytes:
    return AUDIO_BYTES + song_id.encode()


class FakeCatalog:
    """Catalog fake built from ``{album_cid: [song_cid, ...]}``.

    ``listed`` restricts which songs the listing endpoint returns (default: all).
    Failures can be injected per song id; ``delay`` keeps units in flight long
    enough to observe concurrency.
    """

    def __init__(
        self,
        albums: Mapping[str, Sequence[str]],
        *,
        listed: Sequence[str] | None = None,
        belong: str = "arknights",
        delay: float = 0.0,
    ) -> None:
        self.songs: dict[str, SongDetail] = {}
        self.albums: dict[str, AlbumSummary] = {}
        self.details: dict[str, AlbumDetail] = {}
        self.blobs: dict[str, bytes] = {}
        for album_cid, song_cids in albums.items():
            self.albums[album_cid] = AlbumSummary(
                id=album_cid,
                name=f"Album {album_cid}",
                cover_url=cover_url(album_cid),
                artists=("Monster Siren Records",),
                intro=f"Intro {album_cid}",
                belong=belong,
            )
            self.details[album_cid] = AlbumDetail(
                id=album_cid,
                name=f"Album {album_cid}",
                intro=f"Intro {album_cid}",
                belong=belong,
                cover_url=cover_url(album_cid),
                songs=tuple(AlbumTrack(id=cid, name=f"Song {cid}") for cid in song_cids),
            )
            self.blobs[cover_url(album_cid)] = PNG_BYTES
            for song_cid in song_cids:
                self.songs[song_cid] = SongDetail(
                    id=song_cid,
                    name=f"Song {song_cid}",
                    album_id=album_cid,
                    source_url=audio_url(song_cid),
                    artists=("Artist A", "Artist B"),
                )
                self.blobs[audio_url(song_cid)] = audio_bytes(song_cid)
        self.listed = list(listed) if listed is not None else list(self.songs)
        self.song_failures: dict[str, Exception] = {}
        self.delay = delay
        self.calls: Counter[str] = Counter()
        self.fetched_songs: list[str] = []
        self.in_flight = 0
        self.peak_in_flight = 0

    async def fetch_song(self, song_id: SongId) -> SongDetail:
        self.calls["fetch_song"] += 1
        cid = song_id.padded()
        self.fetched_songs.append(cid)
        self.in_flight += 1
        self.peak_in_flight = max(self.peak_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delay)
            if cid in self.song_failures:
                raise self.song_failures[cid]
            return self.songs[cid]
        finally:
            self.in_flight -= 1

    async def fetch_all_songs(self) -> list[SongSummary]:
        self.calls["fetch_all_songs"] += 1
        return [
            SongSummary(
                id=cid,
                name=self.songs[cid].name if cid in self.songs else f"Song {cid}",
                album_id=self.songs[cid].album_id if cid in self.songs else "0000",
            )
            for cid in self.listed
        ]

    async def fetch_album(self, album_id: AlbumId) -> AlbumSummary:
        self.calls[f"fetch_album:{album_id.padded()}"] += 1
        await asyncio.sleep(self.delay)
        return self.albums[album_id.padded()]

    async def fetch_album_detail(self, album_id: AlbumId) -> AlbumDetail:
        self.calls[f"fetch_album_detail:{album_id.padded()}"] += 1
        return self.details[album_id.padded()]

    async def fetch_all_albums(self) -> list[AlbumSummary]:
        self.calls["fetch_all_albums"] += 1
        return list(self.albums.values())

    async def fetch_bytes(self, url: str) -> bytes:
        self.calls["fetch_bytes"] += 1
        return self.blobs[url]


@dataclass
class StubInspector:
    """``MediaInspector`` fake returning fixed answers."""

    detected_format: AudioFormat | None = None
    images: bool = True

    def audio_format(self, raw: bytes) -> AudioFormat | None:  # noqa: ARG002
        return self.detected_format

    def is_image(self, data: bytes) -> bool:  # noqa: ARG002
        return self.images


@dataclass
class InMemoryStore:
    """``SongStore`` fake keeping aggregates in dictionaries."""

    songs: dict[SongId, Song] = field(default_factory=dict[SongId, Song])
    albums: dict[AlbumId, Album] = field(default_factory=dict[AlbumId, Album])
    saved_songs: list[SongId] = field(default_factory=list[SongId])
    saved_albums: list[AlbumId] = field(default_factory=list[AlbumId])
    failing_song_saves: set[SongId] = field(default_factory=set[SongId])

    async def get_song(self, song_id: SongId) -> Song | None:
        return self.songs.get(song_id)

    async def save_song(self, song: Song) -> None:
        await asyncio.sleep(0)
        if song.id in self.failing_song_saves:
            raise RuntimeError(f"store rejected song {song.id}")
        self.songs[song.id] = song
        self.saved_songs.append(song.id)

    async def delete_song(self, song_id: SongId) -> None:
        self.songs.pop(song_id, None)

    async def get_all_songs_id(self) -> list[SongId]:
        return sorted(self.songs)

    async def get_all_song(self) -> list[Song]:
        return [self.songs[song_id] for song_id in sorted(self.songs)]

    async def save_songs(self, songs: Sequence[Song]) -> None:
        for song in songs:
            await self.save_song(song)

    async def get_album(self, album_id: AlbumId) -> Album | None:
        # yield so concurrent units can interleave between lookup and save
        await asyncio.sleep(0)
        return self.albums.get(album_id)

    async def save_album(self, album: Album) -> None:
        await asyncio.sleep(0)
        self.albums[album.id] = album
        self.saved_albums.append(album.id)

    async def delete_album(self, album_id: AlbumId) -> None:
        self.albums.pop(album_id, None)

    async def get_all_album(self) -> list[Album]:
        return [self.albums[album_id] for album_id in sorted(self.albums)]

    async def save_all_album(self, albums: Sequence[Album]) -> None:
        for album in albums:
            await self.save_album(album)


def make_album(
    album_id: int = 1,
    *,
    song_ids: Sequence[int] = (1, 2),
    name: str = "Example Album",
) -> Album:
    return Album.try_new(
        id=AlbumId(album_id),
        name=name,
        intro="",
        origin=OriginGame.ARKNIGHTS,
        cover_image=PNG_BYTES,
        artists=("Monster Siren Records",),
        song_list=[SongId(song_id) for song_id in song_ids],
    )


def make_song(song_id: int = 1, *, album: Album | None = None, name: str = "Example Song") -> Song:
    owner = album or make_album(song_ids=(song_id,))
    return Song.try_new(
        id=SongId(song_id),
        name=name,
        album_id=owner.id,
        song_list=owner.song_list,
        source=AudioRawData.try_new(audio_bytes(str(song_id))),
        artists=("Artist A",),
    )


if TYPE_CHECKING:
    from sirensync.domain.ports.catalog import CatalogFetcher
    from sirensync.domain.ports.media import MediaInspector
    from sirensync.domain.ports.persistence import SongStore

    _catalog_check: CatalogFetcher = FakeCatalog({})
    _inspector_check: MediaInspector = StubInspector()
    _store_check: SongStore = InMemoryStore()
