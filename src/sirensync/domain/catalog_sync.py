"""Application services for synchronising the local catalog with the remote one.

The engine only talks to ports: it asks the catalog which songs exist remotely,
asks the store which exist locally, and materialises the difference. An optional
media inspector classifies downloaded audio and cover payloads.
Each new song goes through detail fetch, album resolution, audio download,
validation and persistence as one unit; units run concurrently up to a fixed
fan-out.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from sirensync.domain.errors import InvalidCoverImageError
from sirensync.domain.model import Album, AlbumId, AudioRawData, OriginGame, Song, SongId

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Iterable, Sequence
    from collections.abc import Set as AbstractSet

    from sirensync.domain.ports.catalog import CatalogFetcher
    from sirensync.domain.ports.media import MediaInspector
    from sirensync.domain.ports.persistence import SongStore

DEFAULT_CONCURRENCY = 8

log = getLogger(__name__)


@dataclass(slots=True)
class SyncNewSongsResult:
    """Outcome of a new-song sync run."""

    new_song_ids: list[SongId]
    stored: list[SongId]
    failures: dict[SongId, Exception] = field(default_factory=dict["SongId", "Exception"])

    @property
    def ok(self) -> bool:
        return not self.failures


class AlbumLocks:
    """One lock per album id, so concurrent units never create the same album twice."""

    def __init__(self) -> None:
        self._locks: dict[AlbumId, asyncio.Lock] = {}

    def for_album(self, album_id: AlbumId) -> asyncio.Lock:
        lock = self._locks.get(album_id)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[album_id] = lock
        return lock


def diff_new_song_ids(remote: Iterable[SongId], local: AbstractSet[SongId]) -> list[SongId]:
    """Return the remote ids that are absent locally, in remote order, without repeats."""

    return [song_id for song_id in dict.fromkeys(remote) if song_id not in local]


async def find_new_song_ids(*, catalog: CatalogFetcher, store: SongStore) -> list[SongId]:
    summaries = await catalog.fetch_all_songs()
    # parse everything before diffing: one malformed id aborts the run
    remote_ids = [SongId.try_new(summary.id) for summary in summaries]
    local_ids = set(await store.get_all_songs_id())
    new_ids = diff_new_song_ids(remote_ids, local_ids)
    log.info(
        "Catalog diff: remote=%s, local=%s, new=%s",
        len(remote_ids),
        len(local_ids),
        len(new_ids),
    )
    return new_ids


async def add_new_songs(
    *,
    catalog: CatalogFetcher,
    store: SongStore,
    concurrency: int = DEFAULT_CONCURRENCY,
    inspector: MediaInspector | None = None,
) -> list[SongId]:
    """Fetch and persist every remote song missing from the store.

    Fail-fast: the first failing unit cancels the others and its exception is
    re-raised. Songs saved before the failure stay saved.
    """

    new_song_ids = await find_new_song_ids(catalog=catalog, store=store)
    if not new_song_ids:
        return []

    await fetch_and_save_songs(
        new_song_ids,
        catalog=catalog,
        store=store,
        concurrency=concurrency,
        inspector=inspector,
    )
    return new_song_ids


async def sync_new_songs(
    *,
    catalog: CatalogFetcher,
    store: SongStore,
    concurrency: int = DEFAULT_CONCURRENCY,
    fail_fast: bool = True,
    inspector: MediaInspector | None = None,
) -> SyncNewSongsResult:
    """Run a new-song sync and report per-song outcomes.

    With ``fail_fast=False`` a failing song is recorded in ``failures`` and the
    remaining songs are still processed.
    """

    if fail_fast:
        new_song_ids = await add_new_songs(
            catalog=catalog,
            store=store,
            concurrency=concurrency,
            inspector=inspector,
        )
        return SyncNewSongsResult(new_song_ids=new_song_ids, stored=list(new_song_ids))

    new_song_ids = await find_new_song_ids(catalog=catalog, store=store)
    if not new_song_ids:
        return SyncNewSongsResult(new_song_ids=[], stored=[])

    album_locks = AlbumLocks()
    saved: set[SongId] = set()
    failures: dict[SongId, Exception] = {}

    async def isolated(song_id: SongId) -> None:
        try:
            await _fetch_and_save_song(
                song_id,
                catalog=catalog,
                store=store,
                album_locks=album_locks,
                inspector=inspector,
            )
        except Exception as exc:  # noqa: BLE001
            log.warning("Failed to synchronise song %s: %s", song_id, exc)
            failures[song_id] = exc
        else:
            saved.add(song_id)

    await _run_bounded(new_song_ids, isolated, concurrency=concurrency)

    stored = [song_id for song_id in new_song_ids if song_id in saved]
    log.info(
        "Stored %s of %s new songs (%s failed)",
        len(stored),
        len(new_song_ids),
        len(failures),
    )
    return SyncNewSongsResult(new_song_ids=new_song_ids, stored=stored, failures=failures)


async def fetch_and_save_songs(
    song_ids: Sequence[SongId],
    *,
    catalog: CatalogFetcher,
    store: SongStore,
    concurrency: int = DEFAULT_CONCURRENCY,
    inspector: MediaInspector | None = None,
) -> None:
    """Materialise and persist ``song_ids`` with at most ``concurrency`` units in flight."""

    album_locks = AlbumLocks()

    async def unit(song_id: SongId) -> None:
        await _fetch_and_save_song(
            song_id,
            catalog=catalog,
            store=store,
            album_locks=album_locks,
            inspector=inspector,
        )

    await _run_bounded(song_ids, unit, concurrency=concurrency)
    log.info("Stored %s new songs", len(song_ids))


async def fetch_and_create_song(
    song_id: SongId,
    *,
    catalog: CatalogFetcher,
    store: SongStore,
    album_locks: AlbumLocks | None = None,
    inspector: MediaInspector | None = None,
) -> Song:
    """Fetch one remote song and build the validated aggregate. Does not save the song.

    The owning album is looked up in the store first; when it is missing it is
    fetched, validated and saved before the song is built.
    """

    detail = await catalog.fetch_song(song_id)
    album_id = AlbumId.try_new(detail.album_id)
    album = await resolve_album(
        album_id,
        catalog=catalog,
        store=store,
        album_locks=album_locks,
        inspector=inspector,
    )

    raw = await catalog.fetch_bytes(detail.source_url)
    audio_format = inspector.audio_format(raw) if inspector is not None else None
    source = AudioRawData.try_new(raw, source_url=detail.source_url, audio_format=audio_format)

    return Song.try_new(
        id=song_id,
        name=detail.name,
        album_id=album_id,
        song_list=album.song_list,
        source=source,
        artists=detail.artists,
    )


async def resolve_album(
    album_id: AlbumId,
    *,
    catalog: CatalogFetcher,
    store: SongStore,
    album_locks: AlbumLocks | None = None,
    inspector: MediaInspector | None = None,
) -> Album:
    """Return the stored album, creating it from the remote catalog when absent."""

    locks = album_locks or AlbumLocks()
    async with locks.for_album(album_id):
        album = await store.get_album(album_id)
        if album is not None:
            return album

        album = await create_album(album_id, catalog=catalog, inspector=inspector)
        await store.save_album(album)
        log.info(
            "Created album %s %r with %s tracks",
            album.id.padded(),
            album.name,
            album.total_tracks,
        )
        return album


async def create_album(
    album_id: AlbumId,
    *,
    catalog: CatalogFetcher,
    inspector: MediaInspector | None = None,
) -> Album:
    summary = await catalog.fetch_album(album_id)
    detail = await catalog.fetch_album_detail(album_id)
    song_list = [SongId.try_new(track.id) for track in detail.songs]
    cover_image = await catalog.fetch_bytes(summary.cover_url)
    if cover_image and inspector is not None and not inspector.is_image(cover_image):
        raise InvalidCoverImageError(album_id)

    return Album.try_new(
        id=album_id,
        name=summary.name,
        intro=summary.intro or detail.intro,
        origin=OriginGame.try_new(summary.belong or detail.belong),
        cover_image=cover_image,
        artists=summary.artists,
        song_list=song_list,
    )


async def _fetch_and_save_song(
    song_id: SongId,
    *,
    catalog: CatalogFetcher,
    store: SongStore,
    album_locks: AlbumLocks,
    inspector: MediaInspector | None = None,
) -> None:
    log.debug("Fetching song %s", song_id.padded())
    song = await fetch_and_create_song(
        song_id,
        catalog=catalog,
        store=store,
        album_locks=album_locks,
        inspector=inspector,
    )
    await store.save_song(song)
    log.debug("Saved song %s %r (track %s)", song_id.padded(), song.name, song.track_number)


async def _run_bounded(
    song_ids: Iterable[SongId],
    unit: Callable[[SongId], Awaitable[None]],
    *,
    concurrency: int,
) -> None:
    if concurrency < 1:
        raise ValueError(f"concurrency must be at least 1, got {concurrency}")
    semaphore = asyncio.Semaphore(concurrency)

    async def gated(song_id: SongId) -> None:
        async with semaphore:
            await unit(song_id)

    try:
        async with asyncio.TaskGroup() as group:
            for song_id in song_ids:
                group.create_task(gated(song_id))
    except ExceptionGroup as exc_group:
        raise _first_error(exc_group) from None


def _first_error(exc_group: BaseExceptionGroup[Exception]) -> Exception:
    first = exc_group.exceptions[0]
    if isinstance(first, BaseExceptionGroup):
        return _first_error(first)
    return first
