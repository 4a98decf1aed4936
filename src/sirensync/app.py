"""Application orchestration entry points."""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from logging import getLogger
from typing import TYPE_CHECKING

from sirensync.adapters.media_inspection import LibraryMediaInspector
from sirensync.adapters.siren import SirenCatalogClient
from sirensync.adapters.sqlalchemy.store import SqlAlchemyCatalogStore
from sirensync.adapters.sqlalchemy.unit_of_work import is_started, startup
from sirensync.config import get_siren_config, get_sync_config
from sirensync.domain.catalog_sync import (
    SyncNewSongsResult,
    fetch_and_create_song,
)
from sirensync.domain.catalog_sync import (
    sync_new_songs as run_sync_new_songs,
)
from sirensync.domain.model import SongId

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from sirensync.domain.model import Song
    from sirensync.domain.ports.catalog import CatalogFetcher
    from sirensync.domain.ports.media import MediaInspector
    from sirensync.domain.ports.persistence import SongStore

log = getLogger(__name__)


def sync_new_songs(
    *,
    catalog: CatalogFetcher | None = None,
    store: SongStore | None = None,
    concurrency: int | None = None,
    fail_fast: bool = True,
    inspector: MediaInspector | None = None,
) -> SyncNewSongsResult:
    """Add every remote song missing from the local store using the configured adapters."""

    effective_store = store or _default_store()
    effective_concurrency = concurrency or get_sync_config().concurrency
    effective_inspector = inspector or LibraryMediaInspector()
    log.info(
        "Starting new-song sync: concurrency=%s, fail_fast=%s",
        effective_concurrency,
        fail_fast,
    )

    async def run() -> SyncNewSongsResult:
        async with _open_catalog(catalog) as effective_catalog:
            return await run_sync_new_songs(
                catalog=effective_catalog,
                store=effective_store,
                concurrency=effective_concurrency,
                fail_fast=fail_fast,
                inspector=effective_inspector,
            )

    result = asyncio.run(run())
    log.info(
        "Finished new-song sync: new=%s, stored=%s, failed=%s",
        len(result.new_song_ids),
        len(result.stored),
        len(result.failures),
    )
    return result


def fetch_song(
    song_id: SongId | str,
    *,
    catalog: CatalogFetcher | None = None,
    store: SongStore | None = None,
    inspector: MediaInspector | None = None,
) -> Song:
    """Build one song from the remote catalog without saving it.

    A missing album is still created and stored, as during a sync.
    """

    parsed_id = song_id if isinstance(song_id, SongId) else SongId.try_new(song_id)
    effective_store = store or _default_store()
    effective_inspector = inspector or LibraryMediaInspector()

    async def run() -> Song:
        async with _open_catalog(catalog) as effective_catalog:
            return await fetch_and_create_song(
                parsed_id,
                catalog=effective_catalog,
                store=effective_store,
                inspector=effective_inspector,
            )

    return asyncio.run(run())


def _default_store() -> SongStore:
    if not is_started():
        startup()
    return SqlAlchemyCatalogStore()


@asynccontextmanager
async def _open_catalog(catalog: CatalogFetcher | None) -> AsyncIterator[CatalogFetcher]:
    if catalog is not None:
        yield catalog
        return
    async with SirenCatalogClient(config=get_siren_config()) as client:
        yield client
