"""Async catalog store over the SQLAlchemy unit of work."""

from __future__ import annotations

import asyncio
import threading
from logging import getLogger
from typing import TYPE_CHECKING

from sqlalchemy.exc import SQLAlchemyError

from sirensync.adapters.sqlalchemy.repositories import StoreError
from sirensync.adapters.sqlalchemy.unit_of_work import SqlAlchemyCatalogUnitOfWork

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from sirensync.domain.model import Album, AlbumId, Song, SongId
    from sirensync.domain.ports.unit_of_work import CatalogRepositories, CatalogUnitOfWork

log = getLogger(__name__)


class SqlAlchemyCatalogStore:
    """``SongStore`` running each call as one unit of work in a worker thread.

    Writes are serialized; SQLite allows a single writer at a time.
    """

    def __init__(
        self,
        uow_factory: Callable[[], CatalogUnitOfWork] = SqlAlchemyCatalogUnitOfWork,
    ) -> None:
        self._uow_factory = uow_factory
        self._write_lock = threading.Lock()

    async def get_song(self, song_id: SongId) -> Song | None:
        return await asyncio.to_thread(self._read, lambda repos: repos.songs.get(song_id))

    async def save_song(self, song: Song) -> None:
        await asyncio.to_thread(self._write, lambda repos: repos.songs.add(song))

    async def delete_song(self, song_id: SongId) -> None:
        await asyncio.to_thread(self._write, lambda repos: repos.songs.remove(song_id))

    async def get_all_songs_id(self) -> list[SongId]:
        return await asyncio.to_thread(self._read, lambda repos: repos.songs.list_ids())

    async def get_all_song(self) -> list[Song]:
        return await asyncio.to_thread(self._read, lambda repos: repos.songs.list_all())

    async def save_songs(self, songs: Sequence[Song]) -> None:
        def add_all(repos: CatalogRepositories) -> None:
            for song in songs:
                repos.songs.add(song)

        await asyncio.to_thread(self._write, add_all)

    async def get_album(self, album_id: AlbumId) -> Album | None:
        return await asyncio.to_thread(self._read, lambda repos: repos.albums.get(album_id))

    async def save_album(self, album: Album) -> None:
        await asyncio.to_thread(self._write, lambda repos: repos.albums.add(album))

    async def delete_album(self, album_id: AlbumId) -> None:
        await asyncio.to_thread(self._write, lambda repos: repos.albums.remove(album_id))

    async def get_all_album(self) -> list[Album]:
        return await asyncio.to_thread(self._read, lambda repos: repos.albums.list_all())

    async def save_all_album(self, albums: Sequence[Album]) -> None:
        def add_all(repos: CatalogRepositories) -> None:
            for album in albums:
                repos.albums.add(album)

        await asyncio.to_thread(self._write, add_all)

    def _read[TResult](self, action: Callable[[CatalogRepositories], TResult]) -> TResult:
        try:
            with self._uow_factory() as uow:
                return action(uow.repositories)
        except (SQLAlchemyError, OSError) as exc:
            log.error("Catalog store read failed: %s", exc)
            raise StoreError(f"Catalog store read failed: {exc}") from exc

    def _write(self, action: Callable[[CatalogRepositories], None]) -> None:
        with self._write_lock:
            try:
                with self._uow_factory() as uow:
                    action(uow.repositories)
                    uow.commit()
            except (SQLAlchemyError, OSError) as exc:
                log.error("Catalog store write failed: %s", exc)
                raise StoreError(f"Catalog store write failed: {exc}") from exc


if TYPE_CHECKING:
    from sirensync.domain.ports.persistence import SongStore

    _store_check: SongStore = SqlAlchemyCatalogStore()
