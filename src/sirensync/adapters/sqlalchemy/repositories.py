"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

from sqlalchemy import delete, insert, select, update

from sirensync.adapters.sqlalchemy.mappings import (
    album_artists_table,
    album_songs_table,
    albums_table,
    artists_table,
    audio_formats_table,
    games_table,
    song_artists_table,
    songs_table,
    utcnow,
)
from sirensync.domain.model import (
    Album,
    AlbumId,
    AudioFormat,
    AudioRawData,
    OriginGame,
    Song,
    SongId,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from sqlalchemy import Column, Table
    from sqlalchemy.engine import Row
    from sqlalchemy.orm import Session

    from sirensync.adapters.sqlalchemy.media import MediaStore


class StoreError(RuntimeError):
    """Raised when the catalog store cannot complete an operation."""


class MissingAlbumError(StoreError):
    def __init__(self, song_id: SongId, album_id: AlbumId) -> None:
        super().__init__(f"Cannot store song {song_id}: album {album_id} is not stored")
        self.song_id = song_id
        self.album_id = album_id


def _lookup_id(session: Session, table: Table, column: Column[str], value: str) -> int:
    """Return the id of the lookup row holding ``value``, inserting it when missing."""

    stmt = select(table.c.id).where(column == value)
    existing = session.execute(stmt).scalar_one_or_none()
    if existing is not None:
        return existing
    session.execute(
        insert(table).prefix_with("OR IGNORE", dialect="sqlite").values({column.name: value})
    )
    return session.execute(stmt).scalar_one()


def _artist_ids(session: Session, names: Iterable[str]) -> list[int]:
    return [_lookup_id(session, artists_table, artists_table.c.name, name) for name in names]


def _upsert_by_id(session: Session, table: Table, row_id: int, values: Mapping[str, Any]) -> None:
    now = utcnow()
    result = session.execute(
        update(table)
        .where(table.c.id == row_id)
        .values({**values, "updated_at": now, "is_deleted": False})
    )
    if cast(Any, result).rowcount == 0:
        row = {**values, "id": row_id, "created_at": now, "updated_at": now}
        session.execute(insert(table).values({**row, "is_deleted": False}))


def _soft_delete(session: Session, table: Table, row_id: int) -> None:
    session.execute(
        update(table)
        .where(table.c.id == row_id)
        .where(table.c.is_deleted.is_(False))
        .values(is_deleted=True, updated_at=utcnow())
    )


def _replace_ordered(
    session: Session,
    table: Table,
    owner_column: str,
    owner_id: int,
    value_column: str,
    values: Iterable[int],
) -> None:
    session.execute(delete(table).where(table.c[owner_column] == owner_id))
    rows = [
        {owner_column: owner_id, "position": position, value_column: value}
        for position, value in enumerate(values)
    ]
    if rows:
        session.execute(insert(table), rows)


def _artist_names(session: Session, table: Table, owner_column: str, owner_id: int) -> list[str]:
    stmt = (
        select(artists_table.c.name)
        .join(table, table.c.artist_id == artists_table.c.id)
        .where(table.c[owner_column] == owner_id)
        .order_by(table.c.position)
    )
    return list(session.execute(stmt).scalars())


class SqlAlchemySongRepository:
    """Songs table plus the song's artist list.

    Audio bytes live in the media store; ``source_path`` is the file's path relative
    to the media root. Rehydrated songs carry an empty payload and that path.
    """

    def __init__(self, session: Session, media: MediaStore) -> None:
        self.session = session
        self.media = media

    def get(self, song_id: SongId) -> Song | None:
        stmt = (
            select(songs_table, audio_formats_table.c.format)
            .join(audio_formats_table, songs_table.c.audio_format_id == audio_formats_table.c.id)
            .where(songs_table.c.id == int(song_id))
            .where(songs_table.c.is_deleted.is_(False))
        )
        row = self.session.execute(stmt).one_or_none()
        if row is None:
            return None
        return self._reconstruct(row)

    def add(self, song: Song) -> None:
        album_exists = self.session.execute(
            select(albums_table.c.id)
            .where(albums_table.c.id == int(song.album_id))
            .where(albums_table.c.is_deleted.is_(False))
        ).scalar_one_or_none()
        if album_exists is None:
            raise MissingAlbumError(song.id, song.album_id)

        # rehydrated songs carry no bytes and already hold their stored path
        source_path = (
            self.media.save_audio(song.source) if song.source.raw else song.source.save_path
        )
        format_id = _lookup_id(
            self.session,
            audio_formats_table,
            audio_formats_table.c.format,
            str(song.source.format),
        )
        artist_ids = _artist_ids(self.session, song.artists)
        _upsert_by_id(
            self.session,
            songs_table,
            int(song.id),
            {
                "name": song.name,
                "track_number": song.track_number,
                "disk_number": song.disk_number,
                "source_path": str(source_path),
                "album_id": int(song.album_id),
                "audio_format_id": format_id,
                "artist_id": artist_ids[0] if artist_ids else None,
            },
        )
        _replace_ordered(
            self.session,
            song_artists_table,
            "song_id",
            int(song.id),
            "artist_id",
            artist_ids,
        )

    def remove(self, song_id: SongId) -> None:
        _soft_delete(self.session, songs_table, int(song_id))

    def list_ids(self) -> list[SongId]:
        stmt = (
            select(songs_table.c.id)
            .where(songs_table.c.is_deleted.is_(False))
            .order_by(songs_table.c.id)
        )
        return [SongId(value) for value in self.session.execute(stmt).scalars()]

    def list_all(self) -> list[Song]:
        stmt = (
            select(songs_table, audio_formats_table.c.format)
            .join(audio_formats_table, songs_table.c.audio_format_id == audio_formats_table.c.id)
            .where(songs_table.c.is_deleted.is_(False))
            .order_by(songs_table.c.id)
        )
        return [self._reconstruct(row) for row in self.session.execute(stmt).all()]

    def _reconstruct(self, row: Row[Any]) -> Song:
        source = AudioRawData.reconstruct(b"", AudioFormat.parse(row.format), row.source_path)
        return Song.try_reconstruct(
            id=SongId(row.id),
            name=row.name,
            album_id=AlbumId(row.album_id),
            track_number=row.track_number,
            disk_number=row.disk_number,
            source=source,
            artists=_artist_names(self.session, song_artists_table, "song_id", row.id),
        )


class SqlAlchemyAlbumRepository:
    """Albums table plus the ordered song list and artist list."""

    def __init__(self, session: Session, media: MediaStore) -> None:
        self.session = session
        self.media = media

    def get(self, album_id: AlbumId) -> Album | None:
        stmt = (
            select(albums_table, games_table.c.name.label("game_name"))
            .join(games_table, albums_table.c.game_id == games_table.c.id)
            .where(albums_table.c.id == int(album_id))
            .where(albums_table.c.is_deleted.is_(False))
        )
        row = self.session.execute(stmt).one_or_none()
        if row is None:
            return None
        return self._reconstruct(row)

    def add(self, album: Album) -> None:
        cover_path = self.media.save_cover(album.cover_image)
        artist_ids = _artist_ids(self.session, album.artists)
        game_id = _lookup_id(self.session, games_table, games_table.c.name, str(album.origin))
        _upsert_by_id(
            self.session,
            albums_table,
            int(album.id),
            {
                "name": album.name,
                "intro": album.intro,
                "total_tracks": album.total_tracks,
                "total_disks": album.total_disks,
                "cover_image_path": cover_path,
                "game_id": game_id,
                "artist_id": artist_ids[0] if artist_ids else None,
            },
        )
        _replace_ordered(
            self.session,
            album_songs_table,
            "album_id",
            int(album.id),
            "song_id",
            (int(song_id) for song_id in album.song_list),
        )
        _replace_ordered(
            self.session,
            album_artists_table,
            "album_id",
            int(album.id),
            "artist_id",
            artist_ids,
        )

    def remove(self, album_id: AlbumId) -> None:
        _soft_delete(self.session, albums_table, int(album_id))

    def list_all(self) -> list[Album]:
        stmt = (
            select(albums_table, games_table.c.name.label("game_name"))
            .join(games_table, albums_table.c.game_id == games_table.c.id)
            .where(albums_table.c.is_deleted.is_(False))
            .order_by(albums_table.c.id)
        )
        return [self._reconstruct(row) for row in self.session.execute(stmt).all()]

    def _reconstruct(self, row: Row[Any]) -> Album:
        song_stmt = (
            select(album_songs_table.c.song_id)
            .where(album_songs_table.c.album_id == row.id)
            .order_by(album_songs_table.c.position)
        )
        song_list = [SongId(value) for value in self.session.execute(song_stmt).scalars()]
        return Album.try_reconstruct(
            id=AlbumId(row.id),
            name=row.name,
            total_tracks=row.total_tracks,
            total_disks=row.total_disks,
            intro=row.intro,
            origin=OriginGame.try_new(row.game_name),
            cover_image=self.media.read_cover(row.cover_image_path),
            artists=_artist_names(self.session, album_artists_table, "album_id", row.id),
            song_list=song_list,
        )


if TYPE_CHECKING:
    from sirensync.domain.ports.persistence import AlbumRepository, SongRepository

    _session_stub = cast("Session", object())
    _media_stub = cast("MediaStore", object())
    _song_repo_check: SongRepository = SqlAlchemySongRepository(_session_stub, _media_stub)
    _album_repo_check: AlbumRepository = SqlAlchemyAlbumRepository(_session_stub, _media_stub)
