"""SQLAlchemy table metadata for the sirensync catalog store."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Dialect,
    ForeignKey,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    TypeDecorator,
    false,
)

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)


class UTCDateTime(TypeDecorator[datetime]):
    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        _ = dialect
        if value is None:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value.astimezone(UTC)

    def process_result_value(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        _ = dialect
        if value is None:
            return None
        return value if value.tzinfo else value.replace(tzinfo=UTC)


def utcnow() -> datetime:
    return datetime.now(UTC)


metadata = MetaData(
    naming_convention={
        "ix": "ix_%(column_0_label)s",
        "uq": "uq_%(table_name)s_%(column_0_label)s",
        "ck": "ck_%(table_name)s_%(constraint_name)s",
        "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
        "pk": "pk_%(table_name)s",
    }
)


def _timestamps() -> tuple[Column[datetime], Column[datetime]]:
    return (
        Column("created_at", UTCDateTime(), nullable=False, default=utcnow),
        Column("updated_at", UTCDateTime(), nullable=False, default=utcnow, onupdate=utcnow),
    )


def _soft_delete() -> Column[bool]:
    return Column("is_deleted", Boolean, nullable=False, default=False, server_default=false())


# Lookup tables ---------------------------------------------------------------

games_table = Table(
    "games",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    *_timestamps(),
    Column("name", String(64), nullable=False, unique=True),
    _soft_delete(),
)

artists_table = Table(
    "artists",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    *_timestamps(),
    Column("name", String(255), nullable=False, unique=True),
    _soft_delete(),
)

audio_formats_table = Table(
    "audio_formats",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    *_timestamps(),
    Column("format", String(16), nullable=False, unique=True),
    _soft_delete(),
)

# Aggregates ------------------------------------------------------------------

albums_table = Table(
    "albums",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=False),
    *_timestamps(),
    Column("name", String(255), nullable=False),
    Column("intro", Text, nullable=False, default=""),
    Column("total_tracks", Integer, nullable=False),
    Column("total_disks", Integer, nullable=False),
    Column("cover_image_path", String(255), nullable=False),
    Column("game_id", Integer, ForeignKey("games.id"), nullable=False),
    # first credited artist; the full ordered list lives in album_artists
    Column("artist_id", Integer, ForeignKey("artists.id"), nullable=True),
    _soft_delete(),
)

songs_table = Table(
    "songs",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=False),
    *_timestamps(),
    Column("name", String(255), nullable=False),
    Column("track_number", Integer, nullable=False),
    Column("disk_number", Integer, nullable=False),
    Column("source_path", String(255), nullable=False),
    Column("album_id", Integer, ForeignKey("albums.id"), nullable=False, index=True),
    Column("audio_format_id", Integer, ForeignKey("audio_formats.id"), nullable=False),
    Column("artist_id", Integer, ForeignKey("artists.id"), nullable=True),
    _soft_delete(),
)

# Ordered list attributes -----------------------------------------------------

# song_id is not a foreign key: an album lists its songs before they are stored
album_songs_table = Table(
    "album_songs",
    metadata,
    Column(
        "album_id",
        Integer,
        ForeignKey("albums.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("position", Integer, primary_key=True),
    Column("song_id", Integer, nullable=False),
)

album_artists_table = Table(
    "album_artists",
    metadata,
    Column(
        "album_id",
        Integer,
        ForeignKey("albums.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("position", Integer, primary_key=True),
    Column("artist_id", Integer, ForeignKey("artists.id"), nullable=False),
)

song_artists_table = Table(
    "song_artists",
    metadata,
    Column(
        "song_id",
        Integer,
        ForeignKey("songs.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("position", Integer, primary_key=True),
    Column("artist_id", Integer, ForeignKey("artists.id"), nullable=False),
)


def create_all_tables(engine: Engine) -> None:
    """Create every table from metadata, bypassing migrations."""

    metadata.create_all(engine)
    log.debug("Created catalog tables on %s", engine.url)
