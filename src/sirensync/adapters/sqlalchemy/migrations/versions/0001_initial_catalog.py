"""Initial catalog schema.

Revision ID: 0001_initial_catalog
Revises:
Create Date: 2026-10-19 09:00:00

"""

from __future__ import annotations

from typing import Any

import sqlalchemy as sa
from alembic import op

from sirensync.adapters.sqlalchemy.mappings import UTCDateTime

revision: str = "0001_initial_catalog"
down_revision: str | None = None
branch_labels: str | tuple[str, ...] | None = None
depends_on: str | tuple[str, ...] | None = None


def _audit_columns() -> list[sa.Column[Any]]:
    return [
        sa.Column("created_at", UTCDateTime(), nullable=False),
        sa.Column("updated_at", UTCDateTime(), nullable=False),
    ]


def _is_deleted() -> sa.Column[bool]:
    return sa.Column("is_deleted", sa.Boolean(), nullable=False, server_default=sa.false())


def upgrade() -> None:
    op.create_table(
        "games",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        *_audit_columns(),
        sa.Column("name", sa.String(length=64), nullable=False),
        _is_deleted(),
        sa.PrimaryKeyConstraint("id", name="pk_games"),
        sa.UniqueConstraint("name", name="uq_games_name"),
    )
    op.create_table(
        "artists",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        *_audit_columns(),
        sa.Column("name", sa.String(length=255), nullable=False),
        _is_deleted(),
        sa.PrimaryKeyConstraint("id", name="pk_artists"),
        sa.UniqueConstraint("name", name="uq_artists_name"),
    )
    op.create_table(
        "audio_formats",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        *_audit_columns(),
        sa.Column("format", sa.String(length=16), nullable=False),
        _is_deleted(),
        sa.PrimaryKeyConstraint("id", name="pk_audio_formats"),
        sa.UniqueConstraint("format", name="uq_audio_formats_format"),
    )
    op.create_table(
        "albums",
        sa.Column("id", sa.Integer(), autoincrement=False, nullable=False),
        *_audit_columns(),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("intro", sa.Text(), nullable=False),
        sa.Column("total_tracks", sa.Integer(), nullable=False),
        sa.Column("total_disks", sa.Integer(), nullable=False),
        sa.Column("cover_image_path", sa.String(length=255), nullable=False),
        sa.Column("game_id", sa.Integer(), nullable=False),
        sa.Column("artist_id", sa.Integer(), nullable=True),
        _is_deleted(),
        sa.ForeignKeyConstraint(["game_id"], ["games.id"], name="fk_albums_game_id_games"),
        sa.ForeignKeyConstraint(
            ["artist_id"], ["artists.id"], name="fk_albums_artist_id_artists"
        ),
        sa.PrimaryKeyConstraint("id", name="pk_albums"),
    )
    op.create_table(
        "songs",
        sa.Column("id", sa.Integer(), autoincrement=False, nullable=False),
        *_audit_columns(),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("track_number", sa.Integer(), nullable=False),
        sa.Column("disk_number", sa.Integer(), nullable=False),
        sa.Column("source_path", sa.String(length=255), nullable=False),
        sa.Column("album_id", sa.Integer(), nullable=False),
        sa.Column("audio_format_id", sa.Integer(), nullable=False),
        sa.Column("artist_id", sa.Integer(), nullable=True),
        _is_deleted(),
        sa.ForeignKeyConstraint(["album_id"], ["albums.id"], name="fk_songs_album_id_albums"),
        sa.ForeignKeyConstraint(
            ["audio_format_id"],
            ["audio_formats.id"],
            name="fk_songs_audio_format_id_audio_formats",
        ),
        sa.ForeignKeyConstraint(
            ["artist_id"], ["artists.id"], name="fk_songs_artist_id_artists"
        ),
        sa.PrimaryKeyConstraint("id", name="pk_songs"),
    )
    op.create_index("ix_songs_album_id", "songs", ["album_id"])
    op.create_table(
        "album_songs",
        sa.Column("album_id", sa.Integer(), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("song_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(
            ["album_id"],
            ["albums.id"],
            name="fk_album_songs_album_id_albums",
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("album_id", "position", name="pk_album_songs"),
    )
    op.create_table(
        "album_artists",
        sa.Column("album_id", sa.Integer(), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("artist_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(
            ["album_id"],
            ["albums.id"],
            name="fk_album_artists_album_id_albums",
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["artist_id"], ["artists.id"], name="fk_album_artists_artist_id_artists"
        ),
        sa.PrimaryKeyConstraint("album_id", "position", name="pk_album_artists"),
    )
    op.create_table(
        "song_artists",
        sa.Column("song_id", sa.Integer(), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("artist_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(
            ["song_id"],
            ["songs.id"],
            name="fk_song_artists_song_id_songs",
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["artist_id"], ["artists.id"], name="fk_song_artists_artist_id_artists"
        ),
        sa.PrimaryKeyConstraint("song_id", "position", name="pk_song_artists"),
    )


def downgrade() -> None:
    op.drop_table("song_artists")
    op.drop_table("album_artists")
    op.drop_table("album_songs")
    op.drop_index("ix_songs_album_id", table_name="songs")
    op.drop_table("songs")
    op.drop_table("albums")
    op.drop_table("audio_formats")
    op.drop_table("artists")
    op.drop_table("games")
