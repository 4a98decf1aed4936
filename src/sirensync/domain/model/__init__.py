"""Public domain model surface."""

from __future__ import annotations

from sirensync.domain.model.audio import AudioRawData
from sirensync.domain.model.enums import AudioFormat, OriginGame
from sirensync.domain.model.ids import AlbumId, CatalogId, SongId
from sirensync.domain.model.music import Album, Song

__all__ = [  # noqa: RUF022
    # identifiers
    "CatalogId",
    "SongId",
    "AlbumId",
    # enums
    "AudioFormat",
    "OriginGame",
    # payloads
    "AudioRawData",
    # aggregates
    "Song",
    "Album",
]
