"""Public interface for the Monster Siren catalog adapter."""

from __future__ import annotations

from .client import CatalogAPIError, SirenCatalogClient
from .schema import (
    AlbumDetailPayload,
    AlbumPayload,
    AlbumSummaryPayload,
    Envelope,
    SongPayload,
    SongSummaries,
)
from .translator import (
    translate_album,
    translate_album_detail,
    translate_album_summary,
    translate_song,
    translate_song_summary,
)

__all__ = [
    "AlbumDetailPayload",
    "AlbumPayload",
    "AlbumSummaryPayload",
    "CatalogAPIError",
    "Envelope",
    "SirenCatalogClient",
    "SongPayload",
    "SongSummaries",
    "translate_album",
    "translate_album_detail",
    "translate_album_summary",
    "translate_song",
    "translate_song_summary",
]
