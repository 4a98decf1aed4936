"""Domain port definitions for adapters."""

from __future__ import annotations

from .catalog import (
    AlbumDetail,
    AlbumSummary,
    AlbumTrack,
    CatalogFetcher,
    SongDetail,
    SongSummary,
)
from .media import MediaInspector
from .persistence import AlbumRepository, SongRepository, SongStore
from .unit_of_work import CatalogRepositories, CatalogUnitOfWork, RepositoryCollection, UnitOfWork

__all__ = [
    "AlbumDetail",
    "AlbumRepository",
    "AlbumSummary",
    "AlbumTrack",
    "CatalogFetcher",
    "CatalogRepositories",
    "CatalogUnitOfWork",
    "MediaInspector",
    "RepositoryCollection",
    "SongDetail",
    "SongRepository",
    "SongStore",
    "SongSummary",
    "UnitOfWork",
]
