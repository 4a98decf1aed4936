"""SQLAlchemy adapter package for the sirensync catalog store."""

from __future__ import annotations

from .mappings import create_all_tables, metadata
from .media import MediaStore
from .repositories import (
    MissingAlbumError,
    SqlAlchemyAlbumRepository,
    SqlAlchemySongRepository,
    StoreError,
)
from .store import SqlAlchemyCatalogStore
from .unit_of_work import (
    SqlAlchemyCatalogUnitOfWork,
    StartupError,
    shutdown,
    startup,
)

__all__ = [
    "MediaStore",
    "MissingAlbumError",
    "SqlAlchemyAlbumRepository",
    "SqlAlchemyCatalogStore",
    "SqlAlchemyCatalogUnitOfWork",
    "SqlAlchemySongRepository",
    "StartupError",
    "StoreError",
    "create_all_tables",
    "metadata",
    "shutdown",
    "startup",
]
