from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine, inspect

from sirensync.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyCatalogUnitOfWork,
    StartupError,
    configured_engine,
    is_started,
    shutdown,
    startup,
)
from sirensync.domain.model import AlbumId, SongId
from tests.helpers.catalog import make_album, make_song

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from sqlalchemy.engine import Engine


@pytest.fixture(autouse=True)
def reset_unit_of_work_state() -> Iterator[None]:
    shutdown()
    yield
    shutdown()


def test_unit_of_work_requires_startup() -> None:
    with pytest.raises(StartupError):
        SqlAlchemyCatalogUnitOfWork()


def test_startup_requires_force_for_reconfiguration(tmp_path: Path) -> None:
    engine_a = create_engine("sqlite+pysqlite:///:memory:", future=True)
    engine_b = create_engine("sqlite+pysqlite:///:memory:", future=True)

    startup(engine=engine_a, media_dir=tmp_path / "media", force=True)

    with pytest.raises(StartupError):
        startup(engine=engine_b, media_dir=tmp_path / "media")

    startup(engine=engine_b, media_dir=tmp_path / "media", force=True)
    assert configured_engine() is engine_b


def test_startup_migrates_schema_and_creates_media_dir(tmp_path: Path) -> None:
    engine = create_engine(f"sqlite+pysqlite:///{tmp_path / 'fresh.db'}", future=True)

    startup(engine=engine, media_dir=tmp_path / "media")

    assert is_started()
    assert (tmp_path / "media").is_dir()
    tables = set(inspect(engine).get_table_names())
    assert {"albums", "songs", "album_songs", "alembic_version"} <= tables


def test_shutdown_resets_state(sqlite_engine: Engine, tmp_path: Path) -> None:
    startup(engine=sqlite_engine, media_dir=tmp_path / "media", force=True)
    shutdown()

    assert configured_engine() is None
    assert not is_started()


def test_unit_of_work_commits_and_reads_back(sqlite_engine: Engine, tmp_path: Path) -> None:
    startup(engine=sqlite_engine, media_dir=tmp_path / "media", force=True)
    album = make_album(1, song_ids=(1,))

    with SqlAlchemyCatalogUnitOfWork() as uow:
        uow.repositories.albums.add(album)
        uow.repositories.songs.add(make_song(1, album=album))
        uow.commit()

    with SqlAlchemyCatalogUnitOfWork() as uow:
        assert uow.repositories.albums.get(AlbumId(1)) == album
        assert uow.repositories.songs.list_ids() == [SongId(1)]


def test_unit_of_work_rolls_back_on_error(sqlite_engine: Engine, tmp_path: Path) -> None:
    startup(engine=sqlite_engine, media_dir=tmp_path / "media", force=True)

    with pytest.raises(RuntimeError, match="boom"), SqlAlchemyCatalogUnitOfWork() as uow:
        uow.repositories.albums.add(make_album(1))
        raise RuntimeError("boom")

    with SqlAlchemyCatalogUnitOfWork() as uow:
        assert uow.repositories.albums.get(AlbumId(1)) is None


def test_repositories_require_an_open_session(sqlite_engine: Engine, tmp_path: Path) -> None:
    startup(engine=sqlite_engine, media_dir=tmp_path / "media", force=True)
    uow = SqlAlchemyCatalogUnitOfWork()

    with pytest.raises(StartupError):
        _ = uow.repositories
