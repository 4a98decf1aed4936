from __future__ import annotations

import pytest

from sirensync.app import fetch_song, sync_new_songs
from sirensync.domain.errors import FailedToParseIdError
from sirensync.domain.model import AlbumId, SongId
from tests.helpers.catalog import FakeCatalog, InMemoryStore


def test_sync_new_songs_runs_with_given_adapters(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SIRENSYNC_CONCURRENCY", "2")
    catalog = FakeCatalog({"0001": ["000001", "000002", "000003"]}, delay=0.005)
    store = InMemoryStore()

    result = sync_new_songs(catalog=catalog, store=store)

    assert result.ok
    assert sorted(result.stored) == [SongId(1), SongId(2), SongId(3)]
    assert catalog.peak_in_flight == 2


def test_explicit_concurrency_wins_over_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SIRENSYNC_CONCURRENCY", "1")
    catalog = FakeCatalog({"0001": [f"{value:06d}" for value in range(1, 7)]}, delay=0.005)

    sync_new_songs(catalog=catalog, store=InMemoryStore(), concurrency=4)

    assert catalog.peak_in_flight == 4


def test_fetch_song_builds_without_saving() -> None:
    catalog = FakeCatalog({"0001": ["000001", "000002"]})
    store = InMemoryStore()

    song = fetch_song("000002", catalog=catalog, store=store)

    assert song.id == SongId(2)
    assert song.track_number == 2
    assert store.saved_songs == []
    assert store.saved_albums == [AlbumId(1)]


def test_fetch_song_rejects_malformed_id() -> None:
    with pytest.raises(FailedToParseIdError):
        fetch_song("abc", catalog=FakeCatalog({}), store=InMemoryStore())
