from __future__ import annotations

from pathlib import PurePosixPath

import pytest

from sirensync.adapters.sqlalchemy.media import MediaStore  # noqa: TC001
from sirensync.domain.model import AudioRawData
from tests.helpers.catalog import PNG_BYTES, audio_bytes


def test_identical_audio_shares_one_file(media_store: MediaStore) -> None:
    first = media_store.save_audio(AudioRawData.try_new(audio_bytes("000001")))
    second = media_store.save_audio(AudioRawData.try_new(audio_bytes("000001")))

    assert first == second
    assert first.parts[0] == "audio"
    assert first.suffix == ".flac"
    assert len(list((media_store.root / "audio").iterdir())) == 1


def test_cover_path_uses_detected_extension(media_store: MediaStore) -> None:
    relative = media_store.save_cover(PNG_BYTES)

    assert relative.startswith("covers/")
    assert relative.endswith(".png")
    assert media_store.read_cover(relative) == PNG_BYTES


def test_empty_cover_is_not_stored(media_store: MediaStore) -> None:
    assert media_store.save_cover(b"") == ""
    assert media_store.read_cover("") == b""


@pytest.mark.parametrize("relative", ["/etc/passwd", "covers/../../secret.png"])
def test_paths_outside_the_root_are_rejected(media_store: MediaStore, relative: str) -> None:
    with pytest.raises(ValueError, match="escapes the media root"):
        media_store.read_audio(PurePosixPath(relative))
