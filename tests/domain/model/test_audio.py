from __future__ import annotations

import hashlib
from pathlib import PurePosixPath

from sirensync.domain.model import AudioFormat, AudioRawData


def test_try_new_derives_format_and_content_addressed_path() -> None:
    raw = b"ID3" + b"\x00" * 10

    audio = AudioRawData.try_new(raw, source_url="https://cdn.example.test/x.mp3")

    digest = hashlib.sha256(raw).hexdigest()
    assert audio.format is AudioFormat.MP3
    assert audio.save_path == PurePosixPath(f"{digest}.mp3")
    assert audio.size == len(raw)


def test_identical_payloads_share_a_path() -> None:
    first = AudioRawData.try_new(b"fLaC-same")
    second = AudioRawData.try_new(b"fLaC-same")
    other = AudioRawData.try_new(b"fLaC-other")

    assert first.save_path == second.save_path
    assert first.save_path != other.save_path


def test_reconstruct_keeps_stored_values() -> None:
    audio = AudioRawData.reconstruct(b"", AudioFormat.WAV, "abc.wav")

    assert audio.raw == b""
    assert audio.format is AudioFormat.WAV
    assert audio.save_path == PurePosixPath("abc.wav")


def test_repr_hides_raw_bytes() -> None:
    audio = AudioRawData.try_new(b"fLaC" + b"secret" * 100)

    assert "secret" not in repr(audio)


def test_detected_format_wins_over_url_suffix() -> None:
    audio = AudioRawData.try_new(
        b"RIFF-payload",
        source_url="https://cdn.example.test/x.mp3",
        audio_format=AudioFormat.WAV,
    )

    assert audio.format is AudioFormat.WAV
    assert audio.save_path.suffix == ".wav"
