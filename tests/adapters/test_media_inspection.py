from __future__ import annotations

import io
import wave

import pytest
from PIL import Image

from sirensync.adapters.media_inspection import (
    LibraryMediaInspector,
    detect_audio_format,
    detect_image_format,
)
from sirensync.domain.model import AudioFormat
from sirensync.domain.ports.media import MediaInspector
from tests.helpers.catalog import AUDIO_BYTES, PNG_BYTES


def _wav_bytes() -> bytes:
    buffer = io.BytesIO()
    with wave.open(buffer, "wb") as writer:
        writer.setnchannels(1)
        writer.setsampwidth(2)
        writer.setframerate(8000)
        writer.writeframes(b"\x00\x00" * 800)
    return buffer.getvalue()


def _image_bytes(image_format: str) -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", (2, 2)).save(buffer, format=image_format)
    return buffer.getvalue()


def test_inspector_satisfies_port() -> None:
    assert isinstance(LibraryMediaInspector(), MediaInspector)


def test_wave_payload_is_detected() -> None:
    assert detect_audio_format(_wav_bytes()) is AudioFormat.WAV


@pytest.mark.parametrize("raw", [b"", AUDIO_BYTES, b"<html>not found</html>"])
def test_unrecognised_audio_is_none(raw: bytes) -> None:
    assert detect_audio_format(raw) is None


@pytest.mark.parametrize(("image_format", "expected"), [("PNG", "PNG"), ("JPEG", "JPEG")])
def test_image_format_is_detected(image_format: str, expected: str) -> None:
    assert detect_image_format(_image_bytes(image_format)) == expected


def test_cover_formats_are_restricted() -> None:
    inspector = LibraryMediaInspector()

    assert inspector.is_image(PNG_BYTES)
    assert inspector.is_image(_image_bytes("GIF"))
    assert not inspector.is_image(_image_bytes("BMP"))
    assert not inspector.is_image(b"<html>not found</html>")
    assert not inspector.is_image(b"")
