"""Payload classification backed by mutagen (audio) and Pillow (images)."""

from __future__ import annotations

import io
from logging import getLogger
from typing import TYPE_CHECKING

from mutagen import File as MutagenFile
from mutagen import MutagenError
from mutagen.flac import FLAC
from mutagen.mp3 import MP3
from mutagen.wave import WAVE
from PIL import Image

from sirensync.domain.model import AudioFormat

log = getLogger(__name__)

COVER_FORMATS: frozenset[str] = frozenset({"PNG", "JPEG", "GIF", "WEBP"})

_AUDIO_TYPES: tuple[tuple[type[object], AudioFormat], ...] = (
    (FLAC, AudioFormat.FLAC),
    (MP3, AudioFormat.MP3),
    (WAVE, AudioFormat.WAV),
)


def detect_audio_format(raw: bytes) -> AudioFormat | None:
    """Return the format mutagen recognises in ``raw``, or ``None``."""

    if not raw:
        return None
    try:
        audio = MutagenFile(io.BytesIO(raw))
    except MutagenError as exc:
        log.debug("Audio payload not recognised: %s", exc)
        return None
    for audio_type, audio_format in _AUDIO_TYPES:
        if isinstance(audio, audio_type):
            return audio_format
    return None


def detect_image_format(data: bytes) -> str | None:
    """Return Pillow's format name (``"PNG"``, ``"JPEG"``...) for ``data``, or ``None``."""

    if not data:
        return None
    try:
        with Image.open(io.BytesIO(data)) as image:
            return image.format
    except OSError as exc:
        log.debug("Image payload not recognised: %s", exc)
        return None


class LibraryMediaInspector:
    """``MediaInspector`` delegating to mutagen and Pillow."""

    def audio_format(self, raw: bytes) -> AudioFormat | None:
        return detect_audio_format(raw)

    def is_image(self, data: bytes) -> bool:
        return detect_image_format(data) in COVER_FORMATS


if TYPE_CHECKING:
    from sirensync.domain.ports.media import MediaInspector

    _inspector_check: MediaInspector = LibraryMediaInspector()
