"""Filesystem storage for audio and cover payloads referenced by the catalog tables."""

from __future__ import annotations

import hashlib
import os
from logging import getLogger
from pathlib import Path, PurePosixPath
from typing import TYPE_CHECKING

from sirensync.adapters.media_inspection import detect_image_format

if TYPE_CHECKING:
    from sirensync.domain.model import AudioRawData

log = getLogger(__name__)

AUDIO_DIR = "audio"
COVER_DIR = "covers"


class MediaStore:
    """Content-addressed blob storage below a media root.

    Stored paths are relative POSIX paths; identical payloads share one file.
    """

    def __init__(self, root: Path) -> None:
        self.root = root

    def save_audio(self, source: AudioRawData) -> PurePosixPath:
        relative = PurePosixPath(AUDIO_DIR) / source.save_path
        self._write(relative, source.raw)
        return relative

    def save_cover(self, data: bytes) -> str:
        """Store cover bytes and return their relative path; empty covers are not stored."""

        if not data:
            return ""
        digest = hashlib.sha256(data).hexdigest()
        extension = (detect_image_format(data) or "bin").lower()
        relative = PurePosixPath(COVER_DIR) / f"{digest}.{extension}"
        self._write(relative, data)
        return str(relative)

    def read_cover(self, relative: str) -> bytes:
        if not relative:
            return b""
        return self._resolve(PurePosixPath(relative)).read_bytes()

    def read_audio(self, relative: PurePosixPath | str) -> bytes:
        return self._resolve(PurePosixPath(relative)).read_bytes()

    def _resolve(self, relative: PurePosixPath) -> Path:
        if relative.is_absolute() or ".." in relative.parts:
            raise ValueError(f"Media path escapes the media root: {relative}")
        return self.root.joinpath(*relative.parts)

    def _write(self, relative: PurePosixPath, data: bytes) -> None:
        target = self._resolve(relative)
        if target.exists():
            return
        target.parent.mkdir(parents=True, exist_ok=True)
        partial = target.with_name(f".{target.name}.{os.getpid()}.partial")
        partial.write_bytes(data)
        partial.replace(target)
        log.debug("Stored %s bytes at %s", len(data), relative)
