"""Audio payloads attached to songs."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, field
from pathlib import PurePosixPath

from sirensync.domain.model.enums import AudioFormat


@dataclass(frozen=True, slots=True)
class AudioRawData:
    """Raw audio bytes plus the format and the relative path they are stored under.

    ``try_new`` is used for bytes freshly downloaded from the catalog: the format is
    the one detected from the payload when given, else inferred from the source URL.
    The path is derived from the content hash, so identical payloads always map to
    the same file. ``reconstruct`` rehydrates a stored payload without touching the
    bytes (store adapters usually pass ``b""``).
    """

    raw: bytes = field(repr=False)
    format: AudioFormat = AudioFormat.FLAC
    save_path: PurePosixPath = field(default_factory=PurePosixPath)

    @classmethod
    def try_new(
        cls,
        raw: bytes,
        *,
        source_url: str | None = None,
        audio_format: AudioFormat | None = None,
    ) -> AudioRawData:
        audio_format = audio_format or AudioFormat.from_source_url(source_url)
        digest = hashlib.sha256(raw).hexdigest()
        save_path = PurePosixPath(f"{digest}.{audio_format}")
        return cls(raw=raw, format=audio_format, save_path=save_path)

    @classmethod
    def reconstruct(
        cls,
        raw: bytes,
        audio_format: AudioFormat,
        save_path: PurePosixPath | str,
    ) -> AudioRawData:
        return cls(raw=raw, format=audio_format, save_path=PurePosixPath(save_path))

    @property
    def size(self) -> int:
        return len(self.raw)
