"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum
from pathlib import PurePosixPath
from urllib.parse import urlsplit

from sirensync.domain.errors import FailedToParseOriginGameError, InvalidFieldError


class AudioFormat(StrEnum):
    FLAC = "flac"
    MP3 = "mp3"
    WAV = "wav"

    @classmethod
    def default(cls) -> AudioFormat:
        return cls.FLAC

    @classmethod
    def parse(cls, s: str) -> AudioFormat:
        try:
            return cls(s.strip().lower())
        except ValueError:
            raise InvalidFieldError("audio_format", s) from None

    @classmethod
    def from_source_url(cls, source_url: str | None) -> AudioFormat:
        """Guess the format from the URL suffix, falling back to the default."""

        if source_url:
            suffix = PurePosixPath(urlsplit(source_url).path).suffix.lstrip(".").lower()
            if suffix in cls._value2member_map_:
                return cls(suffix)
        return cls.default()


class OriginGame(StrEnum):
    ARKNIGHTS = "arknights"

    @classmethod
    def try_new(cls, s: str) -> OriginGame:
        # case-sensitive: the catalog emits lowercase tags only
        try:
            return cls(s)
        except ValueError:
            raise FailedToParseOriginGameError(s) from None
