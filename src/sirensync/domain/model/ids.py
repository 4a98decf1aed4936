"""Typed catalog identifiers.

The remote catalog addresses songs and albums by small integers rendered as
zero-padded decimal strings (``"000001"`` for songs, ``"0001"`` for albums).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Self

from sirensync.domain.errors import FailedToParseIdError


@dataclass(frozen=True, order=True, slots=True)
class CatalogId:
    value: int

    KIND: ClassVar[str] = "catalog"
    WIDTH: ClassVar[int] = 6

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise FailedToParseIdError(self.KIND, repr(self.value))
        if not 0 <= self.value < 10**self.WIDTH:
            raise FailedToParseIdError(self.KIND, str(self.value))

    @classmethod
    def try_new(cls, s: str) -> Self:
        """Parse a decimal string (zero padding allowed) into an identifier."""

        stripped = s.strip()
        if not stripped or not stripped.isascii() or not stripped.isdigit():
            raise FailedToParseIdError(cls.KIND, s)
        value = int(stripped)
        if value >= 10**cls.WIDTH:
            raise FailedToParseIdError(cls.KIND, s)
        return cls(value)

    def padded(self) -> str:
        return f"{self.value:0{self.WIDTH}d}"

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value})"


@dataclass(frozen=True, order=True, slots=True, repr=False)
class SongId(CatalogId):
    KIND: ClassVar[str] = "song"
    WIDTH: ClassVar[int] = 6


@dataclass(frozen=True, order=True, slots=True, repr=False)
class AlbumId(CatalogId):
    KIND: ClassVar[str] = "album"
    WIDTH: ClassVar[int] = 4
