"""Pydantic models describing the Monster Siren API payloads.

Every endpoint wraps its payload in ``{"code": int, "msg": str, "data": ...}``;
``code == 0`` means success.
"""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


def _none_to_list(value: object) -> object:
    return [] if value is None else value


class SirenBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class Envelope(SirenBaseModel):
    code: int
    msg: str = ""
    data: object = None

    @property
    def ok(self) -> bool:
        return self.code == 0


class SongSummaryPayload(SirenBaseModel):
    cid: str
    name: str
    album_cid: str = Field(alias="albumCid")
    artists: list[str] = Field(default_factory=list[str])

    _normalize_artists = field_validator("artists", mode="before")(_none_to_list)


class SongSummaries(SirenBaseModel):
    items: list[SongSummaryPayload] = Field(
        default_factory=list[SongSummaryPayload],
        alias="list",
    )


class SongPayload(SirenBaseModel):
    cid: str
    name: str
    album_cid: str = Field(alias="albumCid")
    source_url: str = Field(alias="sourceUrl")
    lyric_url: str | None = Field(default=None, alias="lyricUrl")
    artists: list[str] = Field(default_factory=list[str])

    _normalize_artists = field_validator("artists", mode="before")(_none_to_list)


class AlbumSummaryPayload(SirenBaseModel):
    cid: str
    name: str
    cover_url: str = Field(alias="coverUrl")
    artistes: list[str] = Field(
        default_factory=list[str],
        validation_alias=AliasChoices("artistes", "artists"),
    )

    _normalize_artistes = field_validator("artistes", mode="before")(_none_to_list)


class AlbumPayload(SirenBaseModel):
    cid: str
    name: str
    intro: str = ""
    belong: str
    cover_url: str = Field(alias="coverUrl")
    cover_de_url: str | None = Field(default=None, alias="coverDeUrl")
    artistes: list[str] = Field(
        default_factory=list[str],
        validation_alias=AliasChoices("artistes", "artists"),
    )

    _normalize_artistes = field_validator("artistes", mode="before")(_none_to_list)


class AlbumSongPayload(SirenBaseModel):
    cid: str
    name: str
    artistes: list[str] = Field(
        default_factory=list[str],
        validation_alias=AliasChoices("artistes", "artists"),
    )

    _normalize_artistes = field_validator("artistes", mode="before")(_none_to_list)


class AlbumDetailPayload(SirenBaseModel):
    cid: str
    name: str
    intro: str = ""
    belong: str
    cover_url: str = Field(alias="coverUrl")
    cover_de_url: str | None = Field(default=None, alias="coverDeUrl")
    songs: list[AlbumSongPayload] = Field(default_factory=list[AlbumSongPayload])

    _normalize_songs = field_validator("songs", mode="before")(_none_to_list)
