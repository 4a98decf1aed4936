"""Translate Monster Siren payloads into catalog port records."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sirensync.domain.ports.catalog import (
    AlbumDetail,
    AlbumSummary,
    AlbumTrack,
    SongDetail,
    SongSummary,
)

if TYPE_CHECKING:
    from .schema import (
        AlbumDetailPayload,
        AlbumPayload,
        AlbumSongPayload,
        AlbumSummaryPayload,
        SongPayload,
        SongSummaryPayload,
    )


def _names(values: list[str]) -> tuple[str, ...]:
    return tuple(name.strip() for name in values if name.strip())


def translate_song_summary(payload: SongSummaryPayload) -> SongSummary:
    return SongSummary(
        id=payload.cid,
        name=payload.name,
        album_id=payload.album_cid,
        artists=_names(payload.artists),
    )


def translate_song(payload: SongPayload) -> SongDetail:
    return SongDetail(
        id=payload.cid,
        name=payload.name,
        album_id=payload.album_cid,
        source_url=payload.source_url,
        lyric_url=payload.lyric_url or None,
        artists=_names(payload.artists),
    )


def translate_album_summary(payload: AlbumSummaryPayload) -> AlbumSummary:
    """Listing entries carry no intro or origin tag."""

    return AlbumSummary(
        id=payload.cid,
        name=payload.name,
        cover_url=payload.cover_url,
        artists=_names(payload.artistes),
    )


def translate_album(payload: AlbumPayload) -> AlbumSummary:
    return AlbumSummary(
        id=payload.cid,
        name=payload.name,
        cover_url=payload.cover_url,
        artists=_names(payload.artistes),
        intro=payload.intro,
        belong=payload.belong,
        cover_de_url=payload.cover_de_url or None,
    )


def translate_album_track(payload: AlbumSongPayload) -> AlbumTrack:
    return AlbumTrack(id=payload.cid, name=payload.name, artists=_names(payload.artistes))


def translate_album_detail(payload: AlbumDetailPayload) -> AlbumDetail:
    return AlbumDetail(
        id=payload.cid,
        name=payload.name,
        intro=payload.intro,
        belong=payload.belong,
        cover_url=payload.cover_url,
        cover_de_url=payload.cover_de_url or None,
        songs=tuple(translate_album_track(song) for song in payload.songs),
    )
