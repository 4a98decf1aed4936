"""Captured-shape payloads for Monster Siren adapter tests."""

from __future__ import annotations

import pytest

SirenPayload = dict[str, object]


@pytest.fixture
def song_payload() -> SirenPayload:
    return {
        "cid": "514526",
        "name": "Operation Pyrite",
        "albumCid": "6655",
        "sourceUrl": "https://res01.hycdn.cn/audio/514526.wav",
        "lyricUrl": None,
        "mvUrl": None,
        "mvCoverUrl": None,
        "artists": ["塞壬唱片-MSR"],
    }


@pytest.fixture
def songs_payload() -> SirenPayload:
    return {
        "list": [
            {
                "cid": "514526",
                "name": "Operation Pyrite",
                "albumCid": "6655",
                "artists": ["塞壬唱片-MSR"],
            },
            {
                "cid": "514527",
                "name": "Operation Pyrite (Instrumental)",
                "albumCid": "6655",
                "artists": None,
            },
        ],
        "autoplay": None,
    }


@pytest.fixture
def album_payload() -> SirenPayload:
    return {
        "cid": "6655",
        "name": "Operation Pyrite",
        "intro": "Album intro text.",
        "belong": "arknights",
        "coverUrl": "https://web.hycdn.cn/siren/pic/6655.jpg",
        "coverDeUrl": "https://web.hycdn.cn/siren/pic/6655-de.jpg",
        "artistes": ["塞壬唱片-MSR"],
    }


@pytest.fixture
def album_detail_payload() -> SirenPayload:
    return {
        "cid": "6655",
        "name": "Operation Pyrite",
        "intro": "Album intro text.",
        "belong": "arknights",
        "coverUrl": "https://web.hycdn.cn/siren/pic/6655.jpg",
        "coverDeUrl": "https://web.hycdn.cn/siren/pic/6655-de.jpg",
        "songs": [
            {"cid": "514526", "name": "Operation Pyrite", "artistes": ["塞壬唱片-MSR"]},
            {"cid": "514527", "name": "Operation Pyrite (Instrumental)", "artistes": []},
        ],
    }


@pytest.fixture
def albums_payload() -> list[SirenPayload]:
    return [
        {
            "cid": "6655",
            "name": "Operation Pyrite",
            "coverUrl": "https://web.hycdn.cn/siren/pic/6655.jpg",
            "artistes": ["塞壬唱片-MSR"],
        },
        {
            "cid": "0001",
            "name": "Arknights OST",
            "coverUrl": "https://web.hycdn.cn/siren/pic/0001.jpg",
            "artistes": [],
        },
    ]
