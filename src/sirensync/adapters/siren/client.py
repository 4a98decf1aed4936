"""HTTP client for the Monster Siren catalog API."""

from __future__ import annotations

import json
from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import BaseModel, ValidationError

from sirensync.adapters.http_resilience import ResilientClient
from sirensync.domain.ports.catalog import CatalogFetcher

from .schema import (
    AlbumDetailPayload,
    AlbumPayload,
    AlbumSummaryPayload,
    Envelope,
    SongPayload,
    SongSummaries,
)
from .translator import (
    translate_album,
    translate_album_detail,
    translate_album_summary,
    translate_song,
    translate_song_summary,
)

if TYPE_CHECKING:
    from collections.abc import Callable
    from types import TracebackType

    from sirensync.config.http_resilience import ResilienceConfig
    from sirensync.config.siren import SirenConfig
    from sirensync.domain.model import AlbumId, SongId
    from sirensync.domain.ports.catalog import (
        AlbumDetail,
        AlbumSummary,
        SongDetail,
        SongSummary,
    )

log = getLogger(__name__)


class CatalogAPIError(RuntimeError):
    """Raised when the catalog API answers with an error or an unexpected payload."""

    def __init__(self, message: str, *, code: int | None = None, path: str | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.path = path


class SirenCatalogClient:
    """Catalog fetcher backed by the Monster Siren web API.

    Use as an async context manager; one HTTP connection pool is shared by every
    request made while the client is open, including concurrent ones.
    """

    def __init__(
        self,
        *,
        config: SirenConfig,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> None:
        self._config = config
        self._resilience = config.resilience
        self._client_factory = client_factory or ResilientClient
        self._client: ResilientClient | None = None

    async def __aenter__(self) -> SirenCatalogClient:
        if self._client is None:
            self._client = self._client_factory(self._resilience)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        client, self._client = self._client, None
        if client is not None:
            await client.aclose()

    async def fetch_song(self, song_id: SongId) -> SongDetail:
        payload = await self._get_data(f"song/{song_id.padded()}", SongPayload)
        return translate_song(payload)

    async def fetch_all_songs(self) -> list[SongSummary]:
        summaries = await self._get_data("songs", SongSummaries)
        log.debug("Catalog lists %s songs", len(summaries.items))
        return [translate_song_summary(item) for item in summaries.items]

    async def fetch_album(self, album_id: AlbumId) -> AlbumSummary:
        payload = await self._get_data(f"album/{album_id.padded()}/data", AlbumPayload)
        return translate_album(payload)

    async def fetch_album_detail(self, album_id: AlbumId) -> AlbumDetail:
        payload = await self._get_data(f"album/{album_id.padded()}/detail", AlbumDetailPayload)
        return translate_album_detail(payload)

    async def fetch_all_albums(self) -> list[AlbumSummary]:
        data = await self._get_envelope_data("albums")
        if not isinstance(data, list):
            raise CatalogAPIError("Unexpected album listing payload", path="albums")
        try:
            albums = [AlbumSummaryPayload.model_validate(item) for item in data]
        except ValidationError as exc:
            raise CatalogAPIError(f"Invalid album listing: {exc}", path="albums") from exc
        return [translate_album_summary(album) for album in albums]

    async def fetch_bytes(self, url: str) -> bytes:
        response = await self._require_client().get(url)
        response.raise_for_status()
        log.debug("Downloaded %s bytes from %s", len(response.content), url)
        return response.content

    async def _get_data[TModel: BaseModel](self, path: str, model: type[TModel]) -> TModel:
        data = await self._get_envelope_data(path)
        try:
            return model.model_validate(data)
        except ValidationError as exc:
            raise CatalogAPIError(f"Invalid payload for {path}: {exc}", path=path) from exc

    async def _get_envelope_data(self, path: str) -> object:
        response = await self._require_client().get(path)
        response.raise_for_status()

        try:
            envelope = Envelope.model_validate(response.json())
        except (json.JSONDecodeError, ValidationError) as exc:
            raise CatalogAPIError(f"Unexpected response for {path}", path=path) from exc

        if not envelope.ok:
            log.error("Catalog API error %s on %s: %s", envelope.code, path, envelope.msg)
            raise CatalogAPIError(
                envelope.msg or "Catalog API error", code=envelope.code, path=path
            )
        return envelope.data

    def _require_client(self) -> ResilientClient:
        if self._client is None:
            raise RuntimeError("SirenCatalogClient must be used as an async context manager")
        return self._client


if TYPE_CHECKING:
    from sirensync.config.siren import get_siren_config

    _fetcher_check: CatalogFetcher = SirenCatalogClient(config=get_siren_config())
