"""Synchronization defaults."""

from __future__ import annotations

from dataclasses import dataclass

from .env import positive_int_env_var

DEFAULT_SYNC_CONCURRENCY = 8


@dataclass(frozen=True, slots=True)
class SyncConfig:
    concurrency: int = DEFAULT_SYNC_CONCURRENCY


def get_sync_config() -> SyncConfig:
    return SyncConfig(
        concurrency=positive_int_env_var("SIRENSYNC_CONCURRENCY", DEFAULT_SYNC_CONCURRENCY)
    )
