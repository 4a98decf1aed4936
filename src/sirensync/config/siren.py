"""Monster Siren catalog configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import optional_env_var
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig, RetryPolicy

DEFAULT_SIREN_BASE_URL = "https://monster-siren.hypergryph.com/api/"
SIREN_TIMEOUT_SECONDS = 60.0


@dataclass(frozen=True, slots=True)
class SirenConfig:
    resilience: ResilienceConfig

    @property
    def base_url(self) -> str:
        return self.resilience.base_url or DEFAULT_SIREN_BASE_URL


def _should_cache_payload(payload: object) -> bool:
    # only successful per-entity envelopes; listings must reflect the current catalog
    if not isinstance(payload, dict) or payload.get("code") != 0:
        return False
    data = payload.get("data")
    return isinstance(data, dict) and "list" not in data


def get_siren_config(*, resilience: ResilienceConfig | None = None) -> SirenConfig:
    if resilience is not None:
        return SirenConfig(resilience=resilience)

    base_url = optional_env_var("SIREN_BASE_URL", DEFAULT_SIREN_BASE_URL) or ""
    if not base_url.endswith("/"):
        base_url += "/"
    user_agent = optional_env_var("SIREN_USER_AGENT")
    headers = {"User-Agent": user_agent} if user_agent else None

    return SirenConfig(
        resilience=ResilienceConfig(
            name="siren",
            base_url=base_url,
            timeout_seconds=SIREN_TIMEOUT_SECONDS,
            retry=RetryPolicy(total=4),
            ratelimit=RateLimit(max_calls=8, per_seconds=1.0),
            cache=CacheConfig(backend="memory", should_cache=_should_cache_payload),
            default_headers=headers,
        )
    )
