"""Catalog platform connection settings."""

from __future__ import annotations

from dataclasses import dataclass

from .env import require_env_vars
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig, RetryPolicy

PLATFORM_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True, slots=True)
class PlatformConfig:
    """Holds the catalog platform API configuration values."""

    project_key: str
    api_url: str
    access_token: str
    resilience: ResilienceConfig
    # stable reference lookups (types, tax categories, ...) tolerate caching,
    # resource fetches never do because versions must be current
    reference_resilience: ResilienceConfig


def _has_results(payload: object) -> bool:
    """Cache reference lookups only when they found something."""

    return isinstance(payload, dict) and bool(payload.get("results"))


def _resilience(
    name: str,
    *,
    base_url: str,
    access_token: str,
    cache: CacheConfig | None,
) -> ResilienceConfig:
    return ResilienceConfig(
        name=name,
        base_url=base_url,
        timeout_seconds=PLATFORM_TIMEOUT_SECONDS,
        retry=RetryPolicy(total=3),
        ratelimit=RateLimit(max_calls=20, per_seconds=1.0),
        cache=cache,
        default_headers={"Authorization": f"Bearer {access_token}"},
    )


def get_platform_config() -> PlatformConfig:
    values = require_env_vars(("CATALOG_PROJECT_KEY", "CATALOG_API_URL", "CATALOG_API_TOKEN"))
    project_key = values["CATALOG_PROJECT_KEY"]
    api_url = values["CATALOG_API_URL"].rstrip("/")
    token = values["CATALOG_API_TOKEN"]
    base_url = f"{api_url}/{project_key}/"
    return PlatformConfig(
        project_key=project_key,
        api_url=api_url,
        access_token=token,
        resilience=_resilience("catalog", base_url=base_url, access_token=token, cache=None),
        reference_resilience=_resilience(
            "catalog-references",
            base_url=base_url,
            access_token=token,
            cache=CacheConfig(backend="memory", should_cache=_has_results),
        ),
    )
