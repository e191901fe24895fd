"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_bool_env, optional_int_env, require_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig, RetryPolicy
from .logging import configure_logging
from .platform import PlatformConfig, get_platform_config
from .sync import DEFAULT_BATCH_SIZE, DEFAULT_PARALLELISM, SyncConfig, get_sync_config

__all__ = [
    "DEFAULT_BATCH_SIZE",
    "DEFAULT_PARALLELISM",
    "CacheConfig",
    "ConfigurationError",
    "MissingConfigurationError",
    "PlatformConfig",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "SyncConfig",
    "configure_logging",
    "get_platform_config",
    "get_sync_config",
    "optional_bool_env",
    "optional_int_env",
    "require_env_var",
    "require_env_vars",
]
