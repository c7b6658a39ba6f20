"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_flag, optional_env_var
from .errors import ConfigurationError
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig, RetryPolicy
from .logging import configure_logging
from .seasons import SeasonConfig, get_season_config
from .storage import DatabaseConfig, StorageConfig, get_database_config, get_storage_config

__all__ = [
    "CacheConfig",
    "ConfigurationError",
    "DatabaseConfig",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "SeasonConfig",
    "StorageConfig",
    "configure_logging",
    "get_database_config",
    "get_season_config",
    "get_storage_config",
    "optional_env_flag",
    "optional_env_var",
]
