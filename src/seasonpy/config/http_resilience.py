"""Configuration types for the resilient download client."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

import httpx
from httpx_retries import Retry

# Season files are static; only idempotent reads are ever retried.
_RETRY_METHODS = ("GET", "HEAD")
_RETRY_STATUSES = (429, 500, 502, 503, 504)


@dataclass(slots=True, frozen=True)
class RetryPolicy:
    total: int = 3
    backoff_factor: float = 0.5
    max_backoff_wait: float = 30.0
    status_forcelist: tuple[int, ...] = _RETRY_STATUSES
    retry_on_exceptions: tuple[type[httpx.HTTPError], ...] = (
        httpx.TimeoutException,
        httpx.NetworkError,
        httpx.RemoteProtocolError,
    )

    def build(self) -> Retry:
        return Retry(
            total=self.total,
            backoff_factor=self.backoff_factor,
            max_backoff_wait=self.max_backoff_wait,
            allowed_methods=_RETRY_METHODS,
            status_forcelist=self.status_forcelist,
            retry_on_exceptions=self.retry_on_exceptions,
        )


@dataclass(slots=True, frozen=True)
class RateLimit:
    max_calls: int
    per_seconds: float


@dataclass(slots=True, frozen=True)
class CacheConfig:
    enabled: bool = True
    backend: Literal["sqlite", "memory"] = "sqlite"
    sqlite_path: str | None = None
    default_ttl_seconds: float | None = None
    refresh_ttl_on_access: bool = True


@dataclass(slots=True, frozen=True)
class ResilienceConfig:
    name: str
    timeout_seconds: float = 30.0
    retry: RetryPolicy = field(default_factory=RetryPolicy)
    ratelimit: RateLimit | None = None
    cache: CacheConfig | None = None
    user_agent: str | None = None
