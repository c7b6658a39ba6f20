"""Rate-limited, retrying HTTP client used for season file downloads."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx
from aiolimiter import AsyncLimiter
from hishel import AsyncSqliteStorage
from hishel.httpx import AsyncCacheClient
from httpx_retries import RetryTransport

from seasonpy import __version__
from seasonpy.config.storage import get_storage_config

if TYPE_CHECKING:
    from types import TracebackType

    from seasonpy.config.http_resilience import CacheConfig, ResilienceConfig

USER_AGENT = f"seasonpy/{__version__}"


class ResilientClient:
    """Async GET client combining retries, an optional rate limit and an optional cache.

    ``transport`` replaces the network transport underneath the retry layer.
    """

    def __init__(
        self,
        config: ResilienceConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config
        self._limiter = (
            AsyncLimiter(config.ratelimit.max_calls, config.ratelimit.per_seconds)
            if config.ratelimit
            else None
        )

        options: dict[str, Any] = {
            "timeout": config.timeout_seconds,
            "transport": RetryTransport(transport=transport, retry=config.retry.build()),
            "follow_redirects": True,
            "headers": {"User-Agent": config.user_agent or USER_AGENT},
        }
        storage = _cache_storage(config.cache)
        self._client: httpx.AsyncClient = (
            AsyncCacheClient(**options, storage=storage)
            if storage is not None
            else httpx.AsyncClient(**options)
        )

    async def __aenter__(self) -> ResilientClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get(self, url: str) -> httpx.Response:
        if self._limiter is None:
            return await self._client.get(url)
        async with self._limiter:
            return await self._client.get(url)


def _cache_storage(config: CacheConfig | None) -> AsyncSqliteStorage | None:
    if config is None or not config.enabled:
        return None
    if config.backend == "sqlite":
        database_path = config.sqlite_path or str(get_storage_config().http_cache_path())
    elif config.backend == "memory":
        database_path = ":memory:"
    else:
        raise ValueError(f"Unsupported cache backend: {config.backend}")
    return AsyncSqliteStorage(
        database_path=database_path,
        default_ttl=config.default_ttl_seconds,
        refresh_ttl_on_access=config.refresh_ttl_on_access,
    )
