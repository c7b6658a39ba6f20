"""Background HTTP downloads of season documents."""

from __future__ import annotations

import asyncio
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

import httpx

from seasonpy.adapters.http_resilience import ResilientClient
from seasonpy.config.seasons import SeasonConfig

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from seasonpy.config.http_resilience import ResilienceConfig

log = getLogger(__name__)


def _default_resilience_config() -> ResilienceConfig:
    return SeasonConfig().download


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


def file_name_from_url(url: str) -> str:
    name = httpx.URL(url).path.rsplit("/", 1)[-1]
    if not name:
        raise ValueError(f"URL has no file name: {url}")
    return name


@dataclass(slots=True)
class HttpTransferDispatcher:
    """Fire-and-forget downloader writing documents into ``destination``.

    ``enqueue`` returns immediately; ``drain`` waits for outstanding transfers
    and reports the files that were written.
    """

    destination: Path
    resilience: ResilienceConfig = field(default_factory=_default_resilience_config)
    client_factory: Callable[[ResilienceConfig], ResilientClient] = field(
        default=_default_client_factory
    )
    max_workers: int = 2
    _executor: ThreadPoolExecutor | None = field(default=None, init=False, repr=False)
    _pending: list[tuple[str, Future[Path]]] = field(
        default_factory=list[tuple[str, "Future[Path]"]], init=False, repr=False
    )

    def enqueue(self, url: str) -> None:
        log.info("Queueing download: %s", url)
        future = self._ensure_executor().submit(self._run, url)
        self._pending.append((url, future))

    def drain(self) -> list[Path]:
        pending, self._pending = self._pending, []
        written: list[Path] = []
        for url, future in pending:
            try:
                written.append(future.result())
            except (httpx.HTTPError, OSError, ValueError):
                log.exception("Download failed: %s", url)
        return written

    def close(self) -> None:
        self.drain()
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None

    def _ensure_executor(self) -> ThreadPoolExecutor:
        if self._executor is None:
            self._executor = ThreadPoolExecutor(
                max_workers=self.max_workers, thread_name_prefix="season-download"
            )
        return self._executor

    def _run(self, url: str) -> Path:
        return asyncio.run(self._download(url))

    async def _download(self, url: str) -> Path:
        async with self.client_factory(self.resilience) as client:
            response = await client.get(url)
            response.raise_for_status()
            content = response.content

        target = self.destination / file_name_from_url(url)
        target.parent.mkdir(parents=True, exist_ok=True)
        partial = target.with_name(target.name + ".part")
        partial.write_bytes(content)
        partial.replace(target)
        log.info("Downloaded %s (%s bytes)", target, len(content))
        return target


if TYPE_CHECKING:
    from pathlib import Path as _Path

    from seasonpy.domain.ports.fetching import DownloadQueue

    _dispatcher_check: DownloadQueue = HttpTransferDispatcher(_Path())
