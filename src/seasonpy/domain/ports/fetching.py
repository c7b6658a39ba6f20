"""Ports for reading and fetching season documents."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path

    from seasonpy.domain.catalog import SeasonDocument


@runtime_checkable
class SeasonDocumentSource(Protocol):
    """Reads raw season documents from local storage.

    Raises ``DocumentNotFoundError`` when nothing is stored at ``path``.
    """

    def read_local(self, path: Path) -> bytes: ...


@runtime_checkable
class SeasonDocumentParser(Protocol):
    """Turns raw document data into a ``SeasonDocument``.

    Raises ``SeasonParseError`` for malformed input.
    """

    def __call__(self, data: bytes | str) -> SeasonDocument: ...


@runtime_checkable
class TransferDispatcher(Protocol):
    """Fire-and-forget download trigger; no result is observed by the caller."""

    def enqueue(self, url: str) -> None: ...


@runtime_checkable
class DownloadQueue(TransferDispatcher, Protocol):
    """Dispatcher whose queued transfers can be awaited by the application."""

    def drain(self) -> list[Path]: ...

    def close(self) -> None: ...


__all__ = [
    "DownloadQueue",
    "SeasonDocumentParser",
    "SeasonDocumentSource",
    "TransferDispatcher",
]
