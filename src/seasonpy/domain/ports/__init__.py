"""Domain port definitions for adapters."""

from __future__ import annotations

from .fetching import (
    DownloadQueue,
    SeasonDocumentParser,
    SeasonDocumentSource,
    TransferDispatcher,
)
from .notifications import StatusReporter
from .persistence import AnimeLibrary
from .services import ServiceRegistry
from .unit_of_work import (
    LibraryRepositories,
    LibraryUnitOfWork,
    RepositoryCollection,
    UnitOfWork,
)

__all__ = [
    "AnimeLibrary",
    "DownloadQueue",
    "LibraryRepositories",
    "LibraryUnitOfWork",
    "RepositoryCollection",
    "SeasonDocumentParser",
    "SeasonDocumentSource",
    "ServiceRegistry",
    "StatusReporter",
    "TransferDispatcher",
    "UnitOfWork",
]
