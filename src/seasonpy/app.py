"""Application orchestration entry points."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from seasonpy.adapters.download import HttpTransferDispatcher
from seasonpy.adapters.filesystem import LocalSeasonDocumentSource
from seasonpy.adapters.reporting import LoggingStatusReporter
from seasonpy.adapters.season_file import SeasonFileParser, render_entry, write_season_document
from seasonpy.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyLibraryUnitOfWork,
    is_started,
    startup,
)
from seasonpy.config import get_season_config, get_storage_config
from seasonpy.domain.model import Season
from seasonpy.domain.ports.unit_of_work import LibraryUnitOfWork
from seasonpy.domain.season_database import LoadStatus, SeasonDatabase
from seasonpy.domain.services import StaticServiceRegistry

if TYPE_CHECKING:
    from pathlib import Path

    from seasonpy.config import SeasonConfig, StorageConfig
    from seasonpy.domain.model import Anime
    from seasonpy.domain.ports import AnimeLibrary, DownloadQueue, StatusReporter

UnitOfWorkFactory = Callable[[], LibraryUnitOfWork]


log = getLogger(__name__)


@dataclass(slots=True)
class SeasonReport:
    """Outcome of one season operation, detached from the database session."""

    season: Season
    status: LoadStatus
    entries: list[str] = field(default_factory=list)
    added: int = 0
    removed: int = 0
    refresh_required: bool = False


@dataclass(slots=True)
class SeasonServices:
    """Collaborators a ``SeasonDatabase`` is built from."""

    config: SeasonConfig
    storage: StorageConfig
    dispatcher: DownloadQueue
    reporter: StatusReporter

    @classmethod
    def from_config(
        cls,
        *,
        config: SeasonConfig | None = None,
        storage: StorageConfig | None = None,
        dispatcher: DownloadQueue | None = None,
        reporter: StatusReporter | None = None,
    ) -> SeasonServices:
        effective_config = config or get_season_config()
        effective_storage = storage or get_storage_config()
        return cls(
            config=effective_config,
            storage=effective_storage,
            dispatcher=dispatcher
            or HttpTransferDispatcher(
                destination=effective_storage.season_directory(),
                resilience=effective_config.download,
            ),
            reporter=reporter or LoggingStatusReporter(),
        )


def build_season_database(library: AnimeLibrary, services: SeasonServices) -> SeasonDatabase:
    config = services.config
    registry = StaticServiceRegistry.for_name(config.active_service)
    return SeasonDatabase(
        library=library,
        source=LocalSeasonDocumentSource(),
        parser=SeasonFileParser(services=registry),
        dispatcher=services.dispatcher,
        services=registry,
        reporter=services.reporter,
        season_directory=services.storage.season_directory(),
        remote_location=config.remote_location,
        available_seasons=(
            Season.parse(config.available_from),
            Season.parse(config.available_to),
        ),
        hide_nsfw=config.hide_nsfw,
        refresh_threshold=config.refresh_threshold,
        describe_entry=render_entry,
    )


def _load(database: SeasonDatabase, season: Season, services: SeasonServices) -> LoadStatus:
    if not database.is_available(season):
        log.warning("Season %s is outside the available range", season)
    status = database.load_season(season)
    if status is LoadStatus.DOWNLOADING and database.remote_location:
        written = services.dispatcher.drain()
        if written:
            status = database.load_season(season)
    if status is not LoadStatus.READY:
        log.warning("Season %s is not available locally", season)
    return status


def _describe(anime: Anime) -> str:
    return f"#{anime.id} {anime.title} ({anime.date_start})"


def _run[T](
    operation: Callable[[SeasonDatabase], T],
    *,
    unit_of_work_factory: UnitOfWorkFactory | None,
    services: SeasonServices,
) -> T:
    if unit_of_work_factory is None and not is_started():
        startup()
    effective_uow = unit_of_work_factory or SqlAlchemyLibraryUnitOfWork
    try:
        with effective_uow() as uow:
            database = build_season_database(uow.repositories.anime, services)
            return operation(database)
    finally:
        services.dispatcher.close()


def load_season(
    season: Season,
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    services: SeasonServices | None = None,
) -> SeasonReport:
    """Load ``season`` from its season file, downloading it when missing."""

    def operation(database: SeasonDatabase) -> SeasonReport:
        status = _load(database, season, effective_services)
        return SeasonReport(
            season=database.current_season if status is LoadStatus.READY else season,
            status=status,
            entries=[_describe(anime) for anime in database.records()],
        )

    effective_services = services or SeasonServices.from_config()
    log.info("Loading season %s", season)
    return _run(operation, unit_of_work_factory=unit_of_work_factory, services=effective_services)


def review_season(
    season: Season,
    *,
    hide_nsfw: bool | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    services: SeasonServices | None = None,
) -> SeasonReport:
    """Load ``season`` and reconcile its membership against the library.

    Seasons without a readable file are rebuilt from the library alone.
    """

    def operation(database: SeasonDatabase) -> SeasonReport:
        status = _load(database, season, effective_services)
        if status is LoadStatus.READY:
            result = database.review(hide_nsfw=hide_nsfw)
        else:
            result = database.load_season_from_memory(season, hide_nsfw=hide_nsfw)
        return SeasonReport(
            season=database.current_season,
            status=database.status,
            entries=[_describe(anime) for anime in database.records()],
            added=len(result.added),
            removed=len(result.removed),
        )

    effective_services = services or SeasonServices.from_config()
    report = _run(
        operation, unit_of_work_factory=unit_of_work_factory, services=effective_services
    )
    log.info(
        "Reviewed season %s: items=%s, added=%s, removed=%s",
        report.season,
        len(report.entries),
        report.added,
        report.removed,
    )
    return report


def check_refresh(
    season: Season,
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    services: SeasonServices | None = None,
) -> SeasonReport:
    """Report whether too many members of ``season`` lack details."""

    def operation(database: SeasonDatabase) -> SeasonReport:
        status = _load(database, season, effective_services)
        return SeasonReport(
            season=database.current_season if status is LoadStatus.READY else season,
            status=status,
            entries=[_describe(anime) for anime in database.records()],
            refresh_required=status is LoadStatus.READY and database.is_refresh_required(),
        )

    effective_services = services or SeasonServices.from_config()
    return _run(operation, unit_of_work_factory=unit_of_work_factory, services=effective_services)


def export_season(
    season: Season,
    path: Path,
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    services: SeasonServices | None = None,
) -> SeasonReport:
    """Write the current membership of ``season`` as a season file at ``path``."""

    def operation(database: SeasonDatabase) -> SeasonReport:
        status = _load(database, season, effective_services)
        if status is not LoadStatus.READY:
            database.load_season_from_memory(season)
        document = database.to_document()
        write_season_document(document, path)
        log.info("Exported %s entries of %s to %s", len(document.entries), season, path)
        return SeasonReport(
            season=database.current_season,
            status=database.status,
            entries=[_describe(anime) for anime in database.records()],
        )

    effective_services = services or SeasonServices.from_config()
    return _run(operation, unit_of_work_factory=unit_of_work_factory, services=effective_services)
