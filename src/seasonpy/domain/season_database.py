"""Season database: loads season documents and keeps the season membership list."""

from __future__ import annotations

from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING

from seasonpy.domain.catalog import CatalogEntry, SeasonDocument
from seasonpy.domain.curation import (
    DEFAULT_REFRESH_THRESHOLD,
    ReviewResult,
    drop_missing,
    needs_refresh,
    review_membership,
)
from seasonpy.domain.errors import DocumentNotFoundError, SeasonParseError, UnknownSeasonError
from seasonpy.domain.model import Season, SeasonName, Service
from seasonpy.domain.reconciliation import reconcile_entry, resolve_identity

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from seasonpy.domain.model import Anime, AnimeId
    from seasonpy.domain.ports import (
        AnimeLibrary,
        SeasonDocumentParser,
        SeasonDocumentSource,
        ServiceRegistry,
        StatusReporter,
        TransferDispatcher,
    )

log = getLogger(__name__)

DEFAULT_AVAILABLE_SEASONS = (Season(SeasonName.WINTER, 2011), Season(SeasonName.SPRING, 2018))


class LoadStatus(StrEnum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    DOWNLOADING = "downloading"


class SeasonDatabase:
    """Membership list of the current season plus the operations maintaining it.

    Collaborators are injected; the instance holds no global state. Callers must
    serialise loads and reviews against one instance.
    """

    def __init__(
        self,
        *,
        library: AnimeLibrary,
        source: SeasonDocumentSource,
        parser: SeasonDocumentParser,
        dispatcher: TransferDispatcher,
        services: ServiceRegistry,
        reporter: StatusReporter,
        season_directory: Path,
        remote_location: str = "",
        available_seasons: tuple[Season, Season] = DEFAULT_AVAILABLE_SEASONS,
        hide_nsfw: bool = True,
        refresh_threshold: int = DEFAULT_REFRESH_THRESHOLD,
        describe_entry: Callable[[Anime], str] | None = None,
    ) -> None:
        self.library = library
        self.source = source
        self.parser = parser
        self.dispatcher = dispatcher
        self.services = services
        self.reporter = reporter
        self.season_directory = season_directory
        self.remote_location = remote_location
        self.available_seasons = available_seasons
        self.hide_nsfw = hide_nsfw
        self.refresh_threshold = refresh_threshold
        self.describe_entry = describe_entry

        self.current_season = Season.unknown()
        self.items: list[AnimeId] = []
        self.status = LoadStatus.IDLE

    # Loading --------------------------------------------------------------

    def load_season(self, season: Season) -> LoadStatus:
        return self.load_file(season.file_name, season=season)

    def load_file(self, file_name: str, *, season: Season | None = None) -> LoadStatus:
        """Load a season document from the season directory.

        Returns ``LoadStatus.DOWNLOADING`` when the file is missing; a transfer
        is then enqueued and the caller must retry once it has completed.
        ``current_season`` and ``items`` only change once a document has parsed;
        ``season`` names the season when the document header does not.
        """

        path = self.season_directory / file_name
        self.status = LoadStatus.LOADING
        try:
            data = self.source.read_local(path)
        except DocumentNotFoundError:
            log.warning("Could not find anime season file. Path: %s", path)
            if self.remote_location:
                self.reporter.report_status("Downloading anime season data...")
                self.dispatcher.enqueue(self.remote_location + file_name)
            self.status = LoadStatus.DOWNLOADING
            return self.status

        try:
            return self.load_string(data, season=season)
        except SeasonParseError:
            self.reporter.report_error("Could not read anime season file.", str(path))
            raise

    def load_string(self, data: bytes | str, *, season: Season | None = None) -> LoadStatus:
        try:
            document = self.parser(data)
        except SeasonParseError:
            self.status = LoadStatus.IDLE
            raise
        self.load_document(document, season=season)
        return self.status

    def load_document(self, document: SeasonDocument, *, season: Season | None = None) -> None:
        self.current_season = self._season_from_header(
            document.season_name, fallback=season if season is not None else self.current_season
        )
        context = str(self.current_season)
        active_service = self.services.active_service

        self.items = []
        present: set[AnimeId] = set()
        for entry in document.entries:
            matched = resolve_identity(entry.ids, library=self.library)
            anime_id = reconcile_entry(
                matched,
                entry,
                document.modified,
                library=self.library,
                active_service=active_service,
                context=context,
            )
            if anime_id is None or anime_id in present:
                continue
            self.items.append(anime_id)
            present.add(anime_id)

        if self.items:
            self.library.save()

        log.info(
            "Loaded %s: %s of %s entries (modified=%s)",
            context,
            len(self.items),
            len(document.entries),
            document.modified,
        )
        self.status = LoadStatus.READY

    def load_season_from_memory(
        self, season: Season, hide_nsfw: bool | None = None  # noqa: FBT001
    ) -> ReviewResult:
        """Build the membership list of ``season`` from the library alone."""

        self.current_season = season
        self.items = []
        result = self.review(hide_nsfw=hide_nsfw)
        self.status = LoadStatus.READY
        return result

    def reset(self) -> None:
        self.items = []
        self.current_season = Season.unknown()
        self.status = LoadStatus.IDLE

    # Curation -------------------------------------------------------------

    def review(self, hide_nsfw: bool | None = None) -> ReviewResult:  # noqa: FBT001
        if not self.current_season.is_known:
            log.warning("Cannot review an unknown season; dropping missing records only")
            result = drop_missing(self.items, library=self.library)
            self.items = result.items
            return result

        result = review_membership(
            self.items,
            library=self.library,
            interval=self.current_season.interval(),
            hide_nsfw=self.hide_nsfw if hide_nsfw is None else hide_nsfw,
            on_added=self._log_added,
        )
        self.items = result.items
        return result

    def is_refresh_required(self) -> bool:
        return needs_refresh(self.items, library=self.library, threshold=self.refresh_threshold)

    # Queries --------------------------------------------------------------

    def is_available(self, season: Season) -> bool:
        first, last = self.available_seasons
        return first.sort_key() <= season.sort_key() <= last.sort_key()

    def records(self) -> list[Anime]:
        records: list[Anime] = []
        for anime_id in self.items:
            anime = self.library.get(anime_id)
            if anime is not None:
                records.append(anime)
        return records

    def to_document(self) -> SeasonDocument:
        """Describe the current membership as a season document."""

        records = self.records()
        entries = tuple(
            CatalogEntry(
                ids=anime.ids,
                title=anime.title,
                type=anime.type,
                image_url=anime.image_url,
                trailer_url=anime.trailer_url,
                producers=tuple(anime.producers),
            )
            for anime in records
        )
        modified = max((anime.last_modified for anime in records), default=0)
        return SeasonDocument(
            season_name=str(self.current_season), modified=modified, entries=entries
        )

    # Internals ------------------------------------------------------------

    def _season_from_header(self, name: str, *, fallback: Season) -> Season:
        try:
            return Season.parse(name)
        except UnknownSeasonError:
            log.warning("Season document names unknown season %r, keeping %s", name, fallback)
            return fallback

    def _log_added(self, anime: Anime) -> None:
        if self.services.active_service is Service.MYANIMELIST and self.describe_entry:
            log.debug(self.describe_entry(anime))
            return
        log.debug('Added item: #%s "%s" (%s)', anime.id, anime.title, anime.date_start)
