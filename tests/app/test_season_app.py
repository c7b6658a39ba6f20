from __future__ import annotations

from typing import TYPE_CHECKING

from seasonpy.adapters.season_file import SeasonFileParser
from seasonpy.app import SeasonServices, check_refresh, export_season, load_season, review_season
from seasonpy.config import SeasonConfig, StorageConfig
from seasonpy.domain.model import AgeRating, PartialDate, Season, SeasonName
from seasonpy.domain.season_database import LoadStatus
from seasonpy.domain.services import StaticServiceRegistry
from tests.helpers.library import (
    REMOTE_LOCATION,
    FakeDispatcher,
    FakeReporter,
    make_anime,
    season_xml,
)

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from seasonpy.adapters.sqlalchemy import SqlAlchemyLibraryUnitOfWork

WINTER_2018 = Season(SeasonName.WINTER, 2018)
WINTER_FILE = season_xml(
    "Winter 2018",
    1000,
    [
        {"ids": [("myanimelist", "1")], "title": "First"},
        {"ids": [("myanimelist", "2"), ("kitsu", "k2")], "title": "Second"},
    ],
)


def _services(
    tmp_path: Path,
    *,
    remote_location: str = REMOTE_LOCATION,
    dispatcher: FakeDispatcher | None = None,
) -> SeasonServices:
    return SeasonServices(
        config=SeasonConfig(remote_location=remote_location),
        storage=StorageConfig(data_dir=tmp_path),
        dispatcher=dispatcher or FakeDispatcher(),
        reporter=FakeReporter(),
    )


def _write_season_file(tmp_path: Path, name: str, text: str) -> Path:
    path = tmp_path / "season" / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_load_season_reads_local_file(
    tmp_path: Path,
    sqlite_unit_of_work: Callable[[], SqlAlchemyLibraryUnitOfWork],
) -> None:
    _write_season_file(tmp_path, "2018_winter.xml", WINTER_FILE)
    services = _services(tmp_path)

    report = load_season(WINTER_2018, unit_of_work_factory=sqlite_unit_of_work, services=services)

    assert report.status is LoadStatus.READY
    assert report.season == WINTER_2018
    assert report.entries == ["#1 First (????-??-??)", "#2 Second (????-??-??)"]
    assert services.dispatcher.urls == []  # type: ignore[attr-defined]
    assert services.dispatcher.closed  # type: ignore[attr-defined]


def test_load_season_retries_after_download(
    tmp_path: Path,
    sqlite_unit_of_work: Callable[[], SqlAlchemyLibraryUnitOfWork],
) -> None:
    def download(urls: list[str]) -> list[Path]:
        assert urls == [REMOTE_LOCATION + "2018_winter.xml"]
        return [_write_season_file(tmp_path, "2018_winter.xml", WINTER_FILE)]

    dispatcher = FakeDispatcher(on_drain=download)
    services = _services(tmp_path, dispatcher=dispatcher)

    report = load_season(WINTER_2018, unit_of_work_factory=sqlite_unit_of_work, services=services)

    assert report.status is LoadStatus.READY
    assert len(report.entries) == 2


def test_load_season_stays_pending_when_download_fails(
    tmp_path: Path,
    sqlite_unit_of_work: Callable[[], SqlAlchemyLibraryUnitOfWork],
) -> None:
    services = _services(tmp_path)

    report = load_season(WINTER_2018, unit_of_work_factory=sqlite_unit_of_work, services=services)

    assert report.status is LoadStatus.DOWNLOADING
    assert report.season == WINTER_2018
    assert report.entries == []
    assert services.reporter.statuses == ["Downloading anime season data..."]  # type: ignore[attr-defined]


def test_review_season_without_file_uses_library(
    tmp_path: Path,
    sqlite_unit_of_work: Callable[[], SqlAlchemyLibraryUnitOfWork],
) -> None:
    with sqlite_unit_of_work() as uow:
        uow.repositories.anime.insert(
            make_anime(mal="1", title="Seeded", date_start=PartialDate(2018, 1, 7))
        )
        uow.repositories.anime.insert(
            make_anime(
                mal="2",
                title="Adult",
                date_start=PartialDate(2018, 1, 7),
                age_rating=AgeRating.R18,
            )
        )
        uow.commit()

    hidden = review_season(
        WINTER_2018,
        unit_of_work_factory=sqlite_unit_of_work,
        services=_services(tmp_path, remote_location=""),
    )
    shown = review_season(
        WINTER_2018,
        hide_nsfw=False,
        unit_of_work_factory=sqlite_unit_of_work,
        services=_services(tmp_path, remote_location=""),
    )

    assert hidden.status is LoadStatus.READY
    assert hidden.entries == ["#1 Seeded (2018-01-07)"]
    assert hidden.added == 1
    assert shown.entries == ["#1 Seeded (2018-01-07)", "#2 Adult (2018-01-07)"]


def test_check_refresh_flags_incomplete_season(
    tmp_path: Path,
    sqlite_unit_of_work: Callable[[], SqlAlchemyLibraryUnitOfWork],
) -> None:
    entries = [
        {"ids": [("myanimelist", str(index))], "title": f"Show {index}"} for index in range(21)
    ]
    _write_season_file(tmp_path, "2018_winter.xml", season_xml("Winter 2018", 1000, entries))

    report = check_refresh(
        WINTER_2018, unit_of_work_factory=sqlite_unit_of_work, services=_services(tmp_path)
    )

    assert report.refresh_required is True


def test_export_season_writes_readable_file(
    tmp_path: Path,
    sqlite_unit_of_work: Callable[[], SqlAlchemyLibraryUnitOfWork],
) -> None:
    _write_season_file(tmp_path, "2018_winter.xml", WINTER_FILE)
    destination = tmp_path / "export" / "winter.xml"

    export_season(
        WINTER_2018,
        destination,
        unit_of_work_factory=sqlite_unit_of_work,
        services=_services(tmp_path),
    )

    document = SeasonFileParser(services=StaticServiceRegistry())(destination.read_bytes())
    assert document.season_name == "Winter 2018"
    assert document.modified == 1000
    assert [entry.title for entry in document.entries] == ["First", "Second"]
