from __future__ import annotations

from pathlib import Path

import pytest

from seasonpy.app import SeasonReport
from seasonpy.domain.model import Season, SeasonName
from seasonpy.domain.season_database import LoadStatus
from seasonpy.ui import cli

WINTER_2018 = Season(SeasonName.WINTER, 2018)


def _report(**fields: object) -> SeasonReport:
    return SeasonReport(season=WINTER_2018, status=LoadStatus.READY, **fields)  # type: ignore[arg-type]


def test_load_command_parses_season(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: list[Season] = []

    def fake_load(season: Season) -> SeasonReport:
        captured.append(season)
        return _report()

    monkeypatch.setattr(cli, "load_season", fake_load)

    cli.main(["load", "Winter", "2018"])

    assert captured == [WINTER_2018]


def test_review_command_passes_nsfw_flag(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}

    def fake_review(season: Season, *, hide_nsfw: bool | None = None) -> SeasonReport:
        captured.update(season=season, hide_nsfw=hide_nsfw)
        return _report(added=1)

    monkeypatch.setattr(cli, "review_season", fake_review)

    cli.main(["review", "fall", "2017"])
    assert captured == {"season": Season(SeasonName.FALL, 2017), "hide_nsfw": None}

    cli.main(["review", "fall", "2017", "--show-nsfw"])
    assert captured["hide_nsfw"] is False


def test_export_command_passes_path(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    captured: dict[str, object] = {}

    def fake_export(season: Season, path: Path) -> SeasonReport:
        captured.update(season=season, path=path)
        return _report()

    monkeypatch.setattr(cli, "export_season", fake_export)

    cli.main(["export", "spring", "2018", str(tmp_path / "out.xml")])

    assert captured == {"season": Season(SeasonName.SPRING, 2018), "path": tmp_path / "out.xml"}


def test_invalid_season_exits_with_usage_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli, "load_season", lambda season: _report())  # noqa: ARG005

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["load", "autumn", "2018"])

    assert excinfo.value.code == 2


def test_year_without_calendar_interval_exits_with_usage_error(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    calls: list[Season] = []
    monkeypatch.setattr(cli, "review_season", lambda season, **_: calls.append(season))

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["review", "winter", "1"])

    assert excinfo.value.code == 2
    assert calls == []


def test_failing_command_exits_with_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_refresh(season: Season) -> SeasonReport:
        raise RuntimeError(f"boom {season}")

    monkeypatch.setattr(cli, "check_refresh", fake_refresh)

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["check-refresh", "winter", "2018"])

    assert excinfo.value.code == 1
