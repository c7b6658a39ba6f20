from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from seasonpy.app import (
    SeasonReport,
    check_refresh,
    export_season,
    load_season,
    review_season,
)
from seasonpy.config import configure_logging
from seasonpy.domain.errors import UnknownSeasonError
from seasonpy.domain.model import Season

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _add_season_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("season", type=str, help="Season name: winter, spring, summer or fall")
    parser.add_argument("year", type=int, help="Season year, e.g. 2018")


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Maintain seasonal anime listings")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output, including per-entry decisions",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    load = subparsers.add_parser("load", help="Load a season file into the library")
    _add_season_arguments(load)

    review = subparsers.add_parser(
        "review",
        help="Load a season and reconcile its membership with the library",
    )
    _add_season_arguments(review)
    review.add_argument(
        "--show-nsfw",
        action="store_true",
        help="Keep adult titles in the listing (defaults to config)",
    )

    refresh = subparsers.add_parser(
        "check-refresh",
        help="Report whether the season needs its details refreshed",
    )
    _add_season_arguments(refresh)

    export = subparsers.add_parser("export", help="Write the season listing to a season file")
    _add_season_arguments(export)
    export.add_argument("path", type=Path, help="Destination file")

    return parser.parse_args(list(argv))


def _parse_season(args: argparse.Namespace) -> Season:
    try:
        return Season.parse(f"{args.season} {args.year}")
    except UnknownSeasonError as exc:
        raise ValueError(str(exc)) from exc


def _log_report(report: SeasonReport) -> None:
    log.info("%s (%s): %s entries", report.season, report.status, len(report.entries))
    for entry in report.entries:
        log.info("  %s", entry)


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    parsed_args: argparse.Namespace
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
        configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)
        season = _parse_season(parsed_args)
    except ValueError:
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        if parsed_args.command == "load":
            report = load_season(season)
        elif parsed_args.command == "review":
            report = review_season(season, hide_nsfw=False if parsed_args.show_nsfw else None)
        elif parsed_args.command == "check-refresh":
            report = check_refresh(season)
            log.info(
                "Refresh %s for %s",
                "required" if report.refresh_required else "not required",
                report.season,
            )
        elif parsed_args.command == "export":
            report = export_season(season, parsed_args.path)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
        _log_report(report)

    except Exception:
        log.exception("Fatal error")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
