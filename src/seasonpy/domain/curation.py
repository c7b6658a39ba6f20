"""Curation of the season membership list against the current library."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from datetime import date

    from seasonpy.domain.model import Anime, AnimeId
    from seasonpy.domain.ports.persistence import AnimeLibrary

log = getLogger(__name__)

DEFAULT_REFRESH_THRESHOLD = 20


@dataclass(slots=True)
class ReviewResult:
    items: list[AnimeId]
    added: list[AnimeId] = field(default_factory=list["AnimeId"])
    removed: list[AnimeId] = field(default_factory=list["AnimeId"])


def review_membership(
    items: Sequence[AnimeId],
    *,
    library: AnimeLibrary,
    interval: tuple[date, date],
    hide_nsfw: bool,
    on_added: Callable[[Anime], None] | None = None,
) -> ReviewResult:
    """Prune ``items`` that no longer qualify and discover library records that do.

    A record without a known start date is kept if already listed, but is never
    added by discovery.
    """

    start, end = interval

    def is_excluded(anime: Anime) -> bool:
        return hide_nsfw and anime.is_nsfw

    result = ReviewResult(items=[])
    present: set[AnimeId] = set()

    for anime_id in items:
        if anime_id in present:
            continue
        anime = library.get(anime_id)
        if anime is None:
            result.removed.append(anime_id)
            continue
        date_start = anime.date_start
        if is_excluded(anime) or (date_start.is_valid and not date_start.is_within(start, end)):
            log.debug('Removed item: #%s "%s" (%s)', anime_id, anime.title, date_start)
            result.removed.append(anime_id)
            continue
        result.items.append(anime_id)
        present.add(anime_id)

    for anime in library:
        if anime.id is None or anime.id in present:
            continue
        if is_excluded(anime) or not anime.date_start.is_within(start, end):
            continue
        result.items.append(anime.id)
        result.added.append(anime.id)
        present.add(anime.id)
        if on_added is not None:
            on_added(anime)

    return result


def drop_missing(items: Sequence[AnimeId], *, library: AnimeLibrary) -> ReviewResult:
    """Remove ids with no library record, keeping the order of the rest."""

    result = ReviewResult(items=[])
    for anime_id in items:
        if library.get(anime_id) is None:
            result.removed.append(anime_id)
        elif anime_id not in result.items:
            result.items.append(anime_id)
    return result


def needs_refresh(
    items: Sequence[AnimeId],
    *,
    library: AnimeLibrary,
    threshold: int = DEFAULT_REFRESH_THRESHOLD,
) -> bool:
    """Whether more than ``threshold`` listed records lack a start date or synopsis."""

    count = 0
    for anime_id in items:
        anime = library.get(anime_id)
        if anime is not None and (not anime.date_start.is_valid or anime.synopsis is None):
            count += 1
            if count > threshold:
                return True
    return False
