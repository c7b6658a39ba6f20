"""Staleness arbitration: decide whether catalog data replaces a library record."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from seasonpy.domain.catalog import CatalogEntry
    from seasonpy.domain.model import Anime, AnimeId, Service, Timestamp
    from seasonpy.domain.ports.persistence import AnimeLibrary

log = getLogger(__name__)


def reconcile_entry(
    matched: Anime | None,
    entry: CatalogEntry,
    modified: Timestamp,
    *,
    library: AnimeLibrary,
    active_service: Service,
    context: str = "",
) -> AnimeId | None:
    """Return the library id for ``entry``, creating or refreshing a record if needed.

    A matched record that is at least as recent as ``modified`` is returned
    untouched. Otherwise the entry must carry an id for ``active_service``; if
    it does not, ``None`` is returned and nothing is written.
    """

    if matched is not None and matched.id is not None and matched.last_modified >= modified:
        return matched.id

    if not entry.id_for(active_service):
        log.debug("%s - No ID for current service: %s", context, entry.title)
        return None

    anime = entry.to_anime(source=active_service, modified=modified)
    if matched is not None and matched.id is not None:
        previous = matched.last_modified
        library.update(matched.id, anime)
        log.debug(
            "Updated #%s %r (modified %s -> %s)", matched.id, entry.title, previous, modified
        )
        return matched.id

    anime_id = library.insert(anime)
    log.debug("Inserted #%s %r", anime_id, entry.title)
    return anime_id
