"""Transient catalog data parsed from one season document."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from seasonpy.domain.model import Anime

if TYPE_CHECKING:
    from seasonpy.domain.model import Service, Timestamp


@dataclass(frozen=True, slots=True, kw_only=True)
class CatalogEntry:
    """One anime as described by a season document.

    ``ids`` keeps the document order of the identifier tags.
    """

    ids: dict[Service, str] = field(default_factory=dict["Service", str])
    title: str = ""
    type: int = 0
    image_url: str = ""
    trailer_url: str = ""
    producers: tuple[str, ...] = ()

    def id_for(self, service: Service) -> str:
        return self.ids.get(service, "")

    def to_anime(self, *, source: Service, modified: Timestamp) -> Anime:
        anime = Anime(
            source=source,
            last_modified=modified,
            title=self.title,
            type=self.type,
            image_url=self.image_url,
            trailer_url=self.trailer_url,
            producers=list(self.producers),
        )
        for service, value in self.ids.items():
            if value:
                anime.set_id(value, service)
        return anime


@dataclass(frozen=True, slots=True, kw_only=True)
class SeasonDocument:
    """A parsed season file: header values plus its entries.

    ``modified`` is shared by every entry of the document.
    """

    season_name: str
    modified: Timestamp
    entries: tuple[CatalogEntry, ...] = ()
