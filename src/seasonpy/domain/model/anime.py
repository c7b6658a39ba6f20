"""The library record: one locally persisted anime."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from seasonpy.domain.model.enums import AgeRating, Service
from seasonpy.domain.model.external_ids import ExternalID, normalize_service
from seasonpy.domain.model.primitives import PartialDate, Timestamp

if TYPE_CHECKING:
    from collections.abc import Mapping

NSFW_GENRES = frozenset({"hentai"})


@dataclass(eq=False, kw_only=True)
class Anime:
    """Anime record keyed by a library-minted integer id.

    ``synopsis`` distinguishes "unset" (``None``) from "present but empty" (``""``).
    """

    id: int | None = None
    source: Service | None = None
    last_modified: Timestamp = 0

    title: str = ""
    type: int = 0
    image_url: str = ""
    trailer_url: str = ""
    producers: list[str] = field(default_factory=list[str])
    genres: list[str] = field(default_factory=list[str])
    age_rating: AgeRating | None = None
    date_start: PartialDate = field(default_factory=PartialDate)
    synopsis: str | None = None

    _external_ids: list[ExternalID] = field(
        default_factory=list["ExternalID"], repr=False, init=False
    )

    @property
    def external_ids(self) -> tuple[ExternalID, ...]:
        return tuple(self._external_ids)

    @property
    def ids(self) -> dict[Service, str]:
        return {external.service: external.value for external in self._external_ids}

    def get_id(self, service: Service | str) -> str | None:
        key = normalize_service(service)
        for external in self._external_ids:
            if external.service == key:
                return external.value
        return None

    def set_id(self, value: str, service: Service | str) -> None:
        key = normalize_service(service)
        for external in self._external_ids:
            if external.service == key:
                external.value = value
                return
        self._external_ids.append(ExternalID(service=key, value=value))

    def set_ids(self, ids: Mapping[Service, str]) -> None:
        for service, value in ids.items():
            self.set_id(value, service)

    @property
    def is_nsfw(self) -> bool:
        if self.age_rating is AgeRating.R18:
            return True
        return any(genre.strip().lower() in NSFW_GENRES for genre in self.genres)

    def apply_catalog_fields(self, other: Anime) -> None:
        """Overwrite the catalog-derived fields with those of ``other``.

        Dates, synopsis, genres and age rating come from service syncs and are kept.
        """

        self.source = other.source
        self.last_modified = other.last_modified
        self.title = other.title
        self.type = other.type
        self.image_url = other.image_url
        self.trailer_url = other.trailer_url
        self.producers = list(other.producers)
        self.set_ids(other.ids)
