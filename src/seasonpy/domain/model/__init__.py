"""Public domain model surface."""

from __future__ import annotations

from seasonpy.domain.model.anime import Anime
from seasonpy.domain.model.enums import AgeRating, SeasonName, Service
from seasonpy.domain.model.external_ids import ExternalID, normalize_service
from seasonpy.domain.model.primitives import AnimeId, PartialDate, Timestamp
from seasonpy.domain.model.season import Season

__all__ = [  # noqa: RUF022
    # records
    "Anime",
    "ExternalID",
    "normalize_service",
    # seasons
    "Season",
    # enums
    "AgeRating",
    "SeasonName",
    "Service",
    # primitives
    "AnimeId",
    "PartialDate",
    "Timestamp",
]
