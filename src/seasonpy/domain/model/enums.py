"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class Service(StrEnum):
    """External tracking services an anime can be cross-referenced with."""

    MYANIMELIST = "myanimelist"
    KITSU = "kitsu"
    ANILIST = "anilist"


class SeasonName(StrEnum):
    UNKNOWN = "unknown"
    WINTER = "winter"
    SPRING = "spring"
    SUMMER = "summer"
    FALL = "fall"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class AgeRating(StrEnum):
    G = "g"
    PG = "pg"
    PG13 = "pg13"
    R17 = "r17"
    R18 = "r18"
