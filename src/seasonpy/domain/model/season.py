"""Season value object: a (name, year) pair and its calendar interval."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date
from typing import Final

from seasonpy.domain.errors import UnknownSeasonError
from seasonpy.domain.model.enums import SeasonName

_ORDER: Final[tuple[SeasonName, ...]] = (
    SeasonName.WINTER,
    SeasonName.SPRING,
    SeasonName.SUMMER,
    SeasonName.FALL,
)

# Winter reaches back into the previous year, so year 1 has no representable interval.
MIN_YEAR: Final[int] = MINYEAR + 1
MAX_YEAR: Final[int] = MAXYEAR

# First month of each season; winter starts in December of the previous year.
_START_MONTH: Final[dict[SeasonName, int]] = {
    SeasonName.WINTER: 12,
    SeasonName.SPRING: 3,
    SeasonName.SUMMER: 6,
    SeasonName.FALL: 9,
}


@dataclass(frozen=True, order=False)
class Season:
    name: SeasonName
    year: int

    @classmethod
    def unknown(cls) -> Season:
        return cls(SeasonName.UNKNOWN, 0)

    @classmethod
    def parse(cls, value: str) -> Season:
        """Parse the display form, e.g. ``"Winter 2018"``."""

        parts = value.split()
        if len(parts) != 2:  # noqa: PLR2004
            raise UnknownSeasonError(f"Invalid season: {value!r}")
        name_part, year_part = parts
        try:
            name = SeasonName(name_part.strip().lower())
            year = int(year_part)
        except ValueError as exc:
            raise UnknownSeasonError(f"Invalid season: {value!r}") from exc
        if name is SeasonName.UNKNOWN:
            raise UnknownSeasonError(f"Invalid season: {value!r}")
        if not MIN_YEAR <= year <= MAX_YEAR:
            raise UnknownSeasonError(f"Season year out of range: {value!r}")
        return cls(name, year)

    @property
    def is_known(self) -> bool:
        return self.name is not SeasonName.UNKNOWN and self.year > 0

    @property
    def file_name(self) -> str:
        return f"{self.year}_{self.name.value.lower()}.xml"

    def interval(self) -> tuple[date, date]:
        """Return the half-open ``[start, end)`` date interval of the season."""

        if not self.is_known:
            raise UnknownSeasonError("Unknown season has no date interval")
        if not MIN_YEAR <= self.year <= MAX_YEAR:
            raise UnknownSeasonError(f"Season year out of range: {self.year}")
        start_month = _START_MONTH[self.name]
        start_year = self.year - 1 if self.name is SeasonName.WINTER else self.year
        start = date(start_year, start_month, 1)
        end_month = start_month + 3
        end_year = start_year
        if end_month > 12:  # noqa: PLR2004
            end_month -= 12
            end_year += 1
        return start, date(end_year, end_month, 1)

    def next(self) -> Season:
        index = self._index()
        if index == len(_ORDER) - 1:
            return Season(_ORDER[0], self.year + 1)
        return Season(_ORDER[index + 1], self.year)

    def previous(self) -> Season:
        index = self._index()
        if index == 0:
            return Season(_ORDER[-1], self.year - 1)
        return Season(_ORDER[index - 1], self.year)

    def sort_key(self) -> tuple[int, int]:
        return (self.year, self._index())

    def _index(self) -> int:
        if not self.is_known:
            raise UnknownSeasonError("Unknown season has no neighbours")
        return _ORDER.index(self.name)

    def __str__(self) -> str:
        if not self.is_known:
            return "Unknown"
        return f"{self.name.display_name} {self.year}"
