"""Domain primitives: scalar aliases + small value objects."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

type AnimeId = int
type Timestamp = int


@dataclass(frozen=True)
class PartialDate:
    year: int | None = None
    month: int | None = None
    day: int | None = None

    @property
    def is_valid(self) -> bool:
        """A date is usable once its year is known."""
        return bool(self.year)

    @property
    def as_date(self) -> date | None:
        """Full date with unknown month/day as 1, or ``None`` without year and month."""
        if not self.year or not self.month:
            return None
        try:
            return date(self.year, self.month, self.day or 1)
        except ValueError:
            return None

    def is_within(self, start: date, end: date) -> bool:
        """Whether the date lies in the half-open interval ``[start, end)``."""
        value = self.as_date
        if value is None:
            return False
        return start <= value < end

    def __str__(self) -> str:
        year = f"{self.year:04d}" if self.year else "????"
        month = f"{self.month:02d}" if self.month else "??"
        day = f"{self.day:02d}" if self.day else "??"
        return f"{year}-{month}-{day}"

    def __composite_values__(self) -> tuple[int | None, int | None, int | None]:
        """For SQLAlchemy composite columns (adapter-side convenience)."""
        return (self.year, self.month, self.day)
