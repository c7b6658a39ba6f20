"""Errors raised by the season reconciliation core."""

from __future__ import annotations


class SeasonError(RuntimeError):
    """Base class for season database failures."""


class SeasonParseError(SeasonError):
    """Raised when a season document exists but cannot be parsed."""


class DocumentNotFoundError(SeasonError, LookupError):
    """Raised by document sources when no local season document exists."""

    def __init__(self, path: object) -> None:
        super().__init__(f"Season document not found: {path}")
        self.path = path


class UnknownSeasonError(SeasonError, ValueError):
    """Raised for season names or years that cannot be interpreted."""
