"""Public interface for the season file adapter."""

from __future__ import annotations

from .parser import SeasonFileParser
from .schema import AnimePayload, IdPayload, InfoPayload
from .translator import parse_catalog_entry
from .writer import build_season_element, render_entry, write_season_document

__all__ = [
    "AnimePayload",
    "IdPayload",
    "InfoPayload",
    "SeasonFileParser",
    "build_season_element",
    "parse_catalog_entry",
    "render_entry",
    "write_season_document",
]
