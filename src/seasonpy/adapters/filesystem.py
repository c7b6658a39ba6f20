"""Local filesystem source for season documents."""

from __future__ import annotations

from typing import TYPE_CHECKING

from seasonpy.domain.errors import DocumentNotFoundError

if TYPE_CHECKING:
    from pathlib import Path


class LocalSeasonDocumentSource:
    def read_local(self, path: Path) -> bytes:
        try:
            return path.read_bytes()
        except (FileNotFoundError, IsADirectoryError) as exc:
            raise DocumentNotFoundError(path) from exc


if TYPE_CHECKING:
    from seasonpy.domain.ports.fetching import SeasonDocumentSource

    _source_check: SeasonDocumentSource = LocalSeasonDocumentSource()
