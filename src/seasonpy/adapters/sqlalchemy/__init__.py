"""SQLAlchemy adapter package for seasonpy."""

from __future__ import annotations

from .mappings import (
    anime_table,
    create_all_tables,
    external_id_table,
    mapper_registry,
    start_mappers,
)
from .repositories import SqlAlchemyAnimeRepository
from .unit_of_work import (
    SqlAlchemyLibraryUnitOfWork,
    StartupError,
    is_started,
    shutdown,
    startup,
)

__all__ = [
    "SqlAlchemyAnimeRepository",
    "SqlAlchemyLibraryUnitOfWork",
    "StartupError",
    "anime_table",
    "create_all_tables",
    "external_id_table",
    "is_started",
    "mapper_registry",
    "shutdown",
    "start_mappers",
    "startup",
]
