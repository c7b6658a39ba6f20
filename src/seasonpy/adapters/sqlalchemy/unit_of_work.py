"""SQLAlchemy-backed unit of work around the anime library."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Literal

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from seasonpy.adapters.sqlalchemy.mappings import create_all_tables, start_mappers
from seasonpy.adapters.sqlalchemy.repositories import SqlAlchemyAnimeRepository
from seasonpy.config import get_database_config
from seasonpy.domain.ports.unit_of_work import LibraryRepositories

if TYPE_CHECKING:
    from types import TracebackType

    from sqlalchemy.engine import Engine

log = getLogger(__name__)


class StartupError(RuntimeError):
    """Raised when the library database is used before ``startup()`` or out of scope."""


@dataclass(slots=True)
class _Database:
    engine: Engine
    sessions: sessionmaker[Session]


_database: _Database | None = None


def startup(
    *,
    engine: Engine | None = None,
    database_uri: str | None = None,
    force: bool = False,
) -> None:
    """Create the engine and library tables; call once per process."""

    global _database  # noqa: PLW0603
    if _database is not None and not force:
        raise StartupError("Library database already started. Pass force=True to reconfigure.")
    resolved = engine or create_engine(database_uri or get_database_config().uri, future=True)
    start_mappers()
    create_all_tables(resolved)
    log.info("Library database ready: %s", resolved.url.render_as_string(hide_password=True))
    _database = _Database(
        engine=resolved,
        sessions=sessionmaker(bind=resolved, expire_on_commit=False),
    )


def is_started() -> bool:
    return _database is not None


def shutdown() -> None:
    """Dispose the engine and forget it (primarily for tests)."""

    global _database  # noqa: PLW0603
    if _database is not None:
        _database.engine.dispose()
    _database = None


class SqlAlchemyLibraryUnitOfWork:
    """One session over the anime library; rolls back if the block raises."""

    def __init__(self) -> None:
        if _database is None:
            raise StartupError(
                "Library database not started. Call seasonpy.adapters.sqlalchemy."
                "unit_of_work.startup() before requesting a unit of work."
            )
        self._sessions = _database.sessions
        self._session: Session | None = None
        self._repositories: LibraryRepositories | None = None

    def __enter__(self) -> SqlAlchemyLibraryUnitOfWork:
        if self._session is not None:
            raise StartupError("Unit of work already entered")
        self._session = self._sessions()
        self._repositories = LibraryRepositories(anime=SqlAlchemyAnimeRepository(self._session))
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> Literal[False]:
        session = self.session
        if exc_type is not None:
            session.rollback()
        session.close()
        self._session = None
        self._repositories = None
        return False

    @property
    def session(self) -> Session:
        if self._session is None:
            raise StartupError("Unit of work session not initialised")
        return self._session

    @property
    def repositories(self) -> LibraryRepositories:
        if self._repositories is None:
            raise StartupError("Unit of work session not initialised")
        return self._repositories

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()


if TYPE_CHECKING:
    from seasonpy.domain.ports.unit_of_work import LibraryUnitOfWork

    _uow_check: LibraryUnitOfWork = SqlAlchemyLibraryUnitOfWork()
