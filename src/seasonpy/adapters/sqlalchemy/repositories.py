"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from sqlalchemy import select

from seasonpy.adapters.sqlalchemy.mappings import anime_table, external_id_table
from seasonpy.domain.model import Anime

if TYPE_CHECKING:
    from collections.abc import Iterator

    from sqlalchemy.orm import Session

    from seasonpy.domain.model import AnimeId, Service


class SqlAlchemyAnimeRepository:
    """Anime library stored in a relational database."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def find_by_external_id(self, value: str, service: Service) -> Anime | None:
        stmt = (
            select(external_id_table.c.anime_id)
            .where(external_id_table.c.service == service)
            .where(external_id_table.c.value == value)
            .order_by(external_id_table.c.anime_id)
            .limit(1)
        )
        anime_id = self.session.execute(stmt).scalar_one_or_none()
        if anime_id is None:
            return None
        return self.get(anime_id)

    def get(self, anime_id: AnimeId) -> Anime | None:
        return self.session.get(Anime, anime_id)

    def insert(self, anime: Anime) -> AnimeId:
        self.session.add(anime)
        self.session.flush()
        return cast("AnimeId", anime.id)

    def update(self, anime_id: AnimeId, anime: Anime) -> None:
        existing = self.get(anime_id)
        if existing is None:
            raise LookupError(f"No anime with id #{anime_id}")
        existing.apply_catalog_fields(anime)
        self.session.flush()

    def save(self) -> None:
        self.session.commit()

    def __iter__(self) -> Iterator[Anime]:
        stmt = select(Anime).order_by(anime_table.c.id)
        return iter(self.session.scalars(stmt).all())


if TYPE_CHECKING:
    from seasonpy.domain.ports.persistence import AnimeLibrary

    _session_stub = cast("Session", object())
    _repo_check: AnimeLibrary = SqlAlchemyAnimeRepository(_session_stub)
