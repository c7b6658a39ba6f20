"""SQLAlchemy mapping metadata for the seasonpy domain model."""

from __future__ import annotations

import logging
from functools import cache
from typing import TYPE_CHECKING

from sqlalchemy import (
    JSON,
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    String,
    Table,
    UniqueConstraint,
    orm,
)
from sqlalchemy.orm import composite, relationship

from seasonpy.domain.model import AgeRating, Anime, ExternalID, PartialDate, Service

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)

mapper_registry = orm.registry()
mapper_registry.metadata.naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_label)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

# Core tables -----------------------------------------------------------------

anime_table = Table(
    "anime",
    mapper_registry.metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("source", Enum(Service, native_enum=False), nullable=True),
    Column("last_modified", Integer, nullable=False, default=0),
    Column("title", String, nullable=False, default=""),
    Column("type", Integer, nullable=False, default=0),
    Column("image_url", String, nullable=False, default=""),
    Column("trailer_url", String, nullable=False, default=""),
    Column("producers", JSON, nullable=False, default=list),
    Column("genres", JSON, nullable=False, default=list),
    Column("age_rating", Enum(AgeRating, native_enum=False), nullable=True),
    Column("start_year", Integer, nullable=True),
    Column("start_month", Integer, nullable=True),
    Column("start_day", Integer, nullable=True),
    Column("synopsis", String, nullable=True),
)

external_id_table = Table(
    "anime_external_id",
    mapper_registry.metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "anime_id",
        Integer,
        ForeignKey("anime.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("service", Enum(Service, native_enum=False), nullable=False),
    Column("value", String, nullable=False),
    UniqueConstraint("anime_id", "service", name="uq_anime_external_id_service"),
    Index("ix_anime_external_id_lookup", "service", "value"),
)


@cache
def start_mappers() -> orm.registry:
    """Configure SQLAlchemy mappers for the domain model."""

    log.info("Starting SQLAlchemy mappers")

    mapper_registry.map_imperatively(ExternalID, external_id_table)
    mapper_registry.map_imperatively(
        Anime,
        anime_table,
        properties={
            "_external_ids": relationship(
                ExternalID,
                cascade="all, delete-orphan",
                order_by=external_id_table.c.id,
            ),
            "date_start": composite(
                PartialDate,
                anime_table.c.start_year,
                anime_table.c.start_month,
                anime_table.c.start_day,
            ),
        },
    )
    return mapper_registry


def create_all_tables(engine: Engine) -> None:
    mapper_registry.metadata.create_all(engine)
