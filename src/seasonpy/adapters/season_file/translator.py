"""Translate season file payloads into domain catalog objects."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from seasonpy.domain.catalog import CatalogEntry

if TYPE_CHECKING:
    from seasonpy.domain.model import Service
    from seasonpy.domain.ports.services import ServiceRegistry

    from .schema import AnimePayload

log = getLogger(__name__)


def parse_catalog_entry(payload: AnimePayload, *, services: ServiceRegistry) -> CatalogEntry:
    """Build a ``CatalogEntry``; identifiers of unknown services are dropped."""

    ids: dict[Service, str] = {}
    for id_payload in payload.ids:
        service = services.service_for_name(id_payload.name)
        if service is None:
            log.debug("Ignoring id %r for unknown service %r", id_payload.value, id_payload.name)
            continue
        ids[service] = id_payload.value

    return CatalogEntry(
        ids=ids,
        title=payload.title,
        type=payload.type,
        image_url=payload.image,
        trailer_url=payload.trailer,
        producers=payload.producers,
    )
