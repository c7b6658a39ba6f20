"""External identifiers owned by anime records."""

from __future__ import annotations

from dataclasses import dataclass

from seasonpy.domain.model.enums import Service


@dataclass(eq=False, kw_only=True)
class ExternalID:
    service: Service
    value: str


def normalize_service(value: Service | str) -> Service:
    return value if isinstance(value, Service) else Service(value)
