"""Service registry resolving catalog service names."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final

from seasonpy.domain.model import Service

# Alternative spellings seen in season documents.
_ALIASES: Final[dict[str, Service]] = {
    "mal": Service.MYANIMELIST,
    "myanimelist": Service.MYANIMELIST,
    "kitsu": Service.KITSU,
    "hummingbird": Service.KITSU,
    "anilist": Service.ANILIST,
}


@dataclass(slots=True)
class StaticServiceRegistry:
    """Registry backed by the ``Service`` enum and a fixed alias table."""

    active: Service = Service.MYANIMELIST
    aliases: dict[str, Service] = field(default_factory=lambda: dict(_ALIASES))

    @classmethod
    def for_name(cls, active_service: str) -> StaticServiceRegistry:
        registry = cls()
        service = registry.service_for_name(active_service)
        if service is None:
            raise ValueError(f"Unknown service: {active_service!r}")
        registry.active = service
        return registry

    def service_for_name(self, name: str) -> Service | None:
        return self.aliases.get(name.strip().lower())

    @property
    def active_service(self) -> Service:
        return self.active


if TYPE_CHECKING:
    from seasonpy.domain.ports.services import ServiceRegistry

    _registry_check: ServiceRegistry = StaticServiceRegistry()
