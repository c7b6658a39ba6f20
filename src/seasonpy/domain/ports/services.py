"""Port mapping service names to service identifiers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from seasonpy.domain.model import Service


@runtime_checkable
class ServiceRegistry(Protocol):
    def service_for_name(self, name: str) -> Service | None: ...

    @property
    def active_service(self) -> Service: ...
