"""Ports for persisting library records."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterator

    from seasonpy.domain.model import Anime, AnimeId, Service


@runtime_checkable
class AnimeLibrary(Protocol):
    """Persistence contract for the local anime library.

    Iteration yields records in insertion order. ``insert`` and ``update`` are
    expected to be atomic with respect to ``find_by_external_id``.
    """

    def find_by_external_id(self, value: str, service: Service) -> Anime | None: ...

    def get(self, anime_id: AnimeId) -> Anime | None: ...

    def insert(self, anime: Anime) -> AnimeId: ...

    def update(self, anime_id: AnimeId, anime: Anime) -> None: ...

    def save(self) -> None: ...

    def __iter__(self) -> Iterator[Anime]: ...
