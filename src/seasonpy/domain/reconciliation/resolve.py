"""Identity resolution of catalog entries against the local library.

Matching policy: walk the entry's identifiers in document order and return the
first library record that any of them points to. When later identifiers would
have matched a different record, the first match still wins; the conflict is
only logged.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

    from seasonpy.domain.model import Anime, Service
    from seasonpy.domain.ports.persistence import AnimeLibrary

log = getLogger(__name__)


def resolve_identity(ids: Mapping[Service, str], *, library: AnimeLibrary) -> Anime | None:
    """Return the first library record matching any of ``ids``."""

    match: Anime | None = None
    for service, value in ids.items():
        if not value:
            continue
        candidate = library.find_by_external_id(value, service)
        if candidate is None:
            continue
        if match is None:
            match = candidate
            continue
        if candidate.id != match.id:
            log.debug(
                "Ambiguous identity: %s:%s points to #%s, keeping #%s",
                service,
                value,
                candidate.id,
                match.id,
            )
    return match
