"""Season file parsing with lxml."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from lxml import etree
from pydantic import ValidationError

from seasonpy.domain.catalog import CatalogEntry, SeasonDocument
from seasonpy.domain.errors import SeasonParseError

from .schema import AnimePayload, IdPayload, InfoPayload
from .translator import parse_catalog_entry
from .xml import read_str

if TYPE_CHECKING:
    from seasonpy.domain.ports.services import ServiceRegistry

log = getLogger(__name__)

ROOT_TAG = "season"
_FIELDS = ("title", "type", "image", "trailer", "producers")


def _xml_parser() -> etree.XMLParser:
    return etree.XMLParser(remove_blank_text=True, resolve_entities=False, no_network=True)


def _load_root(data: bytes | str) -> etree._Element:
    raw = data.encode("utf-8") if isinstance(data, str) else data
    if not raw.strip():
        raise SeasonParseError("Empty season document")
    try:
        root = etree.fromstring(raw, parser=_xml_parser())
    except etree.XMLSyntaxError as exc:
        raise SeasonParseError(f"Malformed season document: {exc}") from exc
    if root.tag != ROOT_TAG:
        raise SeasonParseError(f"Unexpected root element <{root.tag}>, expected <{ROOT_TAG}>")
    return root


def _anime_fields(node: etree._Element) -> dict[str, object]:
    fields: dict[str, object] = {name: read_str(node, name) for name in _FIELDS}
    fields["ids"] = [
        IdPayload(name=id_node.get("name", ""), value=id_node.text or "")
        for id_node in node.iterfind("id")
    ]
    return fields


@dataclass(slots=True)
class SeasonFileParser:
    """Parse raw season file data into a ``SeasonDocument``."""

    services: ServiceRegistry

    def __call__(self, data: bytes | str) -> SeasonDocument:
        root = _load_root(data)
        info_node = root.find("info")
        info = InfoPayload()
        if info_node is not None:
            info = InfoPayload.model_validate(
                {"name": read_str(info_node, "name"), "modified": read_str(info_node, "modified")}
            )

        entries: list[CatalogEntry] = []
        for index, node in enumerate(root.iterfind("anime")):
            try:
                payload = AnimePayload.model_validate(_anime_fields(node))
            except ValidationError:
                log.warning("Skipping malformed entry #%s in %s", index, info.name or "season")
                continue
            entries.append(parse_catalog_entry(payload, services=self.services))

        return SeasonDocument(season_name=info.name, modified=info.modified, entries=tuple(entries))
