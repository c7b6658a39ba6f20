"""Season file writer."""

from __future__ import annotations

from typing import TYPE_CHECKING

from lxml import etree

from .parser import ROOT_TAG
from .xml import dump, ensure_child, write_document_to_file, write_int, write_str

if TYPE_CHECKING:
    from pathlib import Path

    from seasonpy.domain.catalog import CatalogEntry, SeasonDocument
    from seasonpy.domain.model import Anime


def _append_entry(parent: etree._Element, entry: CatalogEntry) -> etree._Element:
    node = etree.SubElement(parent, "anime")
    for service, value in entry.ids.items():
        id_node = write_str(node, "id", value)
        id_node.set("name", service.value)
    write_str(node, "title", entry.title)
    write_int(node, "type", entry.type)
    write_str(node, "image", entry.image_url)
    write_str(node, "trailer", entry.trailer_url)
    write_str(node, "producers", ", ".join(entry.producers))
    return node


def build_season_element(document: SeasonDocument) -> etree._Element:
    root = etree.Element(ROOT_TAG)
    info = ensure_child(root, "info")
    ensure_child(info, "name").text = document.season_name
    ensure_child(info, "modified").text = str(document.modified)
    for entry in document.entries:
        _append_entry(root, entry)
    return root


def write_season_document(document: SeasonDocument, path: Path) -> None:
    write_document_to_file(build_season_element(document), path)


def render_entry(anime: Anime) -> str:
    """Render ``anime`` as an ``<anime>`` fragment ready to paste into a season file."""

    node = etree.Element("anime")
    write_int(node, "type", anime.type)
    for external in anime.external_ids:
        id_node = write_str(node, "id", external.value)
        id_node.set("name", external.service.value)
    write_str(node, "producers", ", ".join(anime.producers))
    write_str(node, "image", anime.image_url)
    write_str(node, "title", anime.title)
    return dump(node)
