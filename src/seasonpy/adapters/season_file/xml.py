"""Small lxml helpers for reading and writing season files."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from lxml import etree

if TYPE_CHECKING:
    from pathlib import Path

UTF8_BOM: Final[bytes] = b"\xef\xbb\xbf"
INDENT: Final[str] = "\t"


def ensure_child(node: etree._Element, name: str) -> etree._Element:
    """Return the first child called ``name``, appending one if missing."""

    child = node.find(name)
    if child is None:
        child = etree.SubElement(node, name)
    return child


def read_str(node: etree._Element, name: str) -> str:
    child = node.find(name)
    if child is None:
        return ""
    return "".join(child.itertext())


def write_str(node: etree._Element, name: str, value: str) -> etree._Element:
    child = etree.SubElement(node, name)
    child.text = value
    return child


def write_int(node: etree._Element, name: str, value: int) -> etree._Element:
    return write_str(node, name, str(value))


def dump(node: etree._Element) -> str:
    """Serialise ``node`` (tab indented, no declaration) for logging."""

    etree.indent(node, space=INDENT)
    return etree.tostring(node, encoding="unicode")


def write_document_to_file(root: etree._Element, path: Path) -> None:
    """Write ``root`` to ``path`` with a UTF-8 BOM and tab indentation."""

    path.parent.mkdir(parents=True, exist_ok=True)
    etree.indent(root, space=INDENT)
    payload = etree.tostring(root, xml_declaration=True, encoding="UTF-8")
    path.write_bytes(UTF8_BOM + payload + b"\n")
