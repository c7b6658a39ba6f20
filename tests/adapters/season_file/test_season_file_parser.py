from __future__ import annotations

import pytest

from seasonpy.adapters.season_file import AnimePayload, InfoPayload, SeasonFileParser
from seasonpy.domain.errors import SeasonParseError
from seasonpy.domain.model import Service
from seasonpy.domain.services import StaticServiceRegistry

SEASON_FILE = "\ufeff" + """<?xml version="1.0" encoding="UTF-8"?>
<season>
\t<info>
\t\t<name>Winter 2018</name>
\t\t<modified>1515000000</modified>
\t</info>
\t<anime>
\t\t<type>1</type>
\t\t<id name="kitsu">13600</id>
\t\t<id name="myanimelist">35062</id>
\t\t<id name="unknown-service">99</id>
\t\t<producers>Studio A, Studio B</producers>
\t\t<image>https://img.example/35062.jpg</image>
\t\t<title> Mahoutsukai no Yome </title>
\t</anime>
\t<anime>
\t\t<id name="mal">35180</id>
\t\t<title>3-gatsu no Lion 2nd Season</title>
\t\t<type>tv</type>
\t</anime>
</season>
"""


@pytest.fixture
def parser() -> SeasonFileParser:
    return SeasonFileParser(services=StaticServiceRegistry())


def test_parser_reads_header_and_entries(parser: SeasonFileParser) -> None:
    document = parser(SEASON_FILE.encode("utf-8"))

    assert document.season_name == "Winter 2018"
    assert document.modified == 1515000000
    assert len(document.entries) == 2

    first = document.entries[0]
    assert first.title == "Mahoutsukai no Yome"
    assert first.type == 1
    assert first.image_url == "https://img.example/35062.jpg"
    assert first.producers == ("Studio A", "Studio B")


def test_parser_keeps_identifier_document_order(parser: SeasonFileParser) -> None:
    document = parser(SEASON_FILE.encode("utf-8"))

    assert list(document.entries[0].ids.items()) == [
        (Service.KITSU, "13600"),
        (Service.MYANIMELIST, "35062"),
    ]


def test_parser_resolves_service_aliases_and_lenient_type(parser: SeasonFileParser) -> None:
    document = parser(SEASON_FILE.encode("utf-8"))

    second = document.entries[1]
    assert second.id_for(Service.MYANIMELIST) == "35180"
    assert second.id_for(Service.KITSU) == ""
    assert second.type == 0


def test_parser_accepts_text_input(parser: SeasonFileParser) -> None:
    text = '<season><info><name>Fall 2017</name></info></season>'

    document = parser(text)

    assert document.season_name == "Fall 2017"
    assert document.modified == 0
    assert document.entries == ()


@pytest.mark.parametrize(
    "data",
    [b"", b"<season><anime>", b"<catalog><anime/></catalog>", b"not xml at all"],
)
def test_parser_rejects_malformed_documents(parser: SeasonFileParser, data: bytes) -> None:
    with pytest.raises(SeasonParseError):
        parser(data)


def test_info_payload_accepts_iso_timestamps() -> None:
    info = InfoPayload.model_validate({"name": "Winter 2018", "modified": "2018-01-01T00:00:00Z"})

    assert info.modified == 1514764800


def test_info_payload_defaults_unreadable_timestamp_to_zero() -> None:
    assert InfoPayload.model_validate({"modified": "yesterday"}).modified == 0


def test_anime_payload_drops_blank_producers() -> None:
    payload = AnimePayload.model_validate({"producers": "A, , B,"})

    assert payload.producers == ("A", "B")
