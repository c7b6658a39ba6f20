from __future__ import annotations

from seasonpy.domain.catalog import CatalogEntry
from seasonpy.domain.model import Service
from seasonpy.domain.reconciliation import reconcile_entry
from tests.helpers.library import FakeAnimeLibrary, make_anime


def _entry(**ids: str) -> CatalogEntry:
    services = {"mal": Service.MYANIMELIST, "kitsu": Service.KITSU}
    return CatalogEntry(
        ids={services[name]: value for name, value in ids.items()},
        title="Catalog title",
        image_url="https://img.example/a.jpg",
        producers=("Studio A", "Studio B"),
    )


def test_up_to_date_match_is_returned_untouched() -> None:
    record = make_anime(mal="1", title="Local", last_modified=2000)
    library = FakeAnimeLibrary([record])

    result = reconcile_entry(
        record,
        _entry(mal="1"),
        2000,
        library=library,
        active_service=Service.MYANIMELIST,
    )

    assert result == record.id
    assert library.updated == []
    assert record.title == "Local"


def test_up_to_date_match_is_accepted_without_active_service_id() -> None:
    record = make_anime(kitsu="k1", last_modified=2000)
    library = FakeAnimeLibrary([record])

    result = reconcile_entry(
        record,
        _entry(kitsu="k1"),
        1000,
        library=library,
        active_service=Service.MYANIMELIST,
    )

    assert result == record.id


def test_stale_match_is_updated_from_catalog() -> None:
    record = make_anime(mal="1", title="Old", last_modified=1000, synopsis="Kept")
    library = FakeAnimeLibrary([record])

    result = reconcile_entry(
        record,
        _entry(mal="1"),
        2000,
        library=library,
        active_service=Service.MYANIMELIST,
    )

    assert result == record.id
    assert library.updated == [record.id]
    assert record.title == "Catalog title"
    assert record.last_modified == 2000
    assert record.producers == ["Studio A", "Studio B"]
    assert record.synopsis == "Kept"


def test_unmatched_entry_is_inserted() -> None:
    library = FakeAnimeLibrary()

    result = reconcile_entry(
        None,
        _entry(mal="5", kitsu="k5"),
        1500,
        library=library,
        active_service=Service.MYANIMELIST,
    )

    assert result is not None
    record = library.get(result)
    assert record is not None
    assert record.source is Service.MYANIMELIST
    assert record.last_modified == 1500
    assert record.ids == {Service.MYANIMELIST: "5", Service.KITSU: "k5"}


def test_entry_without_active_service_id_is_rejected() -> None:
    library = FakeAnimeLibrary()

    result = reconcile_entry(
        None,
        _entry(kitsu="k5"),
        1500,
        library=library,
        active_service=Service.MYANIMELIST,
    )

    assert result is None
    assert library.inserted == []


def test_stale_match_without_active_service_id_is_rejected() -> None:
    record = make_anime(kitsu="k1", title="Local", last_modified=1000)
    library = FakeAnimeLibrary([record])

    result = reconcile_entry(
        record,
        _entry(kitsu="k1"),
        2000,
        library=library,
        active_service=Service.MYANIMELIST,
    )

    assert result is None
    assert library.updated == []
    assert record.title == "Local"
