from datetime import date

import pytest

from session_notes.catalog import Snapshot
from session_notes.errors import DanglingReferenceWarning, NoteNotFoundError


def test_related_and_by_date_example():
    snap = Snapshot.build([
        {"id": "a", "title": "A", "date": "2022-06-07", "related": ["b"]},
        {"id": "b", "title": "B", "date": "2022-06-08"},
    ])
    query = snap.query
    b = query.get("b")
    assert query.related("a") == [b]
    assert query.related("b") == []
    assert query.by_date("2022-06-07") == [query.get("a")]


def test_related_omits_dangling_targets():
    snap = Snapshot.build([
        {"id": "a", "title": "A", "date": "2022-06-07", "related": ["z"]},
    ])
    assert snap.warnings == (DanglingReferenceWarning("a", "z"),)
    assert snap.query.related("a") == []


def test_related_preserves_listing_order(query):
    titles = [d.title for d in query.related("whats-new-swift")]
    assert titles == [
        "Meet distributed actors in Swift",
        "Eliminate data races using Swift Concurrency",
    ]


def test_related_unknown_id_raises(query):
    with pytest.raises(NoteNotFoundError):
        query.related("missing")


def test_by_date_preserves_attendance_order(query):
    ids = [d.id for d in query.by_date(date(2022, 6, 7))]
    assert ids == ["whats-new-swift", "whats-new-swiftui"]


def test_by_date_with_no_sessions_is_empty(query):
    assert query.by_date("2022-06-10") == []


def test_by_date_rejects_malformed_date(query):
    with pytest.raises(ValueError):
        query.by_date("last tuesday")


def test_search_is_case_insensitive_and_restartable(query):
    results = query.search("SWIFTUI")
    expected = ["whats-new-swiftui", "swiftui-navigation"]
    assert [d.id for d in results] == expected
    assert [d.id for d in results] == expected


def test_search_without_matches_or_term(query):
    assert list(query.search("xcode cloud")) == []
    assert list(query.search("")) == []


def test_search_matches_whitespace_literally():
    snap = Snapshot.build([
        {"id": "a", "title": "What's new in Swift", "date": "2022-06-07"},
        {"id": "b", "title": "Swift Playgrounds", "date": "2022-06-07"},
    ])
    assert [d.id for d in snap.query.search("Swift ")] == ["b"]
    assert [d.id for d in snap.query.search(" swift")] == ["a"]
    assert list(snap.query.search("   ")) == []


@pytest.mark.parametrize("value", ["20220607", "2022-W23-2", "07/06/2022"])
def test_by_date_requires_dashed_iso_format(query, value):
    with pytest.raises(ValueError):
        query.by_date(value)


def test_days_in_first_seen_order(query):
    assert query.days() == (date(2022, 6, 7), date(2022, 6, 8), date(2022, 6, 9))


def test_index_holds_only_ids(snapshot):
    for day in snapshot.index.days():
        for doc_id in snapshot.index.ids_for(day):
            assert isinstance(doc_id, str)
            assert doc_id in snapshot.store
