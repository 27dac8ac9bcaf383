from notes_app.state.search import filter_notes
from notes_app.storage.notes_store import Note


def _note(note_id, title="", body="", updated="2026-01-01T00:00:00+00:00"):
    return Note(id=note_id, title=title, body=body, created="2026-01-01T00:00:00+00:00", updated=updated)


NOTES = [
    _note("old", "Shopping", "milk, eggs", "2026-01-01T08:00:00+00:00"),
    _note("new", "Meeting", "Discuss SHOPPING budget", "2026-01-03T08:00:00+00:00"),
    _note("mid", "Ideas", "nothing here", "2026-01-02T08:00:00+00:00"),
]


def test_empty_query_returns_all_sorted_by_updated_desc():
    assert [n.id for n in filter_notes(NOTES, "")] == ["new", "mid", "old"]


def test_query_matches_title_or_body_case_insensitively():
    assert [n.id for n in filter_notes(NOTES, "shopping")] == ["new", "old"]
    assert [n.id for n in filter_notes(NOTES, "IDEAS")] == ["mid"]
    assert [n.id for n in filter_notes(NOTES, "EGGS")] == ["old"]


def test_no_match_returns_empty_list():
    assert filter_notes(NOTES, "zebra") == []


def test_ties_keep_input_order():
    same = "2026-01-01T00:00:00+00:00"
    notes = [_note("a", updated=same), _note("b", updated=same), _note("c", updated=same)]
    assert [n.id for n in filter_notes(notes, "")] == ["a", "b", "c"]


def test_mixed_timestamp_formats_sort_chronologically():
    notes = [
        _note("utc-z", updated="2024-05-01T10:00:00.000Z"),
        _note("offset", updated="2024-05-01T12:30:00+02:00"),  # 10:30 UTC
    ]
    assert [n.id for n in filter_notes(notes, "")] == ["offset", "utc-z"]


def test_unparsable_updated_sorts_last():
    notes = [_note("broken", updated=""), _note("ok", updated="2026-01-01T00:00:00+00:00")]
    assert [n.id for n in filter_notes(notes, "")] == ["ok", "broken"]


def test_input_is_not_mutated():
    notes = list(NOTES)
    filter_notes(notes, "")
    assert notes == NOTES
