from datetime import datetime, timezone
from typing import Iterable

from notes_app.storage.notes_store import Note, parse_timestamp

_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


def _updated_key(note: Note) -> datetime:
    return parse_timestamp(note.updated) or _OLDEST


def matches(note: Note, query: str) -> bool:
    q = query.lower()
    return q in note.title.lower() or q in note.body.lower()


def filter_notes(notes: Iterable[Note], query: str = "") -> list[Note]:
    """Notes whose title or body contains `query` (case-insensitive),
    most recently updated first. An empty query keeps every note.
    """
    query = query or ""
    hits = [n for n in notes if matches(n, query)]
    # sorted() is stable with reverse=True, so ties keep input order
    return sorted(hits, key=_updated_key, reverse=True)
