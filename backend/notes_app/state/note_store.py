import logging
from dataclasses import replace
from typing import Callable, Optional

from notes_app.state.editor import Editor
from notes_app.state.search import filter_notes
from notes_app.storage.notes_store import (
    BODY_MAX_LENGTH,
    TITLE_MAX_LENGTH,
    Note,
    NotesStorage,
    new_note_id,
    parse_timestamp,
    utc_now_iso,
)

logger = logging.getLogger(__name__)


class NoteStore:
    """Owns the note collection, the active selection, the editor draft and
    the search query.

    All changes go through the methods below. Every change to the collection
    is mirrored to `storage` right away; a failed write leaves the in-memory
    collection as the source of truth for the session.
    """

    def __init__(self, storage: NotesStorage, clock: Callable[[], str] = utc_now_iso):
        self.storage = storage
        self.clock = clock
        self._notes: list[Note] = storage.load()
        self._active_id = ""
        self.editor = Editor()
        self.search = ""

    @property
    def notes(self) -> tuple[Note, ...]:
        return tuple(self._notes)

    @property
    def active_id(self) -> str:
        return self._active_id

    @property
    def selected_note(self) -> Optional[Note]:
        return self.get(self._active_id) if self._active_id else None

    def get(self, note_id: str) -> Optional[Note]:
        for n in self._notes:
            if n.id == note_id:
                return n
        return None

    def _commit(self, notes: list[Note]) -> None:
        self._notes = notes
        self.storage.save(self._notes)

    def create(self) -> Note:
        now = self.clock()
        note = Note(
            id=new_note_id(n.id for n in self._notes),
            title="",
            body="",
            created=now,
            updated=now,
        )
        self._commit([note, *self._notes])
        self._active_id = note.id
        self.editor.load(note)
        logger.debug("Created note %s", note.id)
        return note

    def delete(self, note_id: str) -> bool:
        remaining = [n for n in self._notes if n.id != note_id]
        if len(remaining) == len(self._notes):
            return False
        self._commit(remaining)
        if self._active_id == note_id:
            self._active_id = ""
            self.editor.clear()
        logger.debug("Deleted note %s", note_id)
        return True

    def save(self, note_id: str, title: str, body: str) -> Optional[Note]:
        if len(title) > TITLE_MAX_LENGTH:
            raise ValueError(f"title exceeds {TITLE_MAX_LENGTH} characters")
        if len(body) > BODY_MAX_LENGTH:
            raise ValueError(f"body exceeds {BODY_MAX_LENGTH} characters")

        existing = self.get(note_id)
        if existing is None:
            return None

        # updated never goes behind created
        updated = self.clock()
        now_ts = parse_timestamp(updated)
        created_ts = parse_timestamp(existing.created)
        if now_ts is not None and created_ts is not None and now_ts < created_ts:
            updated = existing.created
        saved = replace(existing, title=title, body=body, updated=updated)
        self._commit([saved if n.id == note_id else n for n in self._notes])
        if note_id == self._active_id:
            self.editor.load(saved)
        logger.debug("Saved note %s", note_id)
        return saved

    def save_draft(self) -> Optional[Note]:
        if not self._active_id:
            return None
        return self.save(self._active_id, self.editor.title, self.editor.body)

    def select(self, note_id: str) -> Optional[Note]:
        # unsaved draft edits are dropped on every switch
        note = self.get(note_id) if note_id else None
        if note is None:
            # an unknown id leaves nothing selected rather than a dangling id
            self._active_id = ""
            self.editor.clear()
            return None
        self._active_id = note.id
        self.editor.load(note)
        return note

    def set_search(self, query: Optional[str]) -> None:
        self.search = query or ""

    def visible_notes(self) -> list[Note]:
        return filter_notes(self._notes, self.search)
