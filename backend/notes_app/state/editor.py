from typing import Optional

from notes_app.storage.notes_store import BODY_MAX_LENGTH, TITLE_MAX_LENGTH, Note


class Editor:
    """Draft title/body for the active note, kept apart from the saved note."""

    def __init__(self) -> None:
        self.title = ""
        self.body = ""

    def load(self, note: Note) -> None:
        self.title = note.title
        self.body = note.body

    def clear(self) -> None:
        self.title = ""
        self.body = ""

    # clipped like a maxLength input field
    def set_title(self, text: str) -> None:
        self.title = text[:TITLE_MAX_LENGTH]

    def set_body(self, text: str) -> None:
        self.body = text[:BODY_MAX_LENGTH]

    def is_dirty(self, note: Optional[Note]) -> bool:
        if note is None:
            return False
        return self.title != note.title or self.body != note.body
