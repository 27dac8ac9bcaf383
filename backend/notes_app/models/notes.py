from typing import Optional

from pydantic import BaseModel, Field

from notes_app.storage.notes_store import BODY_MAX_LENGTH, TITLE_MAX_LENGTH


class NoteSave(BaseModel):
    title: str = Field(default="", max_length=TITLE_MAX_LENGTH)
    body: str = Field(default="", max_length=BODY_MAX_LENGTH)


class NoteOut(BaseModel):
    id: str
    title: str
    body: str
    created: str
    updated: str


class DraftUpdate(BaseModel):
    title: Optional[str] = Field(default=None, max_length=TITLE_MAX_LENGTH)
    body: Optional[str] = Field(default=None, max_length=BODY_MAX_LENGTH)


class SelectRequest(BaseModel):
    note_id: str = ""


class EditorOut(BaseModel):
    active_id: str
    title: str
    body: str
    dirty: bool
