from fastapi import APIRouter, Depends, HTTPException

from notes_app.api import session
from notes_app.models.notes import DraftUpdate, EditorOut, NoteOut, SelectRequest
from notes_app.state.note_store import NoteStore

router = APIRouter(prefix="/editor", tags=["editor"])


def _editor_state(store: NoteStore) -> EditorOut:
    return EditorOut(
        active_id=store.active_id,
        title=store.editor.title,
        body=store.editor.body,
        dirty=store.editor.is_dirty(store.selected_note),
    )


@router.get("", response_model=EditorOut)
def get_editor(store: NoteStore = Depends(session.get_store)) -> EditorOut:
    return _editor_state(store)


@router.post("/select", response_model=EditorOut)
def select_note(payload: SelectRequest, store: NoteStore = Depends(session.get_store)) -> EditorOut:
    store.select(payload.note_id)
    return _editor_state(store)


@router.patch("", response_model=EditorOut)
def update_draft(payload: DraftUpdate, store: NoteStore = Depends(session.get_store)) -> EditorOut:
    if payload.title is not None:
        store.editor.set_title(payload.title)
    if payload.body is not None:
        store.editor.set_body(payload.body)
    return _editor_state(store)


@router.post("/save", response_model=NoteOut)
def save_draft(store: NoteStore = Depends(session.get_store)) -> NoteOut:
    saved = store.save_draft()
    if saved is None:
        raise HTTPException(status_code=409, detail="No active note")
    return NoteOut(**saved.to_dict())
