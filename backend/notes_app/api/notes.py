from fastapi import APIRouter, Depends, HTTPException, Response

from notes_app.api import session
from notes_app.models.notes import NoteOut, NoteSave
from notes_app.state.note_store import NoteStore
from notes_app.state.search import filter_notes

router = APIRouter(prefix="/notes", tags=["notes"])


@router.get("", response_model=list[NoteOut])
def list_notes(q: str = "", store: NoteStore = Depends(session.get_store)) -> list[NoteOut]:
    return [NoteOut(**n.to_dict()) for n in filter_notes(store.notes, q)]


@router.post("", response_model=NoteOut, status_code=201)
def create_note(store: NoteStore = Depends(session.get_store)) -> NoteOut:
    note = store.create()
    return NoteOut(**note.to_dict())


@router.get("/{note_id}", response_model=NoteOut)
def get_note(note_id: str, store: NoteStore = Depends(session.get_store)) -> NoteOut:
    note = store.get(note_id)
    if note is None:
        raise HTTPException(status_code=404, detail="Note not found")
    return NoteOut(**note.to_dict())


@router.put("/{note_id}", response_model=NoteOut)
def save_note(note_id: str, payload: NoteSave, store: NoteStore = Depends(session.get_store)) -> NoteOut:
    saved = store.save(note_id, title=payload.title, body=payload.body)
    if saved is None:
        raise HTTPException(status_code=404, detail="Note not found")
    return NoteOut(**saved.to_dict())


# Deleting is permanent, so the caller has to confirm explicitly.
@router.delete("/{note_id}", status_code=204, response_class=Response)
def delete_note(note_id: str, confirm: bool = False, store: NoteStore = Depends(session.get_store)) -> Response:
    if store.get(note_id) is None:
        raise HTTPException(status_code=404, detail="Note not found")
    if not confirm:
        raise HTTPException(status_code=409, detail="Confirmation required")
    store.delete(note_id)
    return Response(status_code=204)
