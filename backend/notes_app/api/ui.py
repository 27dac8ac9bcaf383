from datetime import datetime
from pathlib import Path
from urllib.parse import urlencode

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from notes_app.api import session
from notes_app.state.note_store import NoteStore
from notes_app.storage.notes_store import BODY_MAX_LENGTH, TITLE_MAX_LENGTH

router = APIRouter(tags=["ui"])

TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

PREVIEW_CHARS = 28


def local_time(ts: str) -> str:
    try:
        return datetime.fromisoformat(ts).astimezone().strftime("%Y-%m-%d %H:%M:%S")
    except (TypeError, ValueError):
        return ts


templates.env.filters["local_time"] = local_time


def _back_home(store: NoteStore) -> RedirectResponse:
    url = "/"
    if store.search:
        url = "/?" + urlencode({"q": store.search})
    return RedirectResponse(url=url, status_code=303)


@router.get("/", response_class=HTMLResponse)
def index(request: Request, q: str | None = None, store: NoteStore = Depends(session.get_store)):
    # the search box lives in the store, so the query sticks across redirects
    if q is not None:
        store.set_search(q)
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "notes": store.visible_notes(),
            "has_notes": bool(store.notes),
            "search": store.search,
            "active_id": store.active_id,
            "selected": store.selected_note,
            "draft": store.editor,
            "preview_chars": PREVIEW_CHARS,
            "title_max": TITLE_MAX_LENGTH,
            "body_max": BODY_MAX_LENGTH,
        },
    )


@router.post("/ui/new")
def new_note(store: NoteStore = Depends(session.get_store)) -> RedirectResponse:
    store.create()
    return _back_home(store)


@router.post("/ui/select/{note_id}")
def select_note(note_id: str, store: NoteStore = Depends(session.get_store)) -> RedirectResponse:
    store.select(note_id)
    return _back_home(store)


@router.post("/ui/save")
def save_note(
    title: str = Form(""),
    body: str = Form(""),
    store: NoteStore = Depends(session.get_store),
) -> RedirectResponse:
    store.editor.set_title(title)
    store.editor.set_body(body)
    store.save_draft()
    return _back_home(store)


@router.post("/ui/delete/{note_id}")
def delete_note(
    note_id: str,
    confirm: bool = Form(False),
    store: NoteStore = Depends(session.get_store),
) -> RedirectResponse:
    if confirm:
        store.delete(note_id)
    return _back_home(store)
