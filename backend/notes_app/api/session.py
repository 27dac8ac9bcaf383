import os
from pathlib import Path

from notes_app.state.note_store import NoteStore
from notes_app.storage.notes_store import STORAGE_KEY, NotesStorage

# Base data dir: repository_root/data (we are in backend/notes_app/api/)
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"
DATA_DIR = Path(os.getenv("APP_DATA_DIR", str(DEFAULT_DATA_DIR)))
STORAGE_KEY_NAME = os.getenv("NOTES_STORAGE_KEY", STORAGE_KEY)

store = NoteStore(NotesStorage(DATA_DIR, key=STORAGE_KEY_NAME))


def get_store() -> NoteStore:
    return store
