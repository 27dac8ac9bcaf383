import importlib
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from notes_app.state.note_store import NoteStore
from notes_app.storage.notes_store import NotesStorage


class TickingClock:
    """Returns a new ISO timestamp one second later on every call."""

    def __init__(self, start: datetime = datetime(2026, 1, 1, tzinfo=timezone.utc)):
        self.current = start

    def __call__(self) -> str:
        self.current += timedelta(seconds=1)
        return self.current.isoformat()


@pytest.fixture()
def clock():
    return TickingClock()


@pytest.fixture()
def storage(tmp_path):
    return NotesStorage(tmp_path)


@pytest.fixture()
def store(storage, clock):
    return NoteStore(storage, clock=clock)


@pytest.fixture()
def client(tmp_path, monkeypatch):
    # isolate data dir per test
    monkeypatch.setenv("APP_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("NOTES_STORAGE_KEY", raising=False)

    # reload modules so that the session store picks up the new env vars
    import notes_app.api.session
    import notes_app.main
    importlib.reload(notes_app.api.session)
    importlib.reload(notes_app.main)

    return TestClient(notes_app.main.app)
